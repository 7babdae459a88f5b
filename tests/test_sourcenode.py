import unittest
from typewrap.sourcenode import SourceNode, GrammarOutput

class SourceNodeTests(unittest.TestCase):
	def test_add_and_render(self):
		node = SourceNode(1, 0, "a.js", "var a;\n")
		node.add(["var b;\n", SourceNode(chunks="var c;\n")])
		self.assertEqual("var a;\nvar b;\nvar c;\n", node.to_string())
		self.assertEqual(node.to_string(), str(node))

	def test_prepend_stacks_in_reverse(self):
		node = SourceNode(chunks="body")
		node.prepend("first ")
		node.prepend("second ")
		self.assertEqual(["second ", "first ", "body"], node.children)

	def test_prepend_list_keeps_order(self):
		node = SourceNode(chunks="c")
		node.prepend(["a", "b"])
		self.assertEqual("abc", node.to_string())

	def test_rejects_bogus_chunks(self):
		node = SourceNode()
		with self.assertRaises(TypeError): node.add(42)
		with self.assertRaises(TypeError): node.prepend([None])
		with self.assertRaises(ValueError): node.add(node)

	def test_copy_is_deep(self):
		inner = SourceNode(chunks=["x\n"])
		outer = SourceNode(chunks=[inner, "y\n"])
		twin = outer.copy()
		self.assertEqual(outer.to_string(), twin.to_string())
		self.assertIsNot(outer.children[0], twin.children[0])
		twin.children[0].add("z\n")
		self.assertEqual("x\ny\n", outer.to_string())

	def test_from_text(self):
		text = "one\r\ntwo\n\nthree"
		node = SourceNode.from_text(text, source="t.js")
		self.assertEqual(text, node.to_string())
		self.assertEqual(4, len(node.children))
		self.assertEqual([1, 2, 3, 4], [c.line for c in node.children])
		self.assertEqual("t.js", node.children[2].source)
		self.assertEqual(1, node.depth())

	def test_from_text_breaks_only_at_javascript_line_ends(self):
		text = '  var s = "page\x0cbreak";\n  var t = "nel\x85x";\r  var u = "v\x0bw\x1cz";\u2028end'
		node = SourceNode.from_text(text)
		self.assertEqual(text, node.to_string())
		self.assertEqual([
			['  var s = "page\x0cbreak";\n'],
			['  var t = "nel\x85x";\r'],
			['  var u = "v\x0bw\x1cz";\u2028'],
			['end'],
		], [c.children for c in node.children])

	def test_from_text_empty(self):
		self.assertEqual([], SourceNode.from_text("").children)

	def test_grammar_output(self):
		code = SourceNode()
		output = GrammarOutput(code, rules=[])
		self.assertIs(code, output.code)
		self.assertEqual([], output.rules)
		self.assertIsNone(GrammarOutput().code)

if __name__ == '__main__':
	unittest.main()
