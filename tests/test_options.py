import unittest
import os, json, tempfile
from typewrap.options import Options, load_options
from typewrap.interfaces import OptionsError, DEFAULT_ERROR_NAME

class OptionsTests(unittest.TestCase):
	def test_defaults(self):
		options = Options()
		self.assertIsNone(options.custom_header)
		self.assertEqual(DEFAULT_ERROR_NAME, options.error_name)
		self.assertFalse(options.trace)
		self.assertEqual(options, Options.from_mapping({}))

	def test_plugin_shape(self):
		options = Options.from_mapping({"trace": True, "tspegjs": {"customHeader": "import a from 'b';", "errorName": "Foo"}})
		self.assertEqual(Options("import a from 'b';", "Foo", True), options)

	def test_blanks_mean_default(self):
		options = Options.from_mapping({"trace": None, "tspegjs": {"customHeader": "", "errorName": ""}})
		self.assertEqual(Options(), options)

	def test_bad_types(self):
		for mapping in [
			[],
			{"tspegjs": "nope"},
			{"trace": "yes"},
			{"tspegjs": {"errorName": 7}},
			{"tspegjs": {"customHeader": ["import a from 'b';"]}},
		]:
			with self.subTest(mapping=mapping):
				with self.assertRaises(OptionsError): Options.from_mapping(mapping)

	def test_overridden(self):
		base = Options("// header", "Foo", True)
		self.assertEqual(base, base.overridden())
		self.assertEqual(Options("// header", "Bar", True), base.overridden(error_name="Bar"))
		self.assertEqual(Options("// other", "Foo", False), base.overridden(custom_header="// other", trace=False))

	def test_immutable(self):
		with self.assertRaises(AttributeError): Options().trace = True


class LoadOptionsTests(unittest.TestCase):
	def setUp(self):
		self.folder = tempfile.TemporaryDirectory()
		self.path = os.path.join(self.folder.name, 'options.json')

	def tearDown(self):
		self.folder.cleanup()

	def test_load(self):
		with open(self.path, 'w') as fh: json.dump({"trace": True, "tspegjs": {"errorName": "CalcError"}}, fh)
		self.assertEqual(Options(None, "CalcError", True), load_options(self.path))

	def test_bad_json(self):
		with open(self.path, 'w') as fh: fh.write("{trace: true")
		with self.assertRaises(OptionsError): load_options(self.path)

	def test_missing_file(self):
		with self.assertRaises(OptionsError): load_options(self.path)

if __name__ == '__main__':
	unittest.main()
