"""
Parser generators rarely emit one big string. They emit a tree of snippets, each of
which may remember where in the grammar it came from, so that a source map can be
produced later. The snippets get stitched together only at the very end.

This module provides that tree. A node holds an ordered list of children, and each
child is either a text fragment or another node. The position fields are carried
along for the benefit of whoever might care; nothing in the typing pass reads them.

Order is everything: rendering is a left-to-right walk of the fragments.
Ownership is strict: a node belongs to one parent at a time. Nothing here enforces
that beyond refusing the most obvious cycle, so code which re-parents a subtree
should take care to detach it (or work on a copy) first.
"""

__all__ = ['SourceNode', 'GrammarOutput']

import re
from typing import Iterator, Optional

# Javascript ends a line only at these; form feeds, vertical tabs and NEL are mere whitespace.
JS_LINE = re.compile(r"[^\r\n\u2028\u2029]*(?:\r\n|[\r\n\u2028\u2029])?")


class SourceNode:
	__slots__ = ('line', 'column', 'source', 'children', 'name')

	def __init__(self, line:int=None, column:int=None, source:str=None, chunks=None, name:str=None):
		self.line = line
		self.column = column
		self.source = source
		self.name = name
		self.children = []
		if chunks is not None: self.add(chunks)

	def __repr__(self):
		return "<SourceNode %s:%s:%s %d children>"%(self.source, self.line, self.column, len(self.children))

	def _check(self, chunk):
		if chunk is self: raise ValueError("A node cannot contain itself.")
		if not isinstance(chunk, (str, SourceNode)):
			raise TypeError("Expected a string or SourceNode; got %r"%(chunk,))
		return chunk

	def add(self, chunk) -> "SourceNode":
		""" Append a fragment, a node, or a list of either. """
		if isinstance(chunk, list):
			for each in chunk: self.children.append(self._check(each))
		else:
			self.children.append(self._check(chunk))
		return self

	def prepend(self, chunk) -> "SourceNode":
		"""
		Insert in front of everything already here. A list goes in as a block,
		keeping its own order. Successive prepends therefore stack in reverse:
		whatever is prepended last ends up first.
		"""
		if isinstance(chunk, list):
			self.children[0:0] = [self._check(each) for each in chunk]
		else:
			self.children.insert(0, self._check(chunk))
		return self

	def fragments(self) -> Iterator[str]:
		""" Yield the text fragments in rendering order, depth-first. """
		for child in self.children:
			if isinstance(child, str): yield child
			else: yield from child.fragments()

	def to_string(self) -> str:
		return ''.join(self.fragments())

	__str__ = to_string

	def copy(self) -> "SourceNode":
		""" Deep structural copy. Strings are immutable, so they are shared. """
		twin = SourceNode(self.line, self.column, self.source, name=self.name)
		twin.children = [c if isinstance(c, str) else c.copy() for c in self.children]
		return twin

	def depth(self) -> int:
		""" Nesting depth below this node; a node with only text children has depth zero. """
		return max((c.depth()+1 for c in self.children if isinstance(c, SourceNode)), default=0)

	@classmethod
	def from_text(cls, text:str, source:Optional[str]=None) -> "SourceNode":
		"""
		Build a tree from plain text: one child node per Javascript line, each
		remembering its line number. Line endings stay on their lines, so rendering the
		result gives back exactly the original text.
		"""
		root = cls(source=source)
		lines = (m.group() for m in JS_LINE.finditer(text) if m.group())
		for row, line in enumerate(lines, 1):
			root.add(cls(row, 0, source, [line]))
		return root


class GrammarOutput:
	"""
	The record the upstream compiler hands over once it has generated code.
	The typing pass looks at exactly one thing here: the `code` tree, which it replaces.
	"""
	def __init__(self, code:Optional[SourceNode]=None, **extra):
		self.code = code
		self.__dict__.update(extra)
