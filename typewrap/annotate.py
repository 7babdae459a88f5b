"""
The generated parser is plain JavaScript, and a TypeScript compiler in strict mode
will reject most of it. There is no way to tell the compiler to ignore a block of
code ( https://github.com/Microsoft/TypeScript/issues/19573 ), and a whole-file
`@ts-nocheck` would switch off checking for the declarations we add as well.

So the approach here is blunt: put a suppression marker before every line that
looks like code. Each text fragment in the tree is taken to be one line.
There is no understanding of JavaScript involved, just a glance at each line.
"""

import re
from .interfaces import SUPPRESSION_MARKER, LINE_COMMENT
from .sourcenode import SourceNode

LETTER = re.compile(r'[a-zA-Z]')

def needs_marker(line:str) -> bool:
	""" Determine if a line has content worth suppressing. """
	line = line.strip()
	if not line or line.startswith(LINE_COMMENT): return False
	# Pure punctuation, like a lone closing brace, never upsets the checker.
	return LETTER.search(line) is not None

def annotate_lines(code:SourceNode):
	""" Insert a suppression marker before every line of `code` which needs one. Works in place. """
	if not code.children: return
	children = list(code.children)
	code.children.clear()
	for child in children:
		if isinstance(child, str):
			if needs_marker(child): code.children.append(SUPPRESSION_MARKER)
			code.children.append(child)
		elif isinstance(child, SourceNode):
			annotate_lines(child)
			code.children.append(child)

def count_markers(code:SourceNode) -> int:
	return sum(1 for fragment in code.fragments() if fragment == SUPPRESSION_MARKER)
