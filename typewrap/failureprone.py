"""
This module is about easing over the process of displaying where things go wrong.

The only text the typing pass ever complains about is a configured name, which is
short and fits on one line. So the whole story is a picture: the offending line,
with a caret under the character at fault.
"""

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption

def first_difference(left:str, right:str) -> int:
	""" Index of the first position where the two strings disagree; the shorter length if one is a prefix of the other. """
	for i, (a, b) in enumerate(zip(left, right)):
		if a != b: return i
	return min(len(left), len(right))
