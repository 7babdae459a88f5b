""" Bits and bobs in support of visualizing source trees. """

from .sourcenode import SourceNode

ELLIPSIS = '…'

def excerpt(text:str, width=48) -> str:
	text = text.rstrip('\n').replace('\n', '↵').replace('\t', ' ')
	return text if len(text) <= width else text[:width-1] + ELLIPSIS

def outline(node:SourceNode, depth=0) -> list:
	""" One row per node and per text fragment, depth-first, with a header row on top. """
	rows = [['depth', 'kind', 'where', 'text']] if depth == 0 else []
	where = '' if node.line is None else '%s:%d'%(node.source or '', node.line)
	rows.append([depth, 'node', where, '%d children'%len(node.children)])
	for child in node.children:
		if isinstance(child, str): rows.append([depth+1, 'text', '', excerpt(child)])
		else: rows.extend(outline(child, depth+1))
	return rows

def print_grid(grid):
	lens = list(map(len, grid))
	assert len(set(lens)) == 1, lens
	grid = [[str(cell) for cell in row] for row in grid]
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '─'
	vertical = ' │ '
	upper = horizontal + '┬' + horizontal
	inner = horizontal + '┼' + horizontal
	lower = horizontal + '┴' + horizontal
	segments = [horizontal*w for w in width]
	print(upper.join(segments))
	for r, row in enumerate(grid):
		if r == 1: print(inner.join(segments))
		print(vertical.join(s.ljust(w, ' ') for s, w in zip(row, width)))
	print(lower.join(segments))

def print_outline(node:SourceNode):
	print_grid(outline(node))
