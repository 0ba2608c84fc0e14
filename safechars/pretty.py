""" Bits and bobs in support of seeing what a filter actually allows. """
import csv, sys

from . import blocks

def describe(code_point:int) -> str:
	return "U+%04X"%code_point

def range_rows(a_filter) -> list:
	""" One row per maximal run of allowed code points: first, last, count, and the block it starts in. """
	rows = [['first', 'last', 'count', 'block']]
	for first, last in a_filter.allowed_ranges():
		rows.append([describe(first), describe(last), last - first + 1, blocks.containing(first) or '(unassigned)'])
	return rows

def block_rows() -> list:
	rows = [['first', 'last', 'size', 'name']]
	for name, block in blocks.STANDARD.items():
		rows.append([describe(block.first_code_point), describe(block.last_code_point), block.block_size, name])
	return rows

def print_grid(grid, file=None):
	"""
	The first row of the grid is its header, underlined.
	A column holding only integers right-aligns; any other column left-aligns.
	"""
	file = file or sys.stdout
	header, *body = grid
	assert all(len(row) == len(header) for row in body), [len(row) for row in grid]
	width = [max(len(str(cell)) for cell in column) for column in zip(*grid)]
	numeric = [bool(body) and all(isinstance(row[i], int) for row in body) for i in range(len(header))]
	def line(row):
		cells = (str(cell).rjust(w) if num else str(cell).ljust(w) for cell, w, num in zip(row, width, numeric))
		return ' │ '.join(cells).rstrip()
	print(line(header), file=file)
	print('─┼─'.join('─'*w for w in width), file=file)
	for row in body: print(line(row), file=file)

def write_csv_grid(path, grid):
	with open(path, 'w', newline="", encoding='utf-8') as fh:
		csv.writer(fh).writerows(grid)
