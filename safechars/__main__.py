"""
Build a code-point filter from Unicode block names and loose characters,
then show exactly which code points it lets through, as a table of ranges.

Block names match loosely: "basic latin", "Basic_Latin" and "BASICLATIN" are all the same.
Use --list-blocks to see what names are available.
"""

import sys, argparse

from safechars import blocks, pretty
from safechars import filter as filtering
from safechars.interfaces import FilterError

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m safechars', description=__doc__,)
	parser.add_argument('block', nargs='*', help='names of Unicode blocks to allow')
	parser.add_argument('-c', '--chars', default='', help='additional characters to allow')
	parser.add_argument('-x', '--forbid-chars', default='', dest='forbid_chars', help='characters to forbid, applied after everything is allowed')
	parser.add_argument('-f', '--forbid-block', action='append', default=[], dest='forbid_block', help='name of a block to forbid (may be repeated)')
	parser.add_argument('--csv', help='also write the table of ranges to this CSV file')
	parser.add_argument('--list-blocks', action='store_true', dest='list_blocks', help='list the standard blocks and exit')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about what each bulk operation did.")
	return parser.parse_args(argv)

def build_filter(args) -> filtering.CodePointFilter:
	return (
		filtering.CodePointFilter(*map(blocks.find, args.block))
		.allow_chars(args.chars)
		.forbid_blocks(*map(blocks.find, args.forbid_block))
		.forbid_chars(args.forbid_chars)
	)

def main(args):
	if args.verbose: filtering.VERBOSE = True
	if args.list_blocks:
		pretty.print_grid(pretty.block_rows())
		return 0
	try: cpf = build_filter(args)
	except FilterError as e:
		print(e, file=sys.stderr)
		return 1
	grid = pretty.range_rows(cpf)
	if len(grid) > 1: pretty.print_grid(grid)
	print('%d code points allowed.'%len(cpf))
	if args.csv:
		pretty.write_csv_grid(args.csv, grid)
		print('Wrote ranges in CSV format to:')
		print('\t'+args.csv)
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
