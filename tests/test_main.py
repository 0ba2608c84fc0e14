import io, os, tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from safechars import __main__ as cli, pretty, blocks
from safechars import filter as filtering
from safechars.filter import CodePointFilter


class TestPretty(unittest.TestCase):
	def test_00_describe(self):
		self.assertEqual('U+0041', pretty.describe(0x41))
		self.assertEqual('U+FFFF', pretty.describe(0xFFFF))

	def test_01_range_rows(self):
		cpf = CodePointFilter(blocks.BASIC_LATIN).forbid_char('x').allow_char(0x0870)
		self.assertEqual([
			['first', 'last', 'count', 'block'],
			['U+0000', 'U+0077', 0x78, 'Basic Latin'],
			['U+0079', 'U+007F', 7, 'Basic Latin'],
			['U+0870', 'U+0870', 1, '(unassigned)'],
		], pretty.range_rows(cpf))

	def test_02_print_grid(self):
		out = io.StringIO()
		pretty.print_grid([['name', 'n'], ['Lao', 5], ['Thai', 12]], file=out)
		self.assertEqual([
			'name │  n',
			'─────┼───',
			'Lao  │  5',
			'Thai │ 12',
		], out.getvalue().splitlines())

	def test_03_write_csv_grid(self):
		with tempfile.TemporaryDirectory() as tmp:
			path = os.path.join(tmp, 'ranges.csv')
			pretty.write_csv_grid(path, pretty.range_rows(CodePointFilter(blocks.SPECIALS)))
			with open(path, newline='') as fh: text = fh.read()
		self.assertEqual('first,last,count,block\r\nU+FFF0,U+FFFF,16,Specials\r\n', text)


class TestCommandLine(unittest.TestCase):
	def run_cli(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with redirect_stdout(out), redirect_stderr(err):
			status = cli.main(cli.parse_arguments(list(argv)))
		return status, out.getvalue(), err.getvalue()

	def tearDown(self): filtering.VERBOSE = False

	def test_00_build_filter(self):
		args = cli.parse_arguments(['basic latin', 'Specials', '-c', 'é', '-x', '<>&', '-f', 'specials'])
		expected = CodePointFilter(blocks.BASIC_LATIN).allow_char('é').forbid_chars('<>&')
		self.assertEqual(expected, cli.build_filter(args))

	def test_01_report(self):
		status, out, err = self.run_cli('Latin Extended-A', 'Latin Extended-C')
		self.assertEqual(0, status)
		self.assertIn('U+2C60', out)
		self.assertIn('Latin Extended-C', out)
		self.assertIn('160 code points allowed.', out)
		self.assertEqual('', err)

	def test_02_empty(self):
		status, out, err = self.run_cli()
		self.assertEqual(0, status)
		self.assertEqual('0 code points allowed.\n', out)

	def test_03_unknown_block(self):
		status, out, err = self.run_cli('Klingon')
		self.assertEqual(1, status)
		self.assertIn("No such Unicode block: 'Klingon'", err)

	def test_04_non_bmp_character(self):
		status, out, err = self.run_cli('-c', '\U0001F600')
		self.assertEqual(1, status)
		self.assertIn('Not a BMP code point', err)

	def test_05_list_blocks(self):
		status, out, err = self.run_cli('--list-blocks')
		self.assertEqual(0, status)
		self.assertIn('Halfwidth and Fullwidth Forms', out)

	def test_06_verbose(self):
		quiet = self.run_cli('Basic Latin', '-f', 'Basic Latin', '-x', 'q')[1]
		status, out, err = self.run_cli('-v', 'Basic Latin', '-f', 'Basic Latin', '-x', 'q')
		self.assertEqual(0, status)
		self.assertTrue(filtering.VERBOSE)
		self.assertNotEqual(quiet, out)
		self.assertIn('Allowed 1 blocks; 128 code points changed, 128 now allowed.', out)
		self.assertIn('Forbade 1 blocks; 128 code points changed, 0 now allowed.', out)
		self.assertIn('Forbade 1 characters; 0 code points changed, 0 now allowed.', out)
		self.assertTrue(out.endswith('0 code points allowed.\n'))

	def test_07_csv(self):
		with tempfile.TemporaryDirectory() as tmp:
			path = os.path.join(tmp, 'out.csv')
			status, out, err = self.run_cli('Specials', '--csv', path)
			self.assertTrue(os.path.exists(path))
		self.assertEqual(0, status)
		self.assertIn(path, out)


if __name__ == '__main__':
	unittest.main()
