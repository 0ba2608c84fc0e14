"""
The code-point filter: a mutable allow-list over the Basic Multilingual Plane.

Representation is a dense map: one byte per code point, 0x10000 of them, nonzero for
"allowed". It's a mere 64K, point queries are a single index, and every block operation
becomes a slice assignment. A sparse structure (say, a sorted list of range bounds
searched with bisect) would make the common query slower to save memory nobody is
short of.

Every mutator returns the filter itself, so that construction reads as a chain:

	CodePointFilter(blocks.BASIC_LATIN).forbid_chars('<>&"\'').allow_block(blocks.LATIN_1_SUPPLEMENT)

Arguments are checked before anything is changed. A call that raises has done nothing.
That goes for code points reported by some other filter in `allow_filter(...)` too.

Enumeration via `get_allowed_code_points()` works from a snapshot taken at the moment
of the call: mutating the filter afterward does not disturb an iterator already in hand.
"""

from itertools import compress
from typing import Iterator, Sequence

from .interfaces import CodePoint, MAX_CODE_POINT, UNIVERSE_SIZE, CodePointOutOfRange, AllowedCodePoints
from .blocks import UnicodeBlock

VERBOSE = False

def code_point_of(item) -> CodePoint:
	""" Accept an integer code point or a one-character string; complain about anything else. """
	if isinstance(item, str):
		if len(item) != 1: raise CodePointOutOfRange(item)
		item = ord(item)
	elif not isinstance(item, int) or isinstance(item, bool): raise CodePointOutOfRange(item)
	if not 0 <= item <= MAX_CODE_POINT: raise CodePointOutOfRange(item)
	return item

def code_points_of(items) -> list:
	"""
	Flatten a mixture of code points and strings into a list of code points.
	A string here stands for each of its characters, so "<>&" is three code points.
	"""
	result = []
	for item in items:
		if isinstance(item, str): result.extend(map(code_point_of, item))
		else: result.append(code_point_of(item))
	return result

def _check_block(block) -> UnicodeBlock:
	if not isinstance(block, UnicodeBlock): raise TypeError('expected a UnicodeBlock, not', type(block))
	return block


class CodePointFilter(AllowedCodePoints):
	"""
	Construct with any mixture of `UnicodeBlock`s and other filters (anything with a
	`get_allowed_code_points` method). The new filter allows the union of all of them.
	With no arguments, nothing is allowed.
	"""
	__slots__ = ('_bitmap',)

	def __init__(self, *sources):
		self._bitmap = bytearray(UNIVERSE_SIZE)
		for source in sources:
			if isinstance(source, UnicodeBlock): self.allow_block(source)
			else: self.allow_filter(source)

	# Queries:

	def is_allowed(self, item) -> bool:
		return bool(self._bitmap[code_point_of(item)])

	def __contains__(self, item): return self.is_allowed(item)

	def __len__(self): return UNIVERSE_SIZE - self._bitmap.count(0)

	def get_allowed_code_points(self) -> Iterator[CodePoint]:
		""" Ascending and duplicate-free, over a snapshot of the current state. """
		return compress(range(UNIVERSE_SIZE), bytes(self._bitmap))

	def allowed_ranges(self) -> Iterator[tuple]:
		""" Yield (first, last) inclusive pairs for each maximal run of allowed code points, ascending. """
		bitmap = bytes(self._bitmap)
		start = bitmap.find(1)
		while start >= 0:
			stop = bitmap.find(0, start)
			if stop < 0: stop = UNIVERSE_SIZE
			yield start, stop - 1
			start = bitmap.find(1, stop)

	# Mutators; each returns self:

	def allow_char(self, item) -> "CodePointFilter":
		self._bitmap[code_point_of(item)] = 1
		return self

	def allow_chars(self, *items) -> "CodePointFilter":
		code_points = code_points_of(items)
		before = len(self) if VERBOSE else 0
		for cp in code_points: self._bitmap[cp] = 1
		if VERBOSE: self._squawk("Allowed", "%d characters"%len(code_points), before)
		return self

	def allow_block(self, block:UnicodeBlock) -> "CodePointFilter":
		return self._fill(1, [_check_block(block)])

	def allow_blocks(self, *blocks:UnicodeBlock) -> "CodePointFilter":
		return self._fill(1, [_check_block(b) for b in blocks])

	def allow_filter(self, other:AllowedCodePoints) -> "CodePointFilter":
		""" Union: allow everything the other allows. Nothing already allowed is forbidden. """
		if not isinstance(other, AllowedCodePoints): raise TypeError('expected something with get_allowed_code_points(), not', type(other))
		incoming = code_points_of(other.get_allowed_code_points())
		before = len(self) if VERBOSE else 0
		for cp in incoming: self._bitmap[cp] = 1
		if VERBOSE: print("Merged %d code points from %s; %d newly allowed."%(len(incoming), type(other).__name__, len(self) - before))
		return self

	def forbid_char(self, item) -> "CodePointFilter":
		self._bitmap[code_point_of(item)] = 0
		return self

	def forbid_chars(self, *items) -> "CodePointFilter":
		code_points = code_points_of(items)
		before = len(self) if VERBOSE else 0
		for cp in code_points: self._bitmap[cp] = 0
		if VERBOSE: self._squawk("Forbade", "%d characters"%len(code_points), before)
		return self

	def forbid_block(self, block:UnicodeBlock) -> "CodePointFilter":
		return self._fill(0, [_check_block(block)])

	def forbid_blocks(self, *blocks:UnicodeBlock) -> "CodePointFilter":
		return self._fill(0, [_check_block(b) for b in blocks])

	def clear(self) -> "CodePointFilter":
		if VERBOSE: print("Cleared %d allowed code points."%len(self))
		self._bitmap[:] = bytes(UNIVERSE_SIZE)
		return self

	def _fill(self, value:int, blocks:Sequence[UnicodeBlock]) -> "CodePointFilter":
		before = len(self) if VERBOSE else 0
		for block in blocks:
			stop = block.first_code_point + block.block_size
			self._bitmap[block.first_code_point:stop] = bytes([value]) * block.block_size
		if VERBOSE: self._squawk(("Forbade", "Allowed")[value], "%d blocks"%len(blocks), before)
		return self

	def _squawk(self, verb:str, what:str, before:int):
		print("%s %s; %d code points changed, %d now allowed."%(verb, what, abs(len(self) - before), len(self)))

	# Value semantics:

	def copy(self) -> "CodePointFilter":
		clone = CodePointFilter()
		clone._bitmap[:] = self._bitmap
		return clone

	__copy__ = copy
	def __deepcopy__(self, memo): return self.copy()

	def __eq__(self, other):
		if isinstance(other, CodePointFilter): return self._bitmap == other._bitmap
		return NotImplemented

	__hash__ = None

	def __repr__(self):
		runs = list(self.allowed_ranges())
		shown = ", ".join("U+%04X..U+%04X"%run if run[0] != run[1] else "U+%04X"%run[0] for run in runs[:4])
		if len(runs) > 4: shown += ", ..."
		return "<CodePointFilter %d allowed: %s>"%(len(self), shown or "nothing")
