"""
This file aggregates the constants, abstract classes, and exception types which SafeChars deals in.

A filter answers one question: may this code point pass through an encoder unescaped?
The question is only ever asked about a single UTF-16 code unit, so the universe of
interest is the Basic Multilingual Plane: exactly 0x10000 code points. Anything outside
that range is a caller's mistake, and is reported as such rather than quietly ignored.

The interesting abstraction here is `AllowedCodePoints`. Filters merge from one another,
but they should not care WHAT they merge from, only that it can enumerate the code points
it allows. So that is the whole interface. It is structural: any object with a suitable
`get_allowed_code_points` method qualifies, whether or not it inherits from this class.
"""

from abc import ABC, abstractmethod
from typing import Iterable

CodePoint = int

MAX_CODE_POINT : CodePoint = 0xFFFF
UNIVERSE_SIZE = MAX_CODE_POINT + 1

class FilterError(ValueError):
	""" Base class of all exceptions arising from the filter machinery. """

class CodePointOutOfRange(FilterError):
	"""
	Raised if something which is not a BMP code point is offered where one is expected.
	Parameter is the offending value, exactly as given.
	"""
	def __init__(self, value):
		super().__init__(value)
		self.value = value
	def __str__(self): return "Not a BMP code point: %r"%(self.value,)

class InvalidBlock(FilterError):
	"""
	Raised if a block would reach outside the BMP.
	Parameters are the first code point and the block size.
	"""
	def __init__(self, first_code_point, block_size):
		super().__init__(first_code_point, block_size)
		self.first_code_point, self.block_size = first_code_point, block_size
	def __str__(self): return "Block of size %r at %r does not fit within the BMP."%(self.block_size, self.first_code_point)

class UnknownBlock(FilterError, KeyError):
	""" Raised by a registry lookup for a block name nobody has heard of. """
	def __init__(self, name):
		super().__init__(name)
		self.name = name
	def __str__(self): return "No such Unicode block: %r"%self.name


class AllowedCodePoints(ABC):
	"""
	Anything which can enumerate the code points it allows.
	Filters consume this capability in their constructor and in `allow_filter(...)`,
	and every concrete filter also provides it.
	"""

	@abstractmethod
	def get_allowed_code_points(self) -> Iterable[CodePoint]:
		""" Yield every allowed code point. Order and repetition are the consumer's problem. """

	@classmethod
	def __subclasshook__(cls, C):
		if cls is AllowedCodePoints:
			for B in C.__mro__:
				if "get_allowed_code_points" in B.__dict__:
					# Setting the method to None opts out, as with collections.abc.
					if B.__dict__["get_allowed_code_points"] is None: return NotImplemented
					return True
		return NotImplemented
