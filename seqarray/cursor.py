"""Traversal position over an array.

:class:`IndexCursor` holds a single integer position. Relative moves wrap
with true modulo arithmetic, so stepping back from index 0 of a five-element
array lands on index 4. The cursor stores no values and no history; the array
passes its current length into every move.
"""

import random
import typing


def wrap_index (index: int, length: int) -> int:

	"""Wrap an index into ``[0, length)``; negative indices count from the end.

	Example:
		```python
		wrap_index(-1, 5)  # → 4
		wrap_index(7, 5)   # → 2
		```
	"""

	# Python's % already follows the sign of the divisor.
	return index % length


class IndexCursor:

	"""A wrapping read position for sequential and random access."""

	def __init__ (self, position: int = 0) -> None:

		self._position: int = position

	@property
	def position (self) -> int:
		"""The current index."""
		return self._position

	def wrap (self, length: int) -> int:

		"""Pull the position back into range after the array changed length."""

		if length > 0:
			self._position = wrap_index(self._position, length)

		return self._position

	def advance (self, length: int) -> int:

		"""Move forward one step, wrapping past the end. Returns the new position."""

		self._position = wrap_index(self._position + 1, length)
		return self._position

	def retreat (self, length: int) -> int:

		"""Move back one step, wrapping before the start. Returns the new position."""

		self._position = wrap_index(self._position - 1, length)
		return self._position

	def random_index (self, length: int, rng: random.Random) -> int:

		"""Pick a uniformly random index in ``[0, length - 1]`` without moving."""

		return rng.randint(0, length - 1)

	def palindrome (self, length: int) -> typing.NoReturn:

		"""Back-and-forth traversal. Not supported yet."""

		raise NotImplementedError("Palindrome traversal is not supported yet")

	def urn (self, length: int, rng: random.Random) -> typing.NoReturn:

		"""Draw-without-replacement traversal. Not supported yet."""

		raise NotImplementedError("Urn traversal is not supported yet")

	def relative (self, length: int) -> typing.NoReturn:

		"""Position as a fraction of the length. Not supported yet."""

		raise NotImplementedError("Relative cursor location is not supported yet")
