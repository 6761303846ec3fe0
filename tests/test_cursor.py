import random

import pytest

import seqarray.cursor


def test_wrap_index_negative_and_overflow () -> None:

	"""Indices wrap with true modulo arithmetic."""

	assert seqarray.cursor.wrap_index(-1, 5) == 4
	assert seqarray.cursor.wrap_index(7, 5) == 2
	assert seqarray.cursor.wrap_index(-11, 5) == 4


def test_advance_wraps_past_end () -> None:

	"""Stepping forward from the last index returns to the start."""

	cursor = seqarray.cursor.IndexCursor(2)

	assert cursor.advance(3) == 0
	assert cursor.advance(3) == 1


def test_retreat_wraps_before_start () -> None:

	"""Stepping back from index 0 lands on the last index."""

	cursor = seqarray.cursor.IndexCursor()

	assert cursor.retreat(5) == 4
	assert cursor.position == 4


def test_advance_then_retreat_returns_home () -> None:

	"""A forward step undone by a backward step leaves the cursor in place."""

	cursor = seqarray.cursor.IndexCursor(3)

	for _ in range(7):
		cursor.advance(4)
	for _ in range(7):
		cursor.retreat(4)

	assert cursor.position == 3


def test_wrap_after_shrink () -> None:

	"""Shrinking the array pulls the position back into range; empty leaves it alone."""

	cursor = seqarray.cursor.IndexCursor(6)

	assert cursor.wrap(4) == 2
	assert cursor.wrap(0) == 2


def test_random_index_does_not_move () -> None:

	"""Random access stays within bounds and leaves the position unchanged."""

	cursor = seqarray.cursor.IndexCursor(1)
	rng = random.Random(3)

	picks = {cursor.random_index(4, rng) for _ in range(200)}

	assert picks == {0, 1, 2, 3}
	assert cursor.position == 1


def test_unsupported_modes_raise () -> None:

	"""Palindrome, urn and relative traversal are not available."""

	cursor = seqarray.cursor.IndexCursor()

	with pytest.raises(NotImplementedError):
		cursor.palindrome(4)

	with pytest.raises(NotImplementedError):
		cursor.urn(4, random.Random())

	with pytest.raises(NotImplementedError):
		cursor.relative(4)
