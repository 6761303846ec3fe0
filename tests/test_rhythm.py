import pytest

import seqarray.constants.durations as dur
import seqarray.rhythm


def test_notes_to_beats_basic () -> None:

	"""Each note becomes an onset followed by its held steps."""

	notes = [dur.QUARTER, dur.EIGHTH, dur.EIGHTH, dur.HALF]

	assert seqarray.rhythm.notes_to_beats(notes, 8) == [1, 0, 1, 1, 1, 0, 0, 0]


def test_notes_to_beats_default_resolution () -> None:

	"""The default grid has four steps per whole note."""

	assert seqarray.rhythm.notes_to_beats([4, 2, 4]) == [1, 1, 0, 1]


def test_notes_shorter_than_a_step_take_one_step () -> None:

	"""Notes finer than the grid still occupy a full step."""

	assert seqarray.rhythm.notes_to_beats([16, 16], 4) == [1, 1]


def test_beats_to_notes_basic () -> None:

	"""Onset spans turn back into note values."""

	assert seqarray.rhythm.beats_to_notes([1, 0, 1, 1, 1, 0, 0, 0], 8) == [4.0, 8.0, 8.0, 2.0]


@pytest.mark.parametrize("resolution, notes", [
	(4, [4, 4, 2, 1]),
	(8, [8, 4, 8, 2]),
	(16, [16, 16, 8, 4, 2]),
	(12, [12, 6, 4, 3]),
])
def test_notes_round_trip (resolution: int, notes: list) -> None:

	"""beats_to_notes inverts notes_to_beats for note values dividing the resolution."""

	beats = seqarray.rhythm.notes_to_beats(notes, resolution)

	assert seqarray.rhythm.beats_to_notes(beats, resolution) == notes


def test_intervals_to_beats () -> None:

	"""Each interval becomes an onset plus interval - 1 rests."""

	assert seqarray.rhythm.intervals_to_beats([3, 1, 2]) == [1, 0, 0, 1, 1, 0]


def test_beats_to_intervals () -> None:

	"""Onset spans are measured to the next onset or the end."""

	assert seqarray.rhythm.beats_to_intervals([1, 0, 0, 1, 1, 0]) == [3, 1, 2]


def test_beats_to_intervals_ignores_leading_rests () -> None:

	"""Steps before the first onset belong to no interval."""

	assert seqarray.rhythm.beats_to_intervals([0, 0, 1, 0]) == [2]


@pytest.mark.parametrize("intervals", [[1], [3, 1, 2], [4, 4, 4, 4], [2, 5, 1, 1, 3]])
def test_intervals_round_trip (intervals: list) -> None:

	"""beats_to_intervals inverts intervals_to_beats for whole positive intervals."""

	beats = seqarray.rhythm.intervals_to_beats(intervals)

	assert seqarray.rhythm.beats_to_intervals(beats) == intervals


def test_beats_to_indices () -> None:

	"""Indices of the onsets in the grid."""

	assert seqarray.rhythm.beats_to_indices([1, 0, 0, 0, 1, 0, 1, 0]) == [0, 4, 6]


def test_indices_to_beats_inverts_beats_to_indices () -> None:

	"""Placing onsets back at their indices rebuilds the grid."""

	beats = [1, 0, 0, 0, 1, 0, 1, 0]
	indices = seqarray.rhythm.beats_to_indices(beats)

	assert seqarray.rhythm.indices_to_beats(indices, len(beats)) == beats


def test_indices_to_beats_default_length () -> None:

	"""Without a length the grid ends at the last onset."""

	assert seqarray.rhythm.indices_to_beats([0, 3]) == [1, 0, 0, 1]
	assert seqarray.rhythm.indices_to_beats([]) == []


def test_float_input_is_accepted () -> None:

	"""Numeric arrays hold floats, which convert like their integer values."""

	assert seqarray.rhythm.intervals_to_beats([2.0, 1.0]) == [1, 0, 1]
	assert seqarray.rhythm.beats_to_indices([1.0, 0.0, 1.0]) == [0, 2]
