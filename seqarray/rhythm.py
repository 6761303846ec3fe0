"""Conversions between rhythmic units.

Four views of the same rhythm are supported:

- **note values**: each event's length as a fraction of a whole note
  (1 = whole, 4 = quarter, 8 = eighth; see ``seqarray.constants.durations``)
- **beats**: a binary grid with one step per ``1 / resolution`` of a whole
  note; ``1`` marks an onset, ``0`` a held or empty step
- **intervals**: the number of grid steps from each onset to the next
- **indices**: the grid positions of the onsets

Each ``x_to_y`` has a ``y_to_x`` counterpart that inverts it for well-formed
input (note values that divide the resolution, positive whole intervals, a
beat grid that starts with an onset)::

    beats = notes_to_beats([4, 8, 8, 2], resolution=8)   # [1, 0, 1, 1, 1, 0, 0, 0]
    beats_to_notes(beats, resolution=8)                  # [4.0, 8.0, 8.0, 2.0]
"""

import math
import typing

import seqarray.constants.defaults


def _steps (value: float) -> int:

	"""Round a step count half-up, never below one step."""

	if math.isnan(value) or math.isinf(value):
		return 1

	return max(1, int(math.floor(value + 0.5)))


def _onsets (beats: typing.Sequence[float]) -> typing.List[int]:
	return [i for i, v in enumerate(beats) if v]


def notes_to_beats (notes: typing.Sequence[float], resolution: int = seqarray.constants.defaults.DEFAULT_RESOLUTION) -> typing.List[int]:

	"""
	Expand note values into a beat grid.

	A note value ``n`` covers ``resolution / n`` steps: an onset followed by
	zeros for the rest of its length. Notes shorter than one step still take
	one step.
	"""

	beats: typing.List[int] = []

	for note in notes:
		length = _steps(resolution / note) if note else 1
		beats.append(1)
		beats.extend([0] * (length - 1))

	return beats


def beats_to_notes (beats: typing.Sequence[float], resolution: int = seqarray.constants.defaults.DEFAULT_RESOLUTION) -> typing.List[float]:

	"""
	Collapse a beat grid into note values.

	Each onset lasts until the next onset or the end of the grid; a span of
	``d`` steps becomes the note value ``resolution / d``. Steps before the
	first onset are ignored.
	"""

	return [resolution / span for span in beats_to_intervals(beats)]


def intervals_to_beats (intervals: typing.Sequence[float]) -> typing.List[int]:

	"""
	Expand onset-to-onset intervals (in grid steps) into a beat grid.

	Intervals are rounded to whole steps, minimum one.
	"""

	beats: typing.List[int] = []

	for interval in intervals:
		beats.append(1)
		beats.extend([0] * (_steps(interval) - 1))

	return beats


def beats_to_intervals (beats: typing.Sequence[float]) -> typing.List[int]:

	"""
	Convert a beat grid into the number of steps each onset lasts.

	Example:
		```python
		beats_to_intervals([1, 0, 0, 1, 1, 0])  # → [3, 1, 2]
		```
	"""

	onsets = _onsets(beats)
	onsets.append(len(beats))

	return [max(1, end - start) for start, end in zip(onsets[:-1], onsets[1:])]


def beats_to_indices (beats: typing.Sequence[float]) -> typing.List[int]:

	"""Extract the grid indices where onsets occur."""

	return _onsets(beats)


def indices_to_beats (indices: typing.Sequence[float], length: typing.Optional[int] = None) -> typing.List[int]:

	"""
	Place onsets at the given grid indices.

	The grid is ``length`` steps long, or just long enough to hold the last
	index when ``length`` is omitted. Indices outside the grid are dropped.
	"""

	positions = [int(i) for i in indices if not math.isnan(i)]

	if length is None:
		length = max(positions) + 1 if positions else 0

	beats = [0] * length

	for position in positions:
		if 0 <= position < length:
			beats[position] = 1

	return beats
