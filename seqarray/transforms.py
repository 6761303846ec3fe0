"""Pure sequence transforms.

Every function here takes a sequence (plus parameters) and returns a new list,
leaving its input untouched. ``seqarray.container.Array`` wraps each one in a
chainable method that re-sets the array with the result; they are equally
usable on plain lists:

    import seqarray.transforms as tf

    tf.normalize([1, 2, 3, 4])          # [0.0, 0.333…, 0.666…, 1.0]
    tf.shift([1, 2, 3, 4], 1)           # [4, 1, 2, 3]
    tf.fit([0, 10], 5)                  # [0.0, 2.5, 5.0, 7.5, 10.0]

Numeric transforms expect numbers; structural transforms (mirror, shift,
truncate, repeat, unique, sort, shuffle, concat) accept any element type.
"""

import math
import random
import typing

import seqarray.classify
import seqarray.constants.defaults
import seqarray.interpolation
import seqarray.rhythm
import seqarray.scales
import seqarray.statistics


T = typing.TypeVar("T")

InterpolationArg = typing.Union[str, seqarray.interpolation.Interpolation, None]


# ─── Scalers ─────────────────────────────────────────────────────────────────


def normalize (values: typing.Sequence[float], low: typing.Optional[float] = None, high: typing.Optional[float] = None) -> typing.List[float]:

	"""Map ``[low, high]`` (the observed range by default) onto ``[0, 1]``.

	When the range has zero width every value maps to 0.0.
	"""

	if low is None:
		low = seqarray.statistics.minimum(values)

	if high is None:
		high = seqarray.statistics.maximum(values)

	if high == low:
		return [0.0] * len(values)

	span = high - low
	return [(v - low) / span for v in values]


def rescale (values: typing.Sequence[float], new_min: float, new_max: float) -> typing.List[float]:

	"""Map the observed range of ``values`` linearly onto ``[new_min, new_max]``.

	A constant sequence maps entirely to ``new_min``.
	"""

	return [new_min + (new_max - new_min) * v for v in normalize(values)]


def _curve (values: typing.Sequence[float], shape: typing.Callable[[float], float]) -> typing.List[float]:

	"""Normalise, reshape with ``shape``, then scale back to the original range."""

	if not values:
		return []

	low = seqarray.statistics.minimum(values)
	high = seqarray.statistics.maximum(values)
	curved = [shape(v) for v in normalize(values)]

	return [low + (high - low) * v for v in curved]


def exp_curve (values: typing.Sequence[float], factor: float) -> typing.List[float]:

	"""Reshape values along an exponential curve, keeping their range.

	The normalised values are raised to ``factor``; the ends stay fixed while
	the middle bends towards the minimum. A factor of 1 or less leaves the
	values unchanged.
	"""

	if factor <= 1:
		return [float(v) for v in values]

	return _curve(values, lambda v: v ** factor)


def log_curve (values: typing.Sequence[float], factor: float) -> typing.List[float]:

	"""Reshape values along a logarithmic curve, keeping their range.

	Uses ``log(1 + v * (factor - 1)) / log(factor)`` on the normalised values,
	which bends the middle towards the maximum. A factor of 1 or less leaves
	the values unchanged.
	"""

	if factor <= 1:
		return [float(v) for v in values]

	scale = math.log(factor)
	return _curve(values, lambda v: math.log(1.0 + v * (factor - 1.0)) / scale)


# ─── Resampling ──────────────────────────────────────────────────────────────


def fit (values: typing.Sequence[T], length: int, interpolation: InterpolationArg = seqarray.constants.defaults.DEFAULT_INTERPOLATION) -> typing.List[T]:

	"""Resample ``values`` to exactly ``length`` elements.

	Output samples are spread evenly over the input's index range, so the
	first and last values are always kept. Sequences containing anything
	other than numbers are resampled with ``"step"`` regardless of the
	requested kind.

	Parameters:
		values: Source sequence.
		length: Target number of elements.
		interpolation: Interpolation kind name or callable (see
			:mod:`seqarray.interpolation`).
	"""

	length = int(length)

	if length <= 0 or not values:
		return []

	interpolate = seqarray.interpolation.get_interpolation(interpolation)

	if not all(seqarray.classify.is_number(v) for v in values):
		interpolate = seqarray.interpolation.step

	positions = seqarray.interpolation.sample_positions(len(values), length)

	return [interpolate(values, position) for position in positions]


def stretch (values: typing.Sequence[T], factor: float, interpolation: InterpolationArg = seqarray.constants.defaults.DEFAULT_INTERPOLATION) -> typing.List[T]:

	"""Resample to ``len(values) * factor`` elements (rounded half-up)."""

	return fit(values, int(math.floor(len(values) * factor + 0.5)), interpolation)


def morph (source: typing.Sequence[float], target: typing.Sequence[float], amount: float, interpolation: InterpolationArg = seqarray.constants.defaults.DEFAULT_INTERPOLATION) -> typing.List[float]:

	"""Blend two sequences of possibly different lengths.

	Both are resampled to the longer of the two lengths, then each pair is
	interpolated linearly by ``amount`` (clamped to [0, 1]): 0 gives the
	resampled source, 1 the resampled target.

	Raises:
		ValueError: If either sequence is empty.
	"""

	if not source or not target:
		raise ValueError("Cannot morph an empty sequence")

	amount = max(0.0, min(1.0, amount))
	length = max(len(source), len(target))

	a = fit(source, length, interpolation)
	b = fit(target, length, interpolation)

	return [x + (y - x) * amount for x, y in zip(a, b)]


# ─── Structural transforms ───────────────────────────────────────────────────


def mirror (values: typing.Sequence[T]) -> typing.List[T]:
	"""Reverse the element order."""
	return list(reversed(values))


def invert (values: typing.Sequence[float], center: typing.Optional[float] = None) -> typing.List[float]:

	"""Reflect each value about ``center`` (the mean by default)."""

	if center is None:
		center = seqarray.statistics.mean(values)

	return [2 * center - v for v in values]


def shuffle (values: typing.Sequence[T], rng: random.Random) -> typing.List[T]:

	"""Return a uniformly random permutation drawn from ``rng``."""

	result = list(values)
	rng.shuffle(result)
	return result


def shift (values: typing.Sequence[T], amount: int) -> typing.List[T]:

	"""Rotate elements so that index ``i`` moves to ``(i + amount) mod n``.

	Negative amounts rotate backwards.
	"""

	if not values:
		return []

	k = int(amount) % len(values)

	if k == 0:
		return list(values)

	return list(values[-k:]) + list(values[:-k])


def truncate (values: typing.Sequence[T], start: int, end: typing.Optional[int] = None) -> typing.List[T]:

	"""Drop elements from the ends.

	With one argument, drop the last ``start`` elements. With two, drop the
	first ``start`` and the last ``end``.
	"""

	if end is None:
		start, end = 0, start

	start = max(0, int(start))
	stop = len(values) - max(0, int(end))

	return list(values[start:stop]) if stop > start else []


def repeat (values: typing.Sequence[T], count: int) -> typing.List[T]:

	"""Concatenate ``count`` copies of the sequence."""

	return list(values) * max(0, int(count))


def concat (values: typing.Sequence[T], other: typing.Sequence[T]) -> typing.List[T]:
	return list(values) + list(other)


def unique (values: typing.Sequence[T]) -> typing.List[T]:

	"""Drop repeated values, keeping each one at its first occurrence."""

	try:
		return list(dict.fromkeys(values))
	except TypeError:
		# Unhashable elements (nested lists) fall back to a linear scan.
		result: typing.List[T] = []
		for value in values:
			if value not in result:
				result.append(value)
		return result


def sort (values: typing.Sequence[T]) -> typing.List[T]:

	"""Ascending order: numeric for numbers, lexicographic for symbols.

	Values that cannot be compared with each other (numbers mixed with
	strings, say) are ordered by their string form.
	"""

	try:
		return sorted(values)
	except TypeError:
		return sorted(values, key=str)


# ─── Arithmetic ──────────────────────────────────────────────────────────────


def add (values: typing.Sequence[float], amount: float) -> typing.List[float]:
	return [v + amount for v in values]


def mult (values: typing.Sequence[float], factor: float) -> typing.List[float]:
	return [v * factor for v in values]


def _round_half_up (value: float) -> float:

	if math.isnan(value) or math.isinf(value):
		return value

	return float(math.floor(value + 0.5))


def round_values (values: typing.Sequence[float]) -> typing.List[float]:

	"""Round to whole numbers, halves rounding up (2.5 → 3, -2.5 → -2)."""

	return [_round_half_up(v) for v in values]


def floor_values (values: typing.Sequence[float]) -> typing.List[float]:
	return [v if math.isnan(v) or math.isinf(v) else float(math.floor(v)) for v in values]


def ceil_values (values: typing.Sequence[float]) -> typing.List[float]:
	return [v if math.isnan(v) or math.isinf(v) else float(math.ceil(v)) for v in values]


def hwr (values: typing.Sequence[float]) -> typing.List[float]:
	"""Half-wave rectify: negative values become zero."""
	return [v if math.isnan(v) else max(0.0, v) for v in values]


def fwr (values: typing.Sequence[float]) -> typing.List[float]:
	"""Full-wave rectify: absolute values."""
	return [abs(v) for v in values]


# ─── Pitch and rhythm ────────────────────────────────────────────────────────


def pq (values: typing.Sequence[float], scale: typing.Union[str, typing.Sequence[float], None] = None) -> typing.List[float]:

	"""Pitch-quantize values to a scale given by name, degrees, or None for chromatic."""

	return seqarray.scales.quantize(values, seqarray.scales.resolve_scale(scale))


notes_to_beats = seqarray.rhythm.notes_to_beats
beats_to_notes = seqarray.rhythm.beats_to_notes
intervals_to_beats = seqarray.rhythm.intervals_to_beats
beats_to_intervals = seqarray.rhythm.beats_to_intervals
beats_to_indices = seqarray.rhythm.beats_to_indices
indices_to_beats = seqarray.rhythm.indices_to_beats
