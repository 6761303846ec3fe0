"""Descriptive statistics and class-frequency summaries.

Every function is a pure reducer over a sequence. The numeric reducers return
``math.nan`` for an empty sequence rather than raising, so an array can be
emptied and refilled without its cached summary ever failing. NaN elements
propagate through sums in the usual floating-point way.

The nominal helpers (``classes()``, ``histogram()``, ``histo()``) work on any
values, nested lists included, and always report classes in first-occurrence
order, which also decides ``mode()`` ties.
"""

import collections.abc
import math
import typing


def minimum (values: typing.Sequence[float]) -> float:

	"""Smallest value, or NaN for an empty sequence."""

	if not values:
		return math.nan

	return min(values)


def maximum (values: typing.Sequence[float]) -> float:

	"""Largest value, or NaN for an empty sequence."""

	if not values:
		return math.nan

	return max(values)


def mean (values: typing.Sequence[float]) -> float:

	"""Arithmetic mean, or NaN for an empty sequence."""

	if not values:
		return math.nan

	return sum(values) / len(values)


def midrange (values: typing.Sequence[float]) -> float:

	"""Halfway point between the smallest and largest value."""

	if not values:
		return math.nan

	return (min(values) + max(values)) / 2.0


def median (values: typing.Sequence[float]) -> float:

	"""Middle of the sorted values, averaging the two middle values for even lengths."""

	if not values:
		return math.nan

	ordered = sorted(values)
	middle = len(ordered) // 2

	if len(ordered) % 2:
		return ordered[middle]

	return (ordered[middle - 1] + ordered[middle]) / 2.0


def _sum_of_squares (values: typing.Sequence[float]) -> float:

	centre = mean(values)
	return sum((v - centre) ** 2 for v in values)


def variance (values: typing.Sequence[float]) -> float:

	"""Sample variance (divisor n - 1).

	A single value has zero variance; an empty sequence gives NaN.
	"""

	if not values:
		return math.nan

	if len(values) == 1:
		return 0.0

	return _sum_of_squares(values) / (len(values) - 1)


def population_variance (values: typing.Sequence[float]) -> float:

	"""Population variance (divisor n)."""

	if not values:
		return math.nan

	return _sum_of_squares(values) / len(values)


def std (values: typing.Sequence[float]) -> float:

	"""Sample standard deviation."""

	return math.sqrt(variance(values))


def pstd (values: typing.Sequence[float]) -> float:

	"""Population standard deviation."""

	return math.sqrt(population_variance(values))


# ─── Classes ─────────────────────────────────────────────────────────────────


def class_key (value: typing.Any) -> typing.Hashable:

	"""Hashable identity of a value for class counting.

	Hashable values are their own key. Unhashable ones are frozen: lists
	become tuples, mappings become tuples of items and sets become frozensets,
	recursively. A nested list and a tuple with the same items therefore
	count as one class.
	"""

	try:
		hash(value)
		return value
	except TypeError:
		pass

	if isinstance(value, collections.abc.Mapping):
		return tuple((class_key(k), class_key(v)) for k, v in value.items())

	if isinstance(value, collections.abc.Set):
		return frozenset(class_key(v) for v in value)

	if isinstance(value, collections.abc.Iterable):
		return tuple(class_key(v) for v in value)

	return repr(value)


def _tally (values: typing.Sequence[typing.Any]) -> typing.Dict[typing.Hashable, typing.List[typing.Any]]:

	"""Map each class key to ``[first occurrence, count]``, in first-occurrence order."""

	tally: typing.Dict[typing.Hashable, typing.List[typing.Any]] = {}

	for value in values:
		key = class_key(value)

		if key in tally:
			tally[key][1] += 1
		else:
			tally[key] = [value, 1]

	return tally


def mode (values: typing.Sequence[typing.Any]) -> typing.Any:

	"""Most frequent value.

	Ties go to the value encountered first. Returns None for an empty sequence.
	"""

	best = None
	best_count = 0

	for value, count in _tally(values).values():
		if count > best_count:
			best, best_count = value, count

	return best


def classes (values: typing.Sequence[typing.Any]) -> typing.List[typing.Any]:

	"""Distinct values in first-occurrence order.

	Example:
		```python
		classes(list("abcab"))       # → ["a", "b", "c"]
		classes([[1], [2], [1]])     # → [[1], [2]]
		```
	"""

	return [value for value, _ in _tally(values).values()]


def histogram (values: typing.Sequence[typing.Any]) -> typing.Dict[typing.Hashable, int]:

	"""Occurrence count per class, keyed by :func:`class_key` in first-occurrence order."""

	return {key: count for key, (_, count) in _tally(values).items()}


def histo (values: typing.Sequence[typing.Any]) -> typing.List[int]:

	"""Occurrence counts alone, in the same order as ``classes()``.

	The counts always sum to ``len(values)``.

	Example:
		```python
		histo(list("abcab"))  # → [2, 2, 1]
		```
	"""

	return [count for _, count in _tally(values).values()]
