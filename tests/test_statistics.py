import math

import pytest

import seqarray.statistics


def test_basic_reducers () -> None:

	"""Min, max, mean and midrange of a simple sequence."""

	values = [1, 2, 3, 4]

	assert seqarray.statistics.minimum(values) == 1
	assert seqarray.statistics.maximum(values) == 4
	assert seqarray.statistics.mean(values) == pytest.approx(2.5)
	assert seqarray.statistics.midrange(values) == pytest.approx(2.5)


def test_median_odd_and_even () -> None:

	"""Odd lengths take the middle; even lengths average the two middles."""

	assert seqarray.statistics.median([5, 1, 3]) == 3
	assert seqarray.statistics.median([4, 1, 3, 2]) == pytest.approx(2.5)


def test_sample_and_population_variance () -> None:

	"""Sample variance divides by n - 1, population variance by n."""

	values = [2, 4, 4, 4, 5, 5, 7, 9]

	assert seqarray.statistics.population_variance(values) == pytest.approx(4.0)
	assert seqarray.statistics.pstd(values) == pytest.approx(2.0)
	assert seqarray.statistics.variance(values) == pytest.approx(32.0 / 7.0)
	assert seqarray.statistics.std(values) == pytest.approx(math.sqrt(32.0 / 7.0))


def test_variance_of_single_value_is_zero () -> None:

	"""One value has no spread."""

	assert seqarray.statistics.variance([3.0]) == 0.0
	assert seqarray.statistics.std([3.0]) == 0.0


def test_empty_reducers_return_nan () -> None:

	"""Empty input never raises."""

	for reducer in (
		seqarray.statistics.minimum,
		seqarray.statistics.maximum,
		seqarray.statistics.mean,
		seqarray.statistics.median,
		seqarray.statistics.midrange,
		seqarray.statistics.variance,
		seqarray.statistics.population_variance,
		seqarray.statistics.std,
		seqarray.statistics.pstd,
	):
		assert math.isnan(reducer([])), reducer.__name__

	assert seqarray.statistics.mode([]) is None


def test_mode_picks_most_frequent () -> None:

	"""The most common value wins."""

	assert seqarray.statistics.mode([1, 2, 2, 3]) == 2


def test_mode_ties_go_to_first_seen () -> None:

	"""Among equally frequent values, the first encountered wins."""

	assert seqarray.statistics.mode([3, 1, 1, 3, 2]) == 3
	assert seqarray.statistics.mode(list("baab")) == "b"


def test_classes_first_occurrence_order () -> None:

	"""Classes are listed in the order they first appear."""

	assert seqarray.statistics.classes(list("cabca")) == ["c", "a", "b"]


def test_histogram_counts_per_class () -> None:

	"""The histogram maps each class to its count, in class order."""

	histogram = seqarray.statistics.histogram(list("cabca"))

	assert histogram == {"c": 2, "a": 2, "b": 1}
	assert list(histogram) == ["c", "a", "b"]


def test_histo_counts_sum_to_length () -> None:

	"""Counts always add up to the number of values."""

	values = list("the quick brown fox")
	counts = seqarray.statistics.histo(values)

	assert sum(counts) == len(values)
	assert len(counts) == len(seqarray.statistics.classes(values))


# ─── Nested values ───────────────────────────────────────────────────────────


def test_classes_of_nested_lists () -> None:

	"""Unhashable elements are grouped by content, first occurrence first."""

	values = [[1, 2], [3], [1, 2], [3], [1, 2]]

	assert seqarray.statistics.classes(values) == [[1, 2], [3]]
	assert seqarray.statistics.histo(values) == [3, 2]
	assert seqarray.statistics.histogram(values) == {(1, 2): 3, (3,): 2}
	assert seqarray.statistics.mode(values) == [1, 2]


def test_classes_of_mixed_symbols_and_lists () -> None:

	"""Symbols and nested lists can share one sequence."""

	values = ["a", [1, 2], "a", {"x": 1}]

	assert seqarray.statistics.classes(values) == ["a", [1, 2], {"x": 1}]
	assert sum(seqarray.statistics.histo(values)) == len(values)
	assert seqarray.statistics.mode(values) == "a"


def test_class_key_freezes_containers () -> None:

	"""Lists, mappings and sets get hashable stand-ins."""

	assert seqarray.statistics.class_key("a") == "a"
	assert seqarray.statistics.class_key([1, [2, 3]]) == (1, (2, 3))
	assert seqarray.statistics.class_key({"x": [1]}) == (("x", (1,)),)
	assert seqarray.statistics.class_key({1, 2}) == frozenset({1, 2})
