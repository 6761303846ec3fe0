import math

import pytest

import seqarray.classify


ArrayType = seqarray.classify.ArrayType


def test_numbers_are_numeric () -> None:

	"""Ints and floats classify as numeric."""

	assert seqarray.classify.classify([1, 2.5, 3]) is ArrayType.NUMERIC


def test_numeric_strings_are_numeric () -> None:

	"""A string that parses as a number counts as numeric."""

	assert seqarray.classify.classify(["3", "x"]) is ArrayType.NUMERIC


def test_symbols_are_nominal () -> None:

	"""Non-numeric strings classify as nominal."""

	assert seqarray.classify.classify(["a", "b"]) is ArrayType.NOMINAL


def test_nested_lists_are_collections () -> None:

	"""A list of lists is a collection."""

	assert seqarray.classify.classify([[1, 2], [3]]) is ArrayType.COLLECTION


def test_only_first_element_decides () -> None:

	"""Classification looks at the first element alone."""

	assert seqarray.classify.classify(["a", 1, 2]) is ArrayType.NOMINAL
	assert seqarray.classify.classify([1, "a", "b"]) is ArrayType.NUMERIC


def test_empty_sequence_has_no_type () -> None:

	"""An empty sequence gives None so callers keep their previous type."""

	assert seqarray.classify.classify([]) is None


def test_to_float_soft_failure () -> None:

	"""Unconvertible values become NaN instead of raising."""

	assert seqarray.classify.to_float("2.5") == 2.5
	assert math.isnan(seqarray.classify.to_float("abc"))
	assert math.isnan(seqarray.classify.to_float(None))


def test_as_list_explodes_strings () -> None:

	"""Strings become lists of characters."""

	assert seqarray.classify.as_list("abc") == ["a", "b", "c"]


def test_as_list_copies () -> None:

	"""The returned list is a new object."""

	source = [1, 2, 3]
	result = seqarray.classify.as_list(source)

	assert result == source
	assert result is not source


@pytest.mark.parametrize("bad", [5, 2.5, None, {"a": 1}, {1, 2}, b"bytes"])
def test_as_list_rejects_non_sequences (bad: object) -> None:

	"""Scalars and unordered containers are invalid input."""

	with pytest.raises(seqarray.classify.InvalidInputError):
		seqarray.classify.as_list(bad)


def test_invalid_input_is_a_type_error () -> None:

	"""Callers catching TypeError also catch invalid input."""

	assert issubclass(seqarray.classify.InvalidInputError, TypeError)


def test_resolve_type_accepts_names_and_members () -> None:

	"""Both enum members and their (legacy) names resolve."""

	assert seqarray.classify.resolve_type(ArrayType.NOMINAL) is ArrayType.NOMINAL
	assert seqarray.classify.resolve_type("string") is ArrayType.NOMINAL
	assert seqarray.classify.resolve_type("Number") is ArrayType.NUMERIC


def test_resolve_type_unknown_raises () -> None:

	"""Unknown tags are rejected."""

	with pytest.raises(ValueError):
		seqarray.classify.resolve_type("date")
