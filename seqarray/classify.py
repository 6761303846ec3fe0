"""Type inference for array contents.

An array is tagged from its first element only:

- numbers, and strings that parse as numbers, make it ``NUMERIC``
- lists, tuples, mappings and other arrays make it a ``COLLECTION``
- anything else (symbols, letters, note names) makes it ``NOMINAL``

An empty sequence has no first element and so carries no type; callers keep
whatever tag they had before.
"""

import collections.abc
import enum
import math
import numbers
import typing


class InvalidInputError(TypeError):
	pass


class ArrayType(enum.Enum):

	"""The kind of data an array holds."""

	NUMERIC = "numeric"
	NOMINAL = "nominal"
	COLLECTION = "collection"


# Tag names accepted by ``resolve_type()``, including the older loose names.
TYPE_ALIASES: typing.Dict[str, ArrayType] = {
	"numeric": ArrayType.NUMERIC,
	"number": ArrayType.NUMERIC,
	"int": ArrayType.NUMERIC,
	"float": ArrayType.NUMERIC,
	"nominal": ArrayType.NOMINAL,
	"string": ArrayType.NOMINAL,
	"collection": ArrayType.COLLECTION,
}


def resolve_type (tag: typing.Union[ArrayType, str]) -> ArrayType:

	"""Return the ``ArrayType`` for an enum member or a tag name.

	Raises:
		ValueError: If the tag is not a known type name.
	"""

	if isinstance(tag, ArrayType):
		return tag

	key = str(tag).lower()

	if key not in TYPE_ALIASES:
		raise ValueError(f"Unknown array type {tag!r}. Available: {sorted(TYPE_ALIASES)}")

	return TYPE_ALIASES[key]


def is_number (value: typing.Any) -> bool:

	"""True for real numbers (NaN included)."""

	return isinstance(value, numbers.Real)


def is_numeric_like (value: typing.Any) -> bool:

	"""True if ``value`` is a number or a string that ``float()`` accepts."""

	if is_number(value):
		return True

	if isinstance(value, str):
		try:
			float(value)
		except ValueError:
			return False
		return True

	return False


def is_collection (value: typing.Any) -> bool:

	"""True for values that hold other values (lists, tuples, mappings, arrays)."""

	if isinstance(value, (str, bytes, bytearray)):
		return False

	return isinstance(value, (collections.abc.Sequence, collections.abc.Mapping, collections.abc.Set, collections.abc.Sized))


def classify (sequence: typing.Sequence[typing.Any]) -> typing.Optional[ArrayType]:

	"""Infer the array type from the first element, or None for an empty sequence."""

	if len(sequence) == 0:
		return None

	first = sequence[0]

	if is_numeric_like(first):
		return ArrayType.NUMERIC

	if is_collection(first):
		return ArrayType.COLLECTION

	return ArrayType.NOMINAL


def to_float (value: typing.Any) -> float:

	"""Coerce one element to float, returning NaN when it cannot be converted."""

	try:
		return float(value)
	except (TypeError, ValueError):
		return math.nan


def as_list (sequence: typing.Any) -> typing.List[typing.Any]:

	"""Return ``sequence`` as a new list, validating its shape.

	Strings are exploded into single characters. Unordered containers,
	mappings, byte strings and scalars are rejected.

	Raises:
		InvalidInputError: If ``sequence`` is not an ordered sequence.
	"""

	if isinstance(sequence, str):
		return list(sequence)

	if isinstance(sequence, (bytes, bytearray)) or not isinstance(sequence, collections.abc.Sequence):
		raise InvalidInputError(f"Expected an ordered sequence, got {type(sequence).__name__}")

	return list(sequence)
