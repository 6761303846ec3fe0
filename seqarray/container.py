"""The array container.

:class:`Array` owns a sequence of values together with its name, its inferred
type, cached statistics and a traversal cursor. Every change goes through
:meth:`Array.set`, which re-classifies the values and, for numeric data,
coerces them to floats and refreshes the cached normalised view and summary.

Transform methods return the array itself, so calls chain::

    import seqarray

    melody = (
        seqarray.array([0, 3, 7, 12], name="melody")
        .fit(16)
        .add(60)
        .pq("minor")
    )

    melody.get("mean")   # statistics are computed on demand
    melody.get("next")   # the cursor walks the values with wraparound

Randomness (``shuffle()``, ``fill("noise")``, ``get("random")``) is drawn
from the array's ``rng``; pass a seeded ``random.Random`` for repeatable
output.
"""

import copy
import dataclasses
import logging
import math
import numbers
import random
import typing

import seqarray.classify
import seqarray.constants.defaults
import seqarray.cursor
import seqarray.generators
import seqarray.query
import seqarray.statistics
import seqarray.transforms

logger = logging.getLogger(__name__)

ArrayType = seqarray.classify.ArrayType
Query = seqarray.query.Query
InterpolationArg = seqarray.transforms.InterpolationArg


@dataclasses.dataclass(frozen=True)
class ArraySummary:

	"""Statistics cached on every numeric ``set()``."""

	min: float
	max: float
	mean: float
	std: float

	@staticmethod
	def of (values: typing.Sequence[float]) -> "ArraySummary":
		return ArraySummary(
			min = seqarray.statistics.minimum(values),
			max = seqarray.statistics.maximum(values),
			mean = seqarray.statistics.mean(values),
			std = seqarray.statistics.std(values),
		)


class Array:

	"""
	A single-dimensional, typed value sequence with chainable transforms.
	"""

	def __init__ (
		self,
		sequence: typing.Any = None,
		name: typing.Optional[str] = None,
		rng: typing.Optional[random.Random] = None,
	) -> None:

		"""Create an array, optionally filled from ``sequence``.

		Parameters:
			sequence: Initial values. A string is split into single characters.
				Another ``Array`` is copied.
			name: Optional label.
			rng: Random source for shuffling, noise and random access.
				Defaults to a new unseeded ``random.Random``.
		"""

		self.rng: random.Random = rng or random.Random()

		self._name: str = ""
		self._type: typing.Optional[ArrayType] = None
		self._value: typing.List[typing.Any] = []
		self._original: typing.Optional[typing.List[typing.Any]] = None

		self._normalized: typing.Optional[typing.List[float]] = None
		self._summary: typing.Optional[ArraySummary] = None
		self._classes: typing.Optional[typing.List[typing.Any]] = None
		self._histogram: typing.Optional[typing.Dict[typing.Any, int]] = None

		self._cursor = seqarray.cursor.IndexCursor()

		if sequence is not None:
			self.set(sequence, name)

		elif name is not None:
			self.set_name(name)


	# ─── State ──────────────────────────────────────────────────────────────


	@property
	def value (self) -> typing.List[typing.Any]:
		"""A copy of the current values."""
		return copy.deepcopy(self._value)

	@property
	def length (self) -> int:
		return len(self._value)

	@property
	def type (self) -> typing.Optional[ArrayType]:
		"""The inferred (or explicitly set) type, None until the first non-empty ``set()``."""
		return self._type

	@property
	def normalized (self) -> typing.Optional[typing.List[float]]:
		"""Cached [0, 1] view of numeric values, None for other types."""
		return list(self._normalized) if self._normalized is not None else None

	@property
	def summary (self) -> typing.Optional[ArraySummary]:
		"""Cached min/max/mean/std of numeric values, None for other types."""
		return self._summary

	@property
	def classes (self) -> typing.Optional[typing.List[typing.Any]]:
		"""Distinct nominal values in first-occurrence order (also kept by ``histo()``)."""
		return list(self._classes) if self._classes is not None else None

	@property
	def class_counts (self) -> typing.Optional[typing.Dict[typing.Any, int]]:
		"""Class → count mapping recorded by the last ``histo()``, else None.

		Keys are the classes themselves, with unhashable classes frozen by
		``seqarray.statistics.class_key`` (a nested list is keyed as a tuple).
		"""
		return dict(self._histogram) if self._histogram is not None else None

	def __len__ (self) -> int:
		return len(self._value)

	def __iter__ (self) -> typing.Iterator[typing.Any]:
		return iter(self.value)

	def __repr__ (self) -> str:
		type_name = self._type.value if self._type is not None else None
		return f"Array(name={self._name!r}, type={type_name}, value={self._value!r})"


	# ─── Mutation ───────────────────────────────────────────────────────────


	def set (self, sequence: typing.Any, name: typing.Optional[str] = None) -> "Array":

		"""Replace the contents of the array.

		The first call also records the values as the array's original, which
		``reset()`` restores. The type is re-inferred from the first element
		(an empty sequence keeps the previous type). Numeric values are
		coerced to floats; anything that cannot be converted becomes NaN.

		Parameters:
			sequence: New values: a list, tuple, range, string or ``Array``.
			name: Optional new name.

		Raises:
			InvalidInputError: If ``sequence`` is not an ordered sequence.
		"""

		if name is not None:
			self.set_name(name)

		values = _values_of(sequence)

		if self._original is None:
			self._original = copy.deepcopy(values)

		inferred = seqarray.classify.classify(values)

		if inferred is not None and inferred is not self._type:
			logger.debug(f"Array {self._name!r} classified as {inferred.value}")
			self._type = inferred

		self._histogram = None

		if self._type is ArrayType.NUMERIC:
			self._value = self._coerce(values)
			self._normalized = seqarray.transforms.normalize(self._value)
			self._summary = ArraySummary.of(self._value)
			self._classes = None

		else:
			self._value = values
			self._normalized = None
			self._summary = None
			self._classes = seqarray.statistics.classes(values) if self._type is ArrayType.NOMINAL else None

		self._cursor.wrap(len(self._value))

		return self


	def _coerce (self, values: typing.List[typing.Any]) -> typing.List[float]:

		"""Convert to floats, logging how many elements became NaN."""

		coerced = [seqarray.classify.to_float(v) for v in values]
		failed = sum(1 for v, c in zip(values, coerced) if math.isnan(c) and not _is_nan(v))

		if failed:
			logger.warning(f"Array {self._name!r}: {failed} non-numeric value(s) coerced to NaN")

		return coerced


	def set_name (self, name: typing.Any) -> "Array":

		"""Set the array's label."""

		self._name = str(name)
		return self

	name = set_name


	def set_type (self, tag: typing.Union[ArrayType, str]) -> "Array":

		"""Override the type tag without touching the values.

		Accepts an ``ArrayType`` or its name (``"numeric"``, ``"nominal"``,
		``"collection"``, or the older ``"number"``/``"string"``).
		"""

		self._type = seqarray.classify.resolve_type(tag)
		return self


	def fill (
		self,
		kind: str,
		length: int = seqarray.constants.defaults.DEFAULT_FILL_LENGTH,
		low: float = seqarray.constants.defaults.DEFAULT_FILL_MIN,
		high: float = seqarray.constants.defaults.DEFAULT_FILL_MAX,
	) -> "Array":

		"""Replace the contents with generated values.

		Parameters:
			kind: ``"line"``, ``"noise"``/``"random"``, ``"gaussian"``/``"gauss"``/``"normal"``,
				``"sin"``/``"sine"``, ``"cos"``/``"cosine"``, ``"zeroes"`` or ``"ones"``.
			length: Number of values.
			low: Lower bound of the generated range.
			high: Upper bound of the generated range.

		Example:
			```python
			seqarray.array().fill("line", 5, 0, 1).get()  # [0.0, 0.25, 0.5, 0.75, 1.0]
			```
		"""

		return self.set(seqarray.generators.generate(kind, length, low, high, rng=self.rng))

	generate = fill


	def clone (self) -> "Array":

		"""Return an independent copy.

		The copy gets its own values, caches, cursor position and a copy of the
		random generator state. Its original is the current value, as if it had
		been built from it.
		"""

		twin = Array(rng=copy.deepcopy(self.rng))
		twin._name = self._name
		twin.set(copy.deepcopy(self._value))

		twin._type = self._type
		twin._classes = copy.deepcopy(self._classes)
		twin._histogram = copy.deepcopy(self._histogram)
		twin._cursor = seqarray.cursor.IndexCursor(self._cursor.position)

		return twin


	def reset (self) -> "Array":

		"""Restore the values recorded by the first ``set()``."""

		if self._original is None:
			return self

		return self.set(copy.deepcopy(self._original))

	original = reset


	# ─── Queries ────────────────────────────────────────────────────────────


	def get (self, key: typing.Union[Query, str, int, None] = None) -> typing.Any:

		"""Return the values, one element, or a named query result.

		- An int returns that element. Out-of-range indices are logged and
		  wrapped modulo the length (``get(-1)`` is the last element).
		- A :class:`~seqarray.query.Query` or one of its names
		  (``"mean"``, ``"next"``, ``"histogram"``, …) returns that query.
		- Anything else (including no argument) returns the full value list.

		Raises:
			NotImplementedError: For the ``palindrome``, ``urn`` and
				``relative`` cursor modes.
		"""

		if isinstance(key, numbers.Integral) and not isinstance(key, bool):
			return self._element(int(key))

		query = seqarray.query.resolve_query(key) if isinstance(key, (Query, str)) else None

		if query is None:
			return self.value

		return _QUERY_HANDLERS[query](self)


	def _element (self, index: int) -> typing.Any:

		if not self._value:
			logger.warning(f"Array {self._name!r} is empty, index {index} has no value")
			return None

		if index < 0 or index >= len(self._value):
			wrapped = seqarray.cursor.wrap_index(index, len(self._value))
			logger.warning(f"Index {index} out of range for length {len(self._value)}, wrapping to {wrapped}")
			index = wrapped

		return self._value[index]


	def _at_cursor (self, move: typing.Callable[[int], int]) -> typing.Any:

		"""Apply a cursor move and return the element it lands on."""

		if not self._value:
			logger.warning(f"Array {self._name!r} is empty, cursor has no value")
			return None

		return self._value[move(len(self._value))]


	def _numbers (self, operation: str) -> typing.List[float]:

		"""Return the values, or raise if any of them is not a number."""

		if not all(seqarray.classify.is_number(v) for v in self._value):
			type_name = self._type.value if self._type is not None else None
			raise seqarray.classify.InvalidInputError(
				f"{operation}() needs numeric values, array {self._name!r} is {type_name}"
			)

		return self._value


	# ─── Scalers ────────────────────────────────────────────────────────────


	def normalize (self, low: typing.Optional[float] = None, high: typing.Optional[float] = None) -> "Array":

		"""Rescale values to [0, 1], from the observed range or from ``[low, high]``."""

		return self.set(seqarray.transforms.normalize(self._numbers("normalize"), low, high))


	def rescale (self, low: float, high: float) -> "Array":

		"""Map the current range of values onto ``[low, high]``."""

		return self.set(seqarray.transforms.rescale(self._numbers("rescale"), low, high))

	range = scale = rescale


	def limit (self, low: float, high: float) -> "Array":

		"""Clamp values into ``[low, high]``. Not supported yet."""

		raise NotImplementedError("limit() is not supported yet")


	def exp_curve (self, factor: float) -> "Array":

		"""Bend values along an exponential curve while keeping their min and max."""

		return self.set(seqarray.transforms.exp_curve(self._numbers("exp_curve"), factor))


	def log_curve (self, factor: float) -> "Array":

		"""Bend values along a logarithmic curve while keeping their min and max."""

		return self.set(seqarray.transforms.log_curve(self._numbers("log_curve"), factor))


	def fit (self, length: int, interpolation: InterpolationArg = seqarray.constants.defaults.DEFAULT_INTERPOLATION) -> "Array":

		"""Resample to exactly ``length`` values."""

		return self.set(seqarray.transforms.fit(self._value, length, interpolation))


	def stretch (self, factor: float, interpolation: InterpolationArg = seqarray.constants.defaults.DEFAULT_INTERPOLATION) -> "Array":

		"""Resample to ``length * factor`` values."""

		return self.set(seqarray.transforms.stretch(self._value, factor, interpolation))


	def morph (self, target: typing.Any, amount: float, interpolation: InterpolationArg = seqarray.constants.defaults.DEFAULT_INTERPOLATION) -> "Array":

		"""Blend towards ``target`` (a sequence or another ``Array``) by ``amount`` in [0, 1].

		Lengths may differ; both sides are resampled to the longer length first.
		"""

		target_values = _values_of(target)

		if not all(seqarray.classify.is_number(v) for v in target_values):
			target_values = [seqarray.classify.to_float(v) for v in target_values]

		return self.set(seqarray.transforms.morph(self._numbers("morph"), target_values, amount, interpolation))


	# ─── Arithmetic ─────────────────────────────────────────────────────────


	def add (self, amount: float) -> "Array":
		return self.set(seqarray.transforms.add(self._numbers("add"), amount))


	def mult (self, factor: float) -> "Array":
		return self.set(seqarray.transforms.mult(self._numbers("mult"), factor))


	def round (self) -> "Array":

		"""Round to whole numbers, halves upward."""

		return self.set(seqarray.transforms.round_values(self._numbers("round")))


	def floor (self) -> "Array":
		return self.set(seqarray.transforms.floor_values(self._numbers("floor")))


	def ceil (self) -> "Array":
		return self.set(seqarray.transforms.ceil_values(self._numbers("ceil")))


	def hwr (self) -> "Array":

		"""Half-wave rectify: negative values become zero."""

		return self.set(seqarray.transforms.hwr(self._numbers("hwr")))


	def fwr (self) -> "Array":

		"""Full-wave rectify: take absolute values."""

		return self.set(seqarray.transforms.fwr(self._numbers("fwr")))

	abs = fwr


	# ─── List operations ────────────────────────────────────────────────────


	def sort (self) -> "Array":
		return self.set(seqarray.transforms.sort(self._value))


	def concat (self, other: typing.Any = None) -> "Array":

		"""Append the values of a list or another ``Array``."""

		if other is None:
			return self.set(self._value)

		return self.set(seqarray.transforms.concat(self._value, _values_of(other)))


	def repeat (self, count: int) -> "Array":

		"""Repeat the whole sequence ``count`` times."""

		return self.set(seqarray.transforms.repeat(self._value, count))

	rep = repeat


	def truncate (self, start: int, end: typing.Optional[int] = None) -> "Array":

		"""Drop the last ``start`` values, or the first ``start`` and last ``end``."""

		return self.set(seqarray.transforms.truncate(self._value, start, end))

	slice = truncate


	def shift (self, amount: int) -> "Array":

		"""Rotate the values by ``amount`` positions (positive moves them later)."""

		return self.set(seqarray.transforms.shift(self._value, amount))


	# ─── Nominal ────────────────────────────────────────────────────────────


	def histo (self) -> "Array":

		"""Replace the values with per-class counts.

		The classes and their counts are kept in ``classes`` and
		``class_counts``, and the type is tagged nominal even though the values
		are now counts. The original symbols come back only through ``reset()``.
		"""

		labels = seqarray.statistics.classes(self._value)
		counts = seqarray.statistics.histogram(self._value)

		self.set(list(counts.values()))

		self._classes = labels
		self._histogram = counts
		self._type = ArrayType.NOMINAL

		return self

	histogram = histo


	def unique (self) -> "Array":

		"""Keep each value once, in first-occurrence order."""

		return self.set(seqarray.transforms.unique(self._value))

	uniq = unique


	# ─── Musical ────────────────────────────────────────────────────────────


	def mirror (self) -> "Array":

		"""Reverse the order of the values."""

		return self.set(seqarray.transforms.mirror(self._value))

	reverse = mirror


	def invert (self, center: typing.Optional[float] = None) -> "Array":

		"""Flip values around ``center`` (the mean by default)."""

		return self.set(seqarray.transforms.invert(self._numbers("invert"), center))

	flip = invert


	def shuffle (self) -> "Array":

		"""Put the values in a random order drawn from ``rng``."""

		return self.set(seqarray.transforms.shuffle(self._value, self.rng))

	randomize = shuffle


	def pq (self, *scale: typing.Any) -> "Array":

		"""Pitch-quantize values to a scale.

		The scale may be omitted (chromatic), a name from
		``seqarray.scales.SCALE_DEFINITIONS``, a sequence or ``Array`` of
		degrees, or the degrees as separate arguments.

		Example:
			```python
			seqarray.array([60, 61, 66]).pq("major")   # [60.0, 62.0, 67.0]
			seqarray.array([1, 5, 8]).pq(0, 4, 7)      # [0.0, 4.0, 7.0]
			```
		"""

		if not scale:
			degrees: typing.Any = None

		elif len(scale) == 1 and isinstance(scale[0], str):
			degrees = scale[0]

		elif len(scale) == 1 and not isinstance(scale[0], numbers.Real):
			degrees = _values_of(scale[0])

		else:
			degrees = list(scale)

		return self.set(seqarray.transforms.pq(self._numbers("pq"), degrees))

	pitch_quantize = pitch_scale = pq


	def transpose (self, amount: float) -> "Array":

		"""Transpose pitch values. Not supported yet."""

		raise NotImplementedError("transpose() is not supported yet")


	# ─── Unit converters ────────────────────────────────────────────────────


	def notes_to_beats (self, resolution: int = seqarray.constants.defaults.DEFAULT_RESOLUTION) -> "Array":

		"""Convert note values (4 = quarter) into a beat grid of ``resolution`` steps per whole note."""

		return self.set(seqarray.transforms.notes_to_beats(self._numbers("notes_to_beats"), resolution))

	ntob = notes_to_beats


	def beats_to_notes (self, resolution: int = seqarray.constants.defaults.DEFAULT_RESOLUTION) -> "Array":

		"""Convert a beat grid back into note values."""

		return self.set(seqarray.transforms.beats_to_notes(self._numbers("beats_to_notes"), resolution))

	bton = beats_to_notes


	def intervals_to_beats (self) -> "Array":

		"""Convert onset intervals (in steps) into a beat grid."""

		return self.set(seqarray.transforms.intervals_to_beats(self._numbers("intervals_to_beats")))

	itob = intervals_to_beats


	def beats_to_intervals (self) -> "Array":

		"""Convert a beat grid into onset intervals."""

		return self.set(seqarray.transforms.beats_to_intervals(self._numbers("beats_to_intervals")))

	btoi = beats_to_intervals


	def beats_to_indices (self) -> "Array":

		"""Convert a beat grid into onset indices (delays in steps)."""

		return self.set(seqarray.transforms.beats_to_indices(self._numbers("beats_to_indices")))


	def indices_to_beats (self, length: typing.Optional[int] = None) -> "Array":

		"""Convert onset indices into a beat grid ``length`` steps long."""

		return self.set(seqarray.transforms.indices_to_beats(self._numbers("indices_to_beats"), length))


def _is_nan (value: typing.Any) -> bool:
	return isinstance(value, float) and math.isnan(value)


def _values_of (sequence: typing.Any) -> typing.List[typing.Any]:

	"""Return a fresh list of values from an ``Array`` or any ordered sequence."""

	if isinstance(sequence, Array):
		return sequence.value

	return seqarray.classify.as_list(sequence)


def _numeric_query (reducer: typing.Callable[[typing.Sequence[float]], float], operation: str) -> typing.Callable[[Array], float]:
	return lambda array: reducer(array._numbers(operation))


_QUERY_HANDLERS: typing.Dict[Query, typing.Callable[[Array], typing.Any]] = {
	Query.NAME: lambda array: array._name,
	Query.TYPE: lambda array: array._type,
	Query.LENGTH: lambda array: len(array._value),

	Query.MIN: lambda array: seqarray.statistics.minimum(array._value),
	Query.MAX: lambda array: seqarray.statistics.maximum(array._value),
	Query.MEAN: _numeric_query(seqarray.statistics.mean, "mean"),
	Query.MODE: lambda array: seqarray.statistics.mode(array._value),
	Query.MEDIAN: _numeric_query(seqarray.statistics.median, "median"),
	Query.MIDRANGE: _numeric_query(seqarray.statistics.midrange, "midrange"),
	Query.STD: _numeric_query(seqarray.statistics.std, "std"),
	Query.PSTD: _numeric_query(seqarray.statistics.pstd, "pstd"),
	Query.VAR: _numeric_query(seqarray.statistics.variance, "var"),
	Query.PVAR: _numeric_query(seqarray.statistics.population_variance, "pvar"),

	Query.CURRENT: lambda array: array._at_cursor(lambda length: array._cursor.position),
	Query.NEXT: lambda array: array._at_cursor(array._cursor.advance),
	Query.PREV: lambda array: array._at_cursor(array._cursor.retreat),
	Query.RANDOM: lambda array: array._at_cursor(lambda length: array._cursor.random_index(length, array.rng)),
	Query.INDEX: lambda array: array._cursor.position,
	Query.PALINDROME: lambda array: array._cursor.palindrome(len(array._value)),
	Query.URN: lambda array: array._cursor.urn(len(array._value), array.rng),
	Query.RELATIVE: lambda array: array._cursor.relative(len(array._value)),

	Query.ORIGINAL: lambda array: copy.deepcopy(array._original),
	Query.NORMALIZED: lambda array: seqarray.transforms.normalize(array._numbers("normalized")),
	Query.SORTED: lambda array: seqarray.transforms.sort(array._value),
	Query.UNIQUE: lambda array: seqarray.transforms.unique(array._value),
	Query.CLASSES: lambda array: seqarray.statistics.classes(array._value),
	Query.NUM_CLASSES: lambda array: len(seqarray.statistics.classes(array._value)),
	Query.HISTOGRAM: lambda array: seqarray.statistics.histogram(array._value),
	Query.VALUE: lambda array: array.value,
}


def array (sequence: typing.Any = None, name: typing.Optional[str] = None, rng: typing.Optional[random.Random] = None) -> Array:

	"""Create an :class:`Array`. ``a()`` and ``arr()`` are shorthands."""

	return Array(sequence, name, rng)


a = arr = array
