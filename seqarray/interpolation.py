"""Interpolation kinds for resampling.

An interpolation reads a sequence at a fractional *position* in
``[0, len(values) - 1]`` and returns the value there. ``fit()``,
``stretch()`` and ``morph()`` use one to resample an array to a new length:

    seqarray.array([0, 10, 0]).fit(5)                       # linear
    seqarray.array([0, 10, 0]).fit(5, interpolation="cubic")

    # Custom callable, receives the values and a float position:
    seqarray.array([0, 10, 0]).fit(5, interpolation=lambda v, x: v[round(x)])

Available kinds:

    "linear"  Straight line between neighbouring samples (default).
    "step"    Holds the previous sample; the only kind for non-numeric data.
    "cosine"  Hermite smoothstep between neighbours, easing in and out of each sample.
    "cubic"   Catmull-Rom spline through the four surrounding samples.

All kinds return the sample itself at every integer position, so resampled
arrays always keep their first and last values.
"""

from __future__ import annotations

import math
import typing


Interpolation = typing.Callable[[typing.Sequence[typing.Any], float], typing.Any]


# ─── Segment shapes ──────────────────────────────────────────────────────────


def _linear_shape (t: float) -> float:
	return t


def _smoothstep_shape (t: float) -> float:
	return t * t * (3.0 - 2.0 * t)


def _split (values: typing.Sequence[typing.Any], position: float) -> typing.Tuple[int, float]:

	"""Return the left sample index and the fractional distance past it."""

	last = len(values) - 1
	position = max(0.0, min(float(last), position))
	index = min(int(math.floor(position)), last)
	return index, position - index


def _shaped (shape: typing.Callable[[float], float]) -> Interpolation:

	"""Build an interpolation that blends two neighbours along ``shape``."""

	def interpolate (values: typing.Sequence[float], position: float) -> float:

		index, t = _split(values, position)

		if t == 0.0:
			return values[index]

		left = values[index]
		right = values[index + 1]
		return left + (right - left) * shape(t)

	return interpolate


# ─── Interpolation kinds ─────────────────────────────────────────────────────


linear = _shaped(_linear_shape)
cosine = _shaped(_smoothstep_shape)


def step (values: typing.Sequence[typing.Any], position: float) -> typing.Any:
	"""Hold the sample at or before ``position``."""
	index, _ = _split(values, position)
	return values[index]


def cubic (values: typing.Sequence[float], position: float) -> float:

	"""Catmull-Rom interpolation through the samples around ``position``.

	The outer neighbours are clamped at the ends, so the curve passes through
	every sample and does not overshoot past the first or last one.
	"""

	index, t = _split(values, position)

	if t == 0.0:
		return values[index]

	last = len(values) - 1
	p0 = values[max(0, index - 1)]
	p1 = values[index]
	p2 = values[min(last, index + 1)]
	p3 = values[min(last, index + 2)]

	return 0.5 * (
		2.0 * p1
		+ (p2 - p0) * t
		+ (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t * t
		+ (3.0 * p1 - p0 - 3.0 * p2 + p3) * t * t * t
	)


# ─── Registry and lookup ─────────────────────────────────────────────────────


INTERPOLATIONS: typing.Dict[str, Interpolation] = {
	"linear": linear,
	"step":   step,
	"cosine": cosine,
	"cubic":  cubic,
}


def get_interpolation (kind: typing.Union[str, Interpolation, None]) -> Interpolation:

	"""Return the interpolation for *kind*.

	*kind* may be a name string (see :data:`INTERPOLATIONS`), a callable
	``f(values, position)``, or None for ``"linear"``.

	Raises :class:`ValueError` for unknown string names.
	"""

	if kind is None:
		return linear
	if callable(kind):
		return kind
	if kind not in INTERPOLATIONS:
		available = ", ".join(f'"{k}"' for k in sorted(INTERPOLATIONS))
		raise ValueError(
			f"Unknown interpolation {kind!r}. Available kinds: {available}"
		)
	return INTERPOLATIONS[kind]


def sample_positions (source_length: int, target_length: int) -> typing.List[float]:

	"""Evenly spaced positions spanning ``[0, source_length - 1]``.

	The first position is always 0 and the last is always
	``source_length - 1``. A single target sample sits at position 0.
	"""

	if target_length <= 0:
		return []

	if target_length == 1 or source_length <= 1:
		return [0.0] * target_length

	span = source_length - 1
	return [i * span / (target_length - 1) for i in range(target_length)]
