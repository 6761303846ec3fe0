"""Shape and noise generators behind ``Array.fill()``.

Recognised kinds (aliases in brackets):

    "line"                      Linear ramp from min to max.
    "noise" ["random"]          Uniform random values in [min, max].
    "gaussian" ["gauss", "normal"]
                                Normally distributed values centred on the
                                middle of the range, clamped to [min, max].
    "sin" ["sine"]              One sine period mapped onto [min, max].
    "cos" ["cosine"]            One cosine period mapped onto [min, max].
    "zeroes" ["zeros"]          All zero (min and max are ignored).
    "ones"                      All one (min and max are ignored).

Random kinds draw from the ``random.Random`` passed in, so a seeded generator
reproduces the same values.
"""

import math
import random
import typing

import seqarray.constants.defaults


GENERATOR_ALIASES: typing.Dict[str, str] = {
	"line": "line",
	"noise": "noise",
	"random": "noise",
	"gaussian": "gaussian",
	"gauss": "gaussian",
	"normal": "gaussian",
	"sin": "sin",
	"sine": "sin",
	"cos": "cos",
	"cosine": "cos",
	"zeroes": "zeroes",
	"zeros": "zeroes",
	"ones": "ones",
}


def _line (length: int, low: float, high: float) -> typing.List[float]:

	if length == 1:
		return [float(low)]

	return [low + (high - low) * i / (length - 1) for i in range(length)]


def _periodic (fn: typing.Callable[[float], float], length: int, low: float, high: float) -> typing.List[float]:

	"""Sample one period of ``fn`` and map its [-1, 1] output onto [low, high]."""

	return [low + (high - low) * (fn(2.0 * math.pi * i / length) + 1.0) / 2.0 for i in range(length)]


def generate (
	kind: str,
	length: int = seqarray.constants.defaults.DEFAULT_FILL_LENGTH,
	low: float = seqarray.constants.defaults.DEFAULT_FILL_MIN,
	high: float = seqarray.constants.defaults.DEFAULT_FILL_MAX,
	rng: typing.Optional[random.Random] = None,
) -> typing.List[float]:

	"""
	Generate ``length`` values of the given kind.

	Parameters:
		kind: Generator name (see the module docstring for the list).
		length: Number of values (a non-positive length gives an empty list).
		low: Lower bound of the output range.
		high: Upper bound of the output range.
		rng: Random source for ``noise`` and ``gaussian``. Defaults to a new
			unseeded ``random.Random``.

	Raises:
		ValueError: If ``kind`` is not recognised.
	"""

	if kind.lower() not in GENERATOR_ALIASES:
		raise ValueError(f"Unknown generator '{kind}'. Available: {sorted(GENERATOR_ALIASES)}")

	name = GENERATOR_ALIASES[kind.lower()]

	if length <= 0:
		return []

	if rng is None:
		rng = random.Random()

	if name == "line":
		return _line(length, low, high)

	if name == "noise":
		return [rng.uniform(low, high) for _ in range(length)]

	if name == "gaussian":
		centre = (low + high) / 2.0
		sigma = abs(high - low) / 6.0
		bottom, top = min(low, high), max(low, high)
		return [max(bottom, min(top, rng.gauss(centre, sigma))) for _ in range(length)]

	if name == "sin":
		return _periodic(math.sin, length, low, high)

	if name == "cos":
		return _periodic(math.cos, length, low, high)

	if name == "zeroes":
		return [0.0] * length

	return [1.0] * length
