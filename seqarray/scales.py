"""Named scales and pitch quantization.

Scales are lists of semitone degrees above the tonic (0–11). ``pq()`` snaps
numeric values to the nearest degree of a scale in any octave, so a MIDI-style
pitch sequence stays in its register while landing on scale tones:

    quantize([60, 61, 63.4, 66], get_scale("major"))  # → [60, 62, 64, 67]

Scale names are case-insensitive. ``register_scale()`` adds custom scales to
the table at runtime.
"""

import math
import typing

import seqarray.constants.defaults


SCALE_DEFINITIONS: typing.Dict[str, typing.List[int]] = {
	"augmented": [0, 3, 4, 7, 8, 11],
	"blues": [0, 3, 5, 6, 7, 10],
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
	"diminished": [0, 2, 3, 5, 6, 8, 9, 11],
	"dorian": [0, 2, 3, 5, 7, 9, 10],
	"double_harmonic": [0, 1, 4, 5, 7, 8, 11],
	"enigmatic": [0, 1, 4, 6, 8, 10, 11],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"hungarian_minor": [0, 2, 3, 6, 7, 8, 11],
	"locrian": [0, 1, 3, 5, 6, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"lydian_dominant": [0, 2, 4, 6, 7, 9, 10],
	"major": [0, 2, 4, 5, 7, 9, 11],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"melodic_minor": [0, 2, 3, 5, 7, 9, 11],
	"minor": [0, 2, 3, 5, 7, 8, 10],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"neapolitan_major": [0, 1, 3, 5, 7, 9, 11],
	"phrygian": [0, 1, 3, 5, 7, 8, 10],
	"phrygian_dominant": [0, 1, 4, 5, 7, 8, 10],
	"superlocrian": [0, 1, 3, 4, 6, 8, 10],
	"whole_tone": [0, 2, 4, 6, 8, 10],
}


# Alternative names that resolve to an entry above.
SCALE_ALIASES: typing.Dict[str, str] = {
	"ionian": "major",
	"aeolian": "minor",
	"natural_minor": "minor",
	"pentatonic": "major_pentatonic",
	"wholetone": "whole_tone",
	"chromatic_scale": "chromatic",
}


def get_scale (name: str) -> typing.List[int]:

	"""
	Return a copy of the named scale's degrees.

	Raises:
		ValueError: If the name is not in the table.
	"""

	key = name.lower()
	key = SCALE_ALIASES.get(key, key)

	if key not in SCALE_DEFINITIONS:
		raise ValueError(f"Unknown scale '{name}'. Available: {sorted(SCALE_DEFINITIONS)}")

	return list(SCALE_DEFINITIONS[key])


def register_scale (name: str, degrees: typing.List[int]) -> None:

	"""
	Add or replace a named scale.

	Parameters:
		name: Lookup name (stored lower-case).
		degrees: Semitone degrees above the tonic, each in 0–11.
	"""

	if not degrees:
		raise ValueError("Scale degrees cannot be empty")

	if any(d < 0 or d >= seqarray.constants.defaults.PITCH_CLASSES for d in degrees):
		raise ValueError(f"Scale degrees must lie in 0-11, got {degrees}")

	SCALE_DEFINITIONS[name.lower()] = sorted(set(degrees))


def resolve_scale (scale: typing.Union[str, typing.Sequence[float], None]) -> typing.List[float]:

	"""
	Turn a scale argument into a list of degrees.

	None gives the default (chromatic) scale, a string is looked up by name,
	and any other sequence is used as given.
	"""

	if scale is None:
		return get_scale(seqarray.constants.defaults.DEFAULT_SCALE)

	if isinstance(scale, str):
		return get_scale(scale)

	degrees = list(scale)

	if not degrees:
		raise ValueError("Scale cannot be empty")

	return degrees


def quantize_value (value: float, degrees: typing.Sequence[float]) -> float:

	"""
	Snap one value to the nearest scale degree in any octave.

	Degrees are taken modulo 12 and tried in the value's own octave and the
	octaves either side, so values near an octave boundary can land on the
	next octave's tonic. When two candidates are equidistant the upper one
	wins. NaN and infinite values pass through unchanged.

	Example:
		```python
		quantize_value(61, [0, 2, 4, 5, 7, 9, 11])  # → 62 (C# ties C and D, upward wins)
		quantize_value(11.8, [0, 4, 7])             # → 12
		```
	"""

	if math.isnan(value) or math.isinf(value):
		return value

	octaves = seqarray.constants.defaults.PITCH_CLASSES
	base = math.floor(value / octaves) * octaves

	best: typing.Optional[float] = None
	best_distance = math.inf

	for degree in degrees:
		pc = degree % octaves
		for shift in (-octaves, 0, octaves):
			candidate = base + pc + shift
			distance = abs(candidate - value)
			if distance < best_distance or (distance == best_distance and best is not None and candidate > best):
				best = candidate
				best_distance = distance

	return best if best is not None else value


def quantize (values: typing.Sequence[float], degrees: typing.Sequence[float]) -> typing.List[float]:

	"""Snap every value to the nearest degree of the scale."""

	return [quantize_value(v, degrees) for v in values]
