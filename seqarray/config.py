"""Settings for the ``python -m seqarray`` runner.

Settings are read from a YAML file. Every key is optional; missing keys fall
back to the library defaults in ``seqarray.constants.defaults``::

    seed: 42
    name: melody
    fill:
      kind: sine
      length: 16
      min: 48
      max: 72
    pipeline:
      - [pq, minor_pentatonic]
      - [shift, 3]
      - [round]

Each pipeline step is a method name followed by its positional arguments. A
bare string is accepted for steps without arguments.
"""

import dataclasses
import logging
import os
import typing

import yaml

import seqarray.constants.defaults


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class FillSettings:

	"""Generator used to build the starting array."""

	kind: str = "line"
	length: int = seqarray.constants.defaults.DEFAULT_FILL_LENGTH
	low: float = seqarray.constants.defaults.DEFAULT_FILL_MIN
	high: float = seqarray.constants.defaults.DEFAULT_FILL_MAX


@dataclasses.dataclass
class Settings:

	"""Everything the runner needs to build and transform one array."""

	seed: typing.Optional[int] = None
	name: str = ""
	fill: FillSettings = dataclasses.field(default_factory=FillSettings)
	pipeline: typing.List[typing.Tuple[str, typing.List[typing.Any]]] = dataclasses.field(default_factory=list)

	@staticmethod
	def from_dict (data: typing.Optional[typing.Dict[str, typing.Any]]) -> "Settings":

		"""
		Build settings from a parsed YAML mapping.

		Raises:
			ValueError: If a section has the wrong shape.
		"""

		data = data or {}

		if not isinstance(data, dict):
			raise ValueError(f"Settings must be a mapping, got {type(data).__name__}")

		fill_data = data.get("fill", {}) or {}

		if not isinstance(fill_data, dict):
			raise ValueError("'fill' must be a mapping")

		fill = FillSettings(
			kind = str(fill_data.get("kind", FillSettings.kind)),
			length = int(fill_data.get("length", FillSettings.length)),
			low = float(fill_data.get("min", FillSettings.low)),
			high = float(fill_data.get("max", FillSettings.high)),
		)

		pipeline = [_parse_step(step) for step in data.get("pipeline", []) or []]

		seed = data.get("seed")

		return Settings(
			seed = int(seed) if seed is not None else None,
			name = str(data.get("name", "")),
			fill = fill,
			pipeline = pipeline,
		)


def _parse_step (step: typing.Any) -> typing.Tuple[str, typing.List[typing.Any]]:

	"""Split one pipeline entry into a method name and its arguments."""

	if isinstance(step, str):
		return step, []

	if isinstance(step, list) and step and isinstance(step[0], str):
		return step[0], list(step[1:])

	raise ValueError(f"Pipeline steps must be a method name or [name, *args], got {step!r}")


def load_config (config_path: str = "seqarray.yaml") -> typing.Dict[str, typing.Any]:

	"""
	Load settings from a YAML file, or an empty mapping if it does not exist.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, "r") as f:
		return yaml.safe_load(f) or {}


def load_settings (config_path: str = "seqarray.yaml") -> Settings:

	"""Load and validate settings from ``config_path``."""

	return Settings.from_dict(load_config(config_path))
