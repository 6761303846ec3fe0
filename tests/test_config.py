import logging

import pytest

import seqarray.config


def test_from_dict_defaults () -> None:

	"""An empty mapping gives the default settings."""

	settings = seqarray.config.Settings.from_dict({})

	assert settings.seed is None
	assert settings.fill.kind == "line"
	assert settings.fill.length == 8
	assert settings.pipeline == []


def test_from_dict_reads_fill_and_pipeline () -> None:

	"""min/max map onto the fill range; steps may be bare names or lists."""

	settings = seqarray.config.Settings.from_dict({
		"seed": 3,
		"name": "melody",
		"fill": {"kind": "sine", "length": 16, "min": 48, "max": 72},
		"pipeline": [["pq", "minor"], "round", ["shift", 2]],
	})

	assert settings.seed == 3
	assert settings.name == "melody"
	assert settings.fill == seqarray.config.FillSettings(kind="sine", length=16, low=48.0, high=72.0)
	assert settings.pipeline == [("pq", ["minor"]), ("round", []), ("shift", [2])]


def test_from_dict_rejects_bad_shapes () -> None:

	"""Sections with the wrong shape raise ValueError."""

	with pytest.raises(ValueError):
		seqarray.config.Settings.from_dict({"fill": [1, 2]})

	with pytest.raises(ValueError):
		seqarray.config.Settings.from_dict({"pipeline": [42]})

	with pytest.raises(ValueError):
		seqarray.config.Settings.from_dict(["not", "a", "mapping"])


def test_load_config_missing_file (tmp_path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing file logs a warning and yields an empty mapping."""

	with caplog.at_level(logging.WARNING, logger="seqarray.config"):
		assert seqarray.config.load_config(str(tmp_path / "absent.yaml")) == {}

	assert "not found" in caplog.text


def test_load_settings_from_yaml (tmp_path) -> None:

	"""Settings round-trip through a YAML file."""

	path = tmp_path / "seqarray.yaml"
	path.write_text(
		"seed: 1\n"
		"fill:\n"
		"  kind: ones\n"
		"  length: 3\n"
		"pipeline:\n"
		"  - [mult, 5]\n"
	)

	settings = seqarray.config.load_settings(str(path))

	assert settings.seed == 1
	assert settings.fill.kind == "ones"
	assert settings.fill.length == 3
	assert settings.pipeline == [("mult", [5])]
