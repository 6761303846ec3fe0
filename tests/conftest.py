import random

import pytest

import seqarray.container


@pytest.fixture
def rng () -> random.Random:

	"""Seeded random source so shuffles and noise repeat between runs."""

	return random.Random(42)


@pytest.fixture
def numbers () -> seqarray.container.Array:

	"""A small numeric array used across container tests."""

	return seqarray.container.Array([1, 2, 3, 4], name="numbers", rng=random.Random(7))


@pytest.fixture
def letters () -> seqarray.container.Array:

	"""A nominal array built from a string."""

	return seqarray.container.Array("abcab", name="letters", rng=random.Random(7))
