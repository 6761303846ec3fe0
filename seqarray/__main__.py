import logging
import random
import sys
import typing

import seqarray.config
import seqarray.container


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build (settings: seqarray.config.Settings) -> seqarray.container.Array:

	"""
	Build an array from the fill settings and run it through the pipeline.

	Raises:
		ValueError: If a pipeline step names something that is not an array method.
	"""

	seed = settings.seed if settings.seed is not None else random.randrange(2 ** 32)
	logger.debug(f"Using seed {seed}")

	result = seqarray.container.array(name=settings.name, rng=random.Random(seed))
	result.fill(settings.fill.kind, settings.fill.length, settings.fill.low, settings.fill.high)

	for method_name, args in settings.pipeline:

		method = getattr(result, method_name, None)

		if method_name.startswith("_") or not callable(method):
			raise ValueError(f"Unknown array operation '{method_name}'")

		outcome = method(*args)

		# get() and the other queries return values, not the array.
		if not isinstance(outcome, seqarray.container.Array):
			raise ValueError(f"'{method_name}' is a query, not a transform")

	return result


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point: ``python -m seqarray [config.yaml]``.
	"""

	args = sys.argv[1:] if argv is None else argv
	config_path = args[0] if args else "seqarray.yaml"

	settings = seqarray.config.load_settings(config_path)
	result = build(settings)

	logger.info(f"{result.get('name') or 'array'} ({result.get('length')} values): {result.get()}")

	if result.summary is not None:
		summary = result.summary
		logger.info(f"min={summary.min:.3f} max={summary.max:.3f} mean={summary.mean:.3f} std={summary.std:.3f}")


if __name__ == "__main__":
	main()
