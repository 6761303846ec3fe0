"""Default arguments used when a caller leaves a parameter out.

These mirror the defaults of the public ``Array`` methods so that the CLI
settings (see ``seqarray.config``) and the library agree on one set of values.
"""

DEFAULT_FILL_LENGTH = 8
DEFAULT_FILL_MIN = 0.0
DEFAULT_FILL_MAX = 1.0

# Grid subdivision for note value <-> beat conversions.
DEFAULT_RESOLUTION = 4

DEFAULT_INTERPOLATION = "linear"
DEFAULT_SCALE = "chromatic"

PITCH_CLASSES = 12
