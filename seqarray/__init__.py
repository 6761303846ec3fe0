"""
seqarray - typed value arrays for algorithmic music.

An ``Array`` is the value carrier for a generated parameter stream: pitches,
durations, velocities, amplitudes, or symbols. It knows whether it holds
numbers or symbols, keeps its summary statistics up to date, and offers a
chainable set of transforms for shaping the stream before it is handed to
whatever plays it.

What it provides:

- **Type inference.** Numbers (and numeric strings) are coerced to floats;
  letters and symbols are kept as nominal classes with histogram support.
- **Cached statistics.** Min, max, mean and standard deviation are refreshed
  on every change; median, mode, midrange and variances are computed on
  demand through ``get()``.
- **Scaling and curves.** ``normalize()``, ``rescale()``, ``exp_curve()``,
  ``log_curve()``.
- **Resampling.** ``fit()``, ``stretch()`` and ``morph()`` with linear,
  step, cosine or cubic interpolation.
- **List operations.** Mirror, invert, shuffle, shift, truncate, repeat,
  concat, unique, sort.
- **Music.** Pitch quantization to named scales (``pq("dorian")``) and
  conversions between note values, beat grids, intervals and onset indices.
- **Traversal.** A wrapping cursor: ``get("next")``, ``get("prev")``,
  ``get("random")``.
- **Deterministic randomness.** Pass ``rng=random.Random(seed)`` and every
  shuffle, noise fill and random pick repeats exactly.

Minimal example:

    ```python
    import random
    import seqarray

    pitches = (
        seqarray.array(rng=random.Random(7))
        .fill("sine", 16, 48, 72)
        .pq("minor_pentatonic")
    )

    rhythm = seqarray.array([4, 8, 8, 4, 4]).ntob(8)

    for _ in range(4):
        print(pitches.get("next"))
    ```

Package-level exports: ``Array``, ``ArraySummary``, ``ArrayType``, ``Query``,
``InvalidInputError``, ``array``, ``a``, ``arr``, ``register_scale``.
"""

import seqarray.container
import seqarray.classify
import seqarray.query
import seqarray.scales


Array = seqarray.container.Array
ArraySummary = seqarray.container.ArraySummary
ArrayType = seqarray.classify.ArrayType
InvalidInputError = seqarray.classify.InvalidInputError
Query = seqarray.query.Query

array = seqarray.container.array
a = seqarray.container.a
arr = seqarray.container.arr

register_scale = seqarray.scales.register_scale
