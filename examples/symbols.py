import logging
import random

import seqarray

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger("symbols")

# Nominal data: chord symbols drawn from a weighted pool.
rng = random.Random(3)
pool = ["I"] * 4 + ["IV"] * 2 + ["V"] * 3 + ["vi"]

chords = seqarray.array([rng.choice(pool) for _ in range(16)], name="chords", rng=rng)

logger.info(f"{chords.get('name')}: {chords.get()}")
logger.info(f"Most common: {chords.get('mode')}, {chords.get('numClasses')} distinct")

# Replace the symbols with their counts; the labels stay in class_counts.
counts = chords.clone().histo()

for label, count in counts.class_counts.items():
	logger.info(f"{label:>3} {'#' * count}")

# Resampling symbols holds each value instead of blending.
logger.info(f"Stretched: {chords.clone().truncate(12).stretch(1.5).get()}")

# Step through them like a sequencer, then pick one at random.
logger.info(f"Walk: {[chords.get('next') for _ in range(6)]}")
logger.info(f"Random pick: {chords.get('random')}")
