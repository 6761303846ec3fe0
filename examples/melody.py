import logging
import random

import seqarray
import seqarray.constants.durations as dur

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger("melody")

SEED = 7
BARS = 2

rng = random.Random(SEED)

# One period of a sine over 16 steps, squeezed into two octaves above C3.
contour = seqarray.array(name="contour", rng=rng).fill("sine", 16, 48, 72)

# Snap it to A minor pentatonic, then bend it towards a falling line.
melody = (
	contour.clone()
	.name("melody")
	.pq("minor_pentatonic")
	.morph(seqarray.array().fill("line", 8, 72, 48), 0.3)
	.pq("minor_pentatonic")
)

logger.info(f"Melody: {melody.get()}")
logger.info(f"Range {melody.get('min')} to {melody.get('max')}, centre {melody.get('midrange')}")

# A second voice: the same notes in a shuffled order, a fifth below.
answer = melody.clone().name("answer").shuffle().add(-7)

logger.info(f"Answer: {answer.get()}")

# Rhythm: a quarter, two eighths and a half, once per bar.
rhythm = seqarray.array([dur.QUARTER, dur.EIGHTH, dur.EIGHTH, dur.HALF], name="rhythm").repeat(BARS)

grid = rhythm.clone().ntob(dur.SIXTEENTH)

logger.info(f"Beat grid ({grid.get('length')} steps): {grid.get()}")
logger.info(f"Onsets at: {grid.clone().beats_to_indices().get()}")

# Walk the melody once per onset, wrapping round when it runs out.
for step in grid.get():
	if step:
		logger.info(f"note {melody.get('current'):.0f}")
		melody.get("next")
