"""Note-value constants for the rhythmic converters.

Note values are expressed as the denominator of the note's fraction of a
whole note: 1 = whole, 4 = quarter, 16 = sixteenth. This is the unit
``notes_to_beats()`` reads and ``beats_to_notes()`` writes::

    import seqarray
    import seqarray.constants.durations as dur

    beats = seqarray.array([dur.QUARTER, dur.EIGHTH, dur.EIGHTH]).ntob(8)
    # [1, 0, 1, 1]

A note value only fits the grid exactly when it divides the resolution.
"""

WHOLE = 1
HALF = 2
QUARTER = 4
EIGHTH = 8
SIXTEENTH = 16
THIRTYSECOND = 32
