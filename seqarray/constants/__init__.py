"""Constants for seqarray.

This package contains two sets of constants:

- ``seqarray.constants.defaults`` - Default arguments shared by the array and its transforms
- ``seqarray.constants.durations`` - Note-value constants for the rhythmic converters
"""
