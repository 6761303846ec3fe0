"""Named queries accepted by ``Array.get()``.

:class:`Query` is the closed set of things an array can report. ``get()``
accepts a member directly or any of the string names in
:data:`QUERY_ALIASES`; an unknown string falls back to the full value list.

Categories:

- identity: ``NAME``, ``TYPE``, ``LENGTH``
- statistics: ``MIN``, ``MAX``, ``MEAN``, ``MODE``, ``MEDIAN``, ``MIDRANGE``,
  ``STD``, ``PSTD``, ``VAR``, ``PVAR``
- cursor: ``CURRENT``, ``NEXT``, ``PREV``, ``RANDOM``, ``INDEX``, and the
  unsupported ``PALINDROME``, ``URN``, ``RELATIVE``
- views: ``ORIGINAL``, ``NORMALIZED``, ``SORTED``, ``UNIQUE``, ``CLASSES``,
  ``NUM_CLASSES``, ``HISTOGRAM``, ``VALUE``
"""

import enum
import typing


class Query(enum.Enum):

	NAME = "name"
	TYPE = "type"
	LENGTH = "length"

	MIN = "min"
	MAX = "max"
	MEAN = "mean"
	MODE = "mode"
	MEDIAN = "median"
	MIDRANGE = "midrange"
	STD = "std"
	PSTD = "pstd"
	VAR = "var"
	PVAR = "pvar"

	CURRENT = "current"
	NEXT = "next"
	PREV = "prev"
	RANDOM = "random"
	INDEX = "index"
	PALINDROME = "palindrome"
	URN = "urn"
	RELATIVE = "relative"

	ORIGINAL = "original"
	NORMALIZED = "normalized"
	SORTED = "sorted"
	UNIQUE = "unique"
	CLASSES = "classes"
	NUM_CLASSES = "numClasses"
	HISTOGRAM = "histogram"
	VALUE = "value"


QUERY_ALIASES: typing.Dict[str, Query] = {
	"name": Query.NAME,
	"key": Query.NAME,
	"type": Query.TYPE,
	"len": Query.LENGTH,
	"length": Query.LENGTH,

	"min": Query.MIN,
	"minimum": Query.MIN,
	"max": Query.MAX,
	"maximum": Query.MAX,
	"mean": Query.MEAN,
	"average": Query.MEAN,
	"avg": Query.MEAN,
	"mode": Query.MODE,
	"median": Query.MEDIAN,
	"midrange": Query.MIDRANGE,
	"std": Query.STD,
	"standardDeviation": Query.STD,
	"pstd": Query.PSTD,
	"var": Query.VAR,
	"variance": Query.VAR,
	"pvar": Query.PVAR,
	"populationVariance": Query.PVAR,

	"current": Query.CURRENT,
	"curr": Query.CURRENT,
	"cur": Query.CURRENT,
	"now": Query.CURRENT,
	"moment": Query.CURRENT,
	"next": Query.NEXT,
	"prev": Query.PREV,
	"previous": Query.PREV,
	"random": Query.RANDOM,
	"index": Query.INDEX,
	"idx": Query.INDEX,
	"palindrome": Query.PALINDROME,
	"urn": Query.URN,
	"relative": Query.RELATIVE,
	"location": Query.RELATIVE,
	"loc": Query.RELATIVE,

	"original": Query.ORIGINAL,
	"normal": Query.NORMALIZED,
	"normalize": Query.NORMALIZED,
	"normalized": Query.NORMALIZED,
	"sorted": Query.SORTED,
	"sort": Query.SORTED,
	"unique": Query.UNIQUE,
	"uniques": Query.UNIQUE,
	"uniq": Query.UNIQUE,
	"classes": Query.CLASSES,
	"numClasses": Query.NUM_CLASSES,
	"num_classes": Query.NUM_CLASSES,
	"histogram": Query.HISTOGRAM,
	"histo": Query.HISTOGRAM,
	"value": Query.VALUE,
}


def resolve_query (key: typing.Union[Query, str]) -> typing.Optional[Query]:

	"""Return the query for a member or alias, or None for an unknown name."""

	if isinstance(key, Query):
		return key

	return QUERY_ALIASES.get(key)
