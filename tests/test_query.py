import seqarray.container
import seqarray.query


def test_every_query_has_a_handler () -> None:

	"""get() can answer every member of the query enum."""

	assert set(seqarray.container._QUERY_HANDLERS) == set(seqarray.query.Query)


def test_every_member_resolves_by_its_value () -> None:

	"""Each query's own string value is an accepted name."""

	for query in seqarray.query.Query:
		assert seqarray.query.resolve_query(query.value) is query


def test_legacy_aliases () -> None:

	"""Older spellings map onto the same queries."""

	Query = seqarray.query.Query

	assert seqarray.query.resolve_query("avg") is Query.MEAN
	assert seqarray.query.resolve_query("standardDeviation") is Query.STD
	assert seqarray.query.resolve_query("populationVariance") is Query.PVAR
	assert seqarray.query.resolve_query("curr") is Query.CURRENT
	assert seqarray.query.resolve_query("previous") is Query.PREV
	assert seqarray.query.resolve_query("loc") is Query.RELATIVE
	assert seqarray.query.resolve_query("histo") is Query.HISTOGRAM


def test_members_pass_through_and_unknown_is_none () -> None:

	"""Enum members resolve to themselves; unknown names give None."""

	assert seqarray.query.resolve_query(seqarray.query.Query.MODE) is seqarray.query.Query.MODE
	assert seqarray.query.resolve_query("bogus") is None
