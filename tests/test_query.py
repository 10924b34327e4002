from tablestore.query import PredicateQuery, ShapeQuery, compile_query
from tablestore.validation import deep_equal


def test_compile_query_picks_variant():
    assert isinstance(compile_query({'a': 1}, 'find'), ShapeQuery)
    assert isinstance(compile_query(lambda r: True, 'find'), PredicateQuery)


def test_shape_copied_at_compile_time():
    shape = {'tags': ['a']}
    q = compile_query(shape, 'find')
    shape['tags'].append('b')
    assert q.matches({'tags': ['a']})


def test_shape_matching_semantics():
    q = compile_query({'owner': {'name': 'Sam'}, 'tags': ['a', 'b']}, 'find')
    assert q.matches({'owner': {'name': 'Sam'}, 'tags': ['a', 'b'], 'extra': 1})
    assert not q.matches({'owner': {'name': 'Sam', 'age': 3}, 'tags': ['a', 'b']})
    assert not q.matches({'owner': {'name': 'Sam'}, 'tags': ['b', 'a']})
    assert not q.matches({'tags': ['a', 'b']})
    assert compile_query({}, 'find').matches({})


def test_missing_key_does_not_match_none():
    assert not compile_query({'owner': None}, 'find').matches({})
    assert compile_query({'owner': None}, 'find').matches({'owner': None})


def test_deep_equal():
    assert deep_equal({'a': [1, {'b': 2}]}, {'a': [1, {'b': 2}]})
    assert deep_equal(float('nan'), float('nan'))
    assert deep_equal(1, 1.0)
    assert not deep_equal(True, 1)
    assert not deep_equal(0, False)
    assert not deep_equal([1, 2], (1, 2))
    assert not deep_equal({'a': 1}, {'a': 1, 'b': 2})
    assert not deep_equal('1', 1)
