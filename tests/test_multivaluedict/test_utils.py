from multivaluedict.utils import flatten, index_of


def test_flatten():
    assert list(flatten([[1, 2], [], (3,)])) == [1, 2, 3]
    assert list(flatten([])) == []


def test_index_of_uses_equality():
    values = [[1], {"a": 1}, [1]]

    assert index_of(values, [1]) == 0
    assert index_of(values, {"a": 1}) == 1
    assert index_of(values, [2]) is None
    assert index_of([], 1) is None
