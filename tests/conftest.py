from pytest import fixture

from multivaluedict import MultiMap, SortedMultiMap


@fixture(params=[MultiMap, SortedMultiMap], ids=["hashed", "sorted"])
def multi_map_cls(request):
    return request.param


@fixture()
def multi_map(multi_map_cls):
    return multi_map_cls()
