from multivaluedict.errors import MultiMapError, MultiMapKeyError, MultiMapValueError
from multivaluedict.multi_map import MultiMap, MultiMapIterator
from multivaluedict.protocols import MultiValueDictionary
from multivaluedict.sorted_multi_map import SortedMultiMap

__all__ = [
    "MultiMap",
    "MultiMapError",
    "MultiMapIterator",
    "MultiMapKeyError",
    "MultiMapValueError",
    "MultiValueDictionary",
    "SortedMultiMap",
]
