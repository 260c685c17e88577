"""
Nested translation tables built from flat, delimited string keys.

Modules:
    - key_path: Flat-to-nested aggregation (aggregate, flatten, lookup)
    - dictionary: Dictionary service reading texts by delimited key
"""

from i18ntree.key_path import (
    SEGMENT_DELIMITER,
    TranslationTree,
    aggregate,
    flatten,
    lookup,
    split_key,
)
from i18ntree.dictionary import Dictionary

__all__ = [
    'SEGMENT_DELIMITER',
    'TranslationTree',
    'aggregate',
    'flatten',
    'lookup',
    'split_key',
    'Dictionary',
]
