"""
Delimited-key to nested-tree aggregation.

Host language tables arrive flat, keyed by paths such as ``stage.label`` or
``editor/toolbar/save``. This module turns them into nested dicts mirroring
the path structure and back again.

Key rules:
- ``.`` and ``/`` are the same delimiter, and a run of either is one split
  point (``a./.b`` splits like ``a.b``)
- Leading or trailing delimiters keep their empty segment as a ``""`` key
- Prefix collisions resolve last-write-wins (no error)
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Union

logger = logging.getLogger(__name__)

SEGMENT_DELIMITER = re.compile(r'[./]+')

# Leaf strings and interior dicts share the same mapping
TranslationTree = Dict[str, Union[str, 'TranslationTree']]


def split_key(key: str) -> List[str]:
    """Split a delimited key into path segments."""
    return SEGMENT_DELIMITER.split(key)


def _child_tree(current: TranslationTree, segment: str) -> TranslationTree:
    """Get or create the interior node under ``segment``."""
    child = current.get(segment)
    if not isinstance(child, dict):
        if child is not None:
            logger.debug(f"Leaf at segment {segment!r} replaced by interior node")
        child = {}
        current[segment] = child
    return child


def aggregate(flat: Mapping[str, str]) -> TranslationTree:
    """Aggregate a flat table of delimited keys into a nested tree.

    Args:
        flat: Mapping of delimited keys to strings. Not mutated.

    Returns:
        Nested dict where interior nodes are dicts and leaves are the
        original values.

    Example:
        >>> aggregate({'stage.label': 'Stage', 'stage/hint': 'Hint text'})
        {'stage': {'label': 'Stage', 'hint': 'Hint text'}}
    """
    tree: TranslationTree = {}

    for key, value in flat.items():
        *path, leaf = split_key(key)

        current = tree
        for segment in path:
            current = _child_tree(current, segment)

        if isinstance(current.get(leaf), dict):
            logger.debug(f"Interior node {key!r} overwritten by leaf")
        current[leaf] = value

    return tree


def flatten(tree: Mapping[str, Any], separator: str = '/', prefix: Optional[str] = None) -> Dict[str, Any]:
    """Collect the leaves of a nested tree under joined keys.

    Inverse of :func:`aggregate` for tables whose keys are written with
    ``separator`` and do not collide.
    """
    flat: Dict[str, Any] = {}
    for segment, node in tree.items():
        key = segment if prefix is None else f'{prefix}{separator}{segment}'
        if isinstance(node, Mapping):
            flat.update(flatten(node, separator=separator, prefix=key))
        else:
            flat[key] = node
    return flat


def lookup(tree: Mapping[str, Any], key: str) -> Optional[Union[str, TranslationTree]]:
    """Walk ``tree`` along a delimited key.

    Returns the leaf string or interior dict found at the path, or None
    when any segment is missing.
    """
    current: Any = tree
    for segment in split_key(key):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current
