"""
Translation dictionary backed by a nested key-path tree.

The editor fills a Dictionary once at construction with the aggregated
library strings and reads UI texts by delimited key afterwards.
"""

import copy
import logging
from typing import Any, Dict, Mapping, Optional

from i18ntree.key_path import TranslationTree, aggregate, lookup

logger = logging.getLogger(__name__)


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` into ``base`` recursively (override wins on leaves)."""
    for key, value in override.items():
        existing = base.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            _deep_merge(existing, value)
        else:
            base[key] = copy.deepcopy(value)
    return base


class Dictionary:
    """
    Nested translation lookup.

    Keys use the same delimiters as the aggregated table (``.`` or ``/``).
    Placeholders in leaf texts are written ``:name`` and replaced from the
    ``replacements`` mapping passed to :meth:`get`.
    """

    MISSING_TEMPLATE = "[Missing translation {key}]"

    def __init__(self, translations: Optional[Mapping[str, Any]] = None):
        self._translations: TranslationTree = {}
        if translations:
            self.fill(translations)

    @classmethod
    def from_library_strings(cls, language: Optional[Mapping[str, Any]], library: str) -> 'Dictionary':
        """Build a dictionary from a host language table.

        Args:
            language: Host language table keyed by library name
            library: Library name, e.g. ``'H5PEditor.GameMap'``

        Returns:
            Dictionary filled from ``language[library]['libraryStrings']``,
            empty when either level is missing
        """
        library_entry = (language or {}).get(library) or {}
        plain_translations = library_entry.get('libraryStrings') or {}
        logger.debug(f"Filling dictionary for {library!r} from {len(plain_translations)} strings")
        return cls(aggregate(plain_translations))

    def fill(self, translations: Mapping[str, Any], merge: bool = False) -> None:
        """Store a nested translation tree.

        Args:
            translations: Nested tree, typically the result of ``aggregate()``
            merge: If True, deep-merge into existing translations instead of
                   replacing them
        """
        if merge:
            _deep_merge(self._translations, translations)
        else:
            self._translations = copy.deepcopy(dict(translations))

    def get(self, key: str, replacements: Optional[Mapping[str, Any]] = None) -> str:
        """Get translation text for a delimited key."""
        text = lookup(self._translations, key)

        if not isinstance(text, str):
            logger.warning(f"Missing translation for key {key!r}")
            return self.MISSING_TEMPLATE.format(key=key)

        for placeholder, value in (replacements or {}).items():
            text = text.replace(placeholder, str(value))

        return text

    def has(self, key: str) -> bool:
        return isinstance(lookup(self._translations, key), str)

    def to_dict(self) -> TranslationTree:
        """Export a copy of the nested translations."""
        return copy.deepcopy(self._translations)
