"""
Live style sink: CSS custom properties of one editor instance.

Keys are sink keys (field path with ``/`` replaced by ``-``). The CSS property
name is the configured prefix followed by the key, so the sink key
``-backgroundColor`` becomes ``--editor-fields-backgroundColor``.
"""

import logging
from typing import Dict, ItemsView, Iterator, Optional

logger = logging.getLogger(__name__)


class LiveStyleSink:
    """Mutable key -> value store applied to the editor's DOM scope."""

    def __init__(self, prefix: str = "--editor-fields"):
        self.prefix = prefix
        self._properties: Dict[str, str] = {}
        self._torn_down = False

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def set_property(self, key: str, value: Optional[str]) -> None:
        """Write one custom property. ``None`` removes it."""
        if self._torn_down:
            logger.debug(f"Ignoring write to torn down style sink: {key!r}")
            return
        if value is None:
            self._properties.pop(key, None)
        else:
            self._properties[key] = str(value)

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(key, default)

    def css_properties(self) -> Dict[str, str]:
        """Full CSS custom property names mapped to their values."""
        return {f'{self.prefix}{key}': value for key, value in self._properties.items()}

    def to_css(self, selector: str) -> str:
        """Render the properties as a single CSS rule for ``selector``."""
        declarations = ''.join(f'{name}:{value};' for name, value in self.css_properties().items())
        return f'{selector}{{{declarations}}}'

    def teardown(self) -> None:
        """Drop all properties; the sink ignores writes afterwards."""
        self._properties.clear()
        self._torn_down = True

    def items(self) -> ItemsView[str, str]:
        return self._properties.items()

    def __getitem__(self, key: str) -> str:
        return self._properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)
