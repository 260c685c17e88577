"""
Contract of the map canvas sub-widget.

The canvas (node/edge layout, drag interactions) lives outside this package.
The editor only drives it through the methods below.
"""

from typing import Protocol


class MapCanvas(Protocol):
    def update_edges(self) -> None:
        """Recompute derived visuals (edge lines) from the current style properties."""

    def set_map_image(self, path: str) -> None:
        """Show ``path`` as the map background."""

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def reset(self) -> None:
        """Drop the background image and return to the initial state."""

    def resize(self) -> None: ...
