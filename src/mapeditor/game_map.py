"""
GameMapEditor: editor-side controller of the map-authoring widget.

Lifecycle:
- Constructed by the host form with the widget's field schema and params
- Builds its translation dictionary, live style sink and globals entry
- Waits for the parent's ready signal, then binds visuals once and hooks
  the background image field
- Torn down by remove(); observers stay registered on the (discarded) form
"""

import copy
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol

from i18ntree import Dictionary
from mapeditor.config import EditorConfig, get_editor_config
from mapeditor.field_tree import FieldNode, UnknownFieldPathError, find_field
from mapeditor.globals import set_global
from mapeditor.live_style import LiveStyleSink
from mapeditor.map_canvas import MapCanvas
from mapeditor.visual_binding import VisualBindingWalker

logger = logging.getLogger(__name__)

UNKNOWN_FIELD_PATH_KEY = 'core.unknownFieldPath'


class HostForm(Protocol):
    """The parts of the host form the editor talks to."""
    root_field: Optional[FieldNode]

    def ready(self, callback: Callable[[], None]) -> None: ...

    def resolve_path(self, path: str) -> str:
        """Turn a stored file path into a loadable URL/path."""


class GameMapEditor:
    """
    Map editor widget glue.

    Args:
        parent: Host form owning this widget
        field: Semantics of this widget's field
        params: Parameters entered in the form (copied, never mutated)
        set_value: Host callback storing ``(field, params)``
        canvas: Map canvas sub-widget
        language: Host language table keyed by library name
        config: Editor configuration (defaults to get_editor_config())
    """

    def __init__(
        self,
        parent: HostForm,
        field: Mapping[str, Any],
        params: Optional[Mapping[str, Any]],
        set_value: Callable[[Mapping[str, Any], Dict[str, Any]], None],
        canvas: MapCanvas,
        language: Optional[Mapping[str, Any]] = None,
        config: Optional[EditorConfig] = None,
    ):
        self.parent = parent
        self.field = field
        self.config = config or get_editor_config()
        self.params: Dict[str, Any] = {self.config.stages_field_name: []}
        self.params.update(copy.deepcopy(dict(params or {})))
        self.set_value = set_value
        self.canvas = canvas

        self.dictionary = Dictionary.from_library_strings(language, self.config.library_name)

        set_global('mainInstance', self)

        # Forward ready callbacks of children until the parent is ready
        self.pass_readies = True

        self.style_sink = LiveStyleSink(self.config.css_property_prefix)
        self.visual_binder = VisualBindingWalker(
            self.style_sink,
            self.canvas.update_edges,
            bound_choice_names=self.config.bound_choice_names,
            rebind_list_items=self.config.rebind_list_items,
        )

        self.background_image_field: Optional[FieldNode] = None
        self.no_image_visible = False

        self.parent.ready(self.handle_parent_ready)

    def ready(self, ready: Callable[[], None]) -> None:
        """Register a ready callback of a child widget."""
        if not self.pass_readies:
            return

        self.parent.ready(ready)

    def handle_parent_ready(self) -> None:
        """Bind visuals and hook the background image field.

        Raises:
            UnknownFieldPathError: If the background image field is missing
        """
        self.pass_readies = False

        self.initialize_colors()

        path = self.config.background_image_path
        self.background_image_field = find_field(path, self.parent.root_field)

        if self.background_image_field is None:
            message = None
            if self.dictionary.has(UNKNOWN_FIELD_PATH_KEY):
                message = self.dictionary.get(UNKNOWN_FIELD_PATH_KEY, {':path': path})
            raise UnknownFieldPathError(path, message)

        image = self.background_image_field.value or {}
        self.canvas.set_map_image(self.parent.resolve_path(image.get('path', '')))

        self.background_image_field.changes.append(self.handle_background_image_change)

    def handle_background_image_change(self, change: Optional[Mapping[str, Any]]) -> None:
        if change:
            self.canvas.set_map_image(self.parent.resolve_path(change.get('path', '')))
            return

        self.reset()

    def initialize_colors(self) -> None:
        """Bind color and path fields of the whole form to the style sink."""
        root = self.parent.root_field
        logger.debug(f"Binding visuals for {self.config.library_name}")
        self.visual_binder.bind(root, '')

    def update_css_property(self, key: str, value: Any) -> None:
        self.visual_binder.write(key, value)

    def get_css(self) -> str:
        """CSS rule carrying the current custom properties."""
        return self.style_sink.to_css(f'.{self.config.container_class}')

    def set_active(self) -> None:
        """Called by the host when the widget's tab becomes active."""
        if self.background_image_field is not None and self.background_image_field.value:
            self.no_image_visible = False
            self.canvas.show()
        else:
            self.canvas.hide()
            self.no_image_visible = True

    def set_map_values(self, stages: List[Any]) -> None:
        """Store stage parameters edited on the canvas."""
        self.params[self.config.stages_field_name] = stages
        self.set_value(self.field, self.params)

    def validate(self) -> bool:
        return True

    def remove(self) -> None:
        self.style_sink.teardown()

    def reset(self) -> None:
        self.canvas.reset()

    def resize(self) -> None:
        self.canvas.resize()
