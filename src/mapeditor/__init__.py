"""
Editor-side controller for a visual map-authoring widget.

The widget sits inside a content-authoring form. It translates its library
strings into a nested dictionary and keeps a set of CSS custom properties in
sync with the form's color and path style fields.

Quick Start:
    >>> from mapeditor import LiveStyleSink, bind_visuals, color_field, container_field
    >>> form = container_field('root', [
    ...     container_field('background', [color_field('color', '#ff0000')]),
    ... ])
    >>> sink = LiveStyleSink()
    >>> walker = bind_visuals(form, sink, recompute=lambda: None)
    >>> sink['-background-color']
    '#ff0000'

Modules:
    - field_tree: Tagged field-controller nodes and path lookup
    - live_style: Widget-scoped CSS custom property sink
    - visual_binding: One-shot walker binding fields to the sink
    - map_canvas: Contract of the map canvas sub-widget
    - game_map: Widget glue (ready handling, background image, tabs)
    - config: Editor configuration
    - globals: Thread-local instance globals
"""

from mapeditor.config import (
    EditorConfig,
    get_editor_config,
    set_editor_config,
    reset_editor_config,
)
from mapeditor.field_tree import (
    FieldKind,
    FieldNode,
    UnknownFieldPathError,
    choice_field,
    color_field,
    container_field,
    list_field,
    other_field,
    find_field,
    get_root_field,
)
from mapeditor.live_style import LiveStyleSink
from mapeditor.visual_binding import (
    VisualBindingWalker,
    bind_visuals,
    derive_sink_key,
)
from mapeditor.map_canvas import MapCanvas
from mapeditor.game_map import GameMapEditor, HostForm
from mapeditor.globals import set_global, get_global, clear_globals

__all__ = [
    # Config
    'EditorConfig',
    'get_editor_config',
    'set_editor_config',
    'reset_editor_config',
    # Field tree
    'FieldKind',
    'FieldNode',
    'UnknownFieldPathError',
    'choice_field',
    'color_field',
    'container_field',
    'list_field',
    'other_field',
    'find_field',
    'get_root_field',
    # Visuals
    'LiveStyleSink',
    'VisualBindingWalker',
    'bind_visuals',
    'derive_sink_key',
    # Widget
    'MapCanvas',
    'GameMapEditor',
    'HostForm',
    # Globals
    'set_global',
    'get_global',
    'clear_globals',
]
