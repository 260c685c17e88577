"""
Binding of form fields to live visual updates.

VisualBindingWalker walks the form's field tree once, pre-order and depth
first. Color fields and the path style/width choice fields get an observer
that mirrors their value into the live style sink; each bound field is also
written once right away so the sink reflects the form before any edit.

Dispatch by kind:
    COLOR      -> bind
    CHOICE     -> bind if the schema name is one of bound_choice_names
    CONTAINER  -> recurse into children, path + '/' + child name
    LIST       -> recurse into items, path + '/' + item schema name
    OTHER      -> stop (no descent, even if the node has children)

List items share their schema name, so every item of one list writes the
same sink key and the last traversed item wins at bind time.

Every sink write is followed by the recompute hook so derived visuals
(edge lines on the map canvas) follow the new property values.
"""

import logging
import weakref
from typing import Any, Callable, Iterable, Optional

from mapeditor.field_tree import FieldKind, FieldNode
from mapeditor.live_style import LiveStyleSink

logger = logging.getLogger(__name__)

DEFAULT_BOUND_CHOICE_NAMES = ("pathStyle", "pathWidth")


def derive_sink_key(path: str) -> str:
    """Sink key for a field path: every ``/`` becomes ``-``."""
    return path.replace('/', '-')


class VisualBindingWalker:
    """
    Binds field values to a LiveStyleSink.

    Args:
        sink: Style sink receiving the values
        recompute: Zero-argument hook called after every sink write
        bound_choice_names: Choice field names that are bound
        rebind_list_items: If True, items added to a list after the walk are
                           bound as well. Off by default: the walk runs once
                           and later items stay unbound. Each list remembers
                           its own items, so an item moved into another list
                           is bound again under the new path (its observer
                           from the old list keeps writing the old key).
    """

    def __init__(
        self,
        sink: LiveStyleSink,
        recompute: Callable[[], Any],
        bound_choice_names: Iterable[str] = DEFAULT_BOUND_CHOICE_NAMES,
        rebind_list_items: bool = False,
    ):
        self.sink = sink
        self.recompute = recompute
        self.bound_choice_names = frozenset(bound_choice_names)
        self.rebind_list_items = rebind_list_items

    def write(self, key: str, value: Any) -> None:
        """Write one sink entry and let derived visuals recompute."""
        self.sink.set_property(key, value)
        self.recompute()

    def bind(self, field: Optional[FieldNode], path: str = '') -> None:
        """Bind ``field`` and everything reachable below it."""
        if field is None:
            return

        match field.kind:
            case FieldKind.COLOR:
                self._bind_value_field(field, path)
            case FieldKind.CHOICE:
                if field.name in self.bound_choice_names:
                    self._bind_value_field(field, path)
            case FieldKind.CONTAINER:
                for child in field.children:
                    self.bind(child, f'{path}/{child.name}')
            case FieldKind.LIST:
                self._bind_list(field, path)
            case _:
                pass  # Opaque for visuals

    def _bind_value_field(self, field: FieldNode, path: str) -> None:
        key = derive_sink_key(path)

        def on_change(_payload: Any) -> None:
            self.write(key, field.value)

        field.changes.append(on_change)
        logger.debug(f"Bound {field.kind.name} field '{field.name}' to sink key {key!r}")
        self.write(key, field.value)

    def _bind_list(self, field: FieldNode, path: str) -> None:
        # Iterate a snapshot; an observer may restructure the list
        items = field.items
        for item in items:
            self.bind(item, f'{path}/{item.name}')

        if not self.rebind_list_items:
            return

        # Per list: an item moved in from another list is bound again under
        # this list's path. Weak so removed items can go away.
        bound: 'weakref.WeakSet[FieldNode]' = weakref.WeakSet(items)

        def on_items_changed(new_items) -> None:
            for item in tuple(new_items):
                if item in bound:
                    continue
                bound.add(item)
                logger.debug(f"Binding item added to list field '{field.name}'")
                self.bind(item, f'{path}/{item.name}')

        field.item_changes.append(on_items_changed)


def bind_visuals(
    root: Optional[FieldNode],
    sink: LiveStyleSink,
    recompute: Callable[[], Any],
    **options: Any,
) -> VisualBindingWalker:
    """Run one binding walk from ``root`` and return the walker."""
    walker = VisualBindingWalker(sink, recompute, **options)
    walker.bind(root, '')
    return walker
