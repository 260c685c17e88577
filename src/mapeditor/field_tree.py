"""
Field-controller node model.

Host forms expose a tree of field controllers. The editor only cares about a
closed set of node kinds, so nodes carry an explicit FieldKind tag instead of
relying on host class identity.

Ownership:
- CONTAINER nodes own their named children (fixed at construction)
- LIST nodes own their item sequence, replaced wholesale on every
  structural edit (add/remove/move)
- OTHER nodes may carry children, but they are opaque to the editor
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[Any], None]
ItemsCallback = Callable[[Tuple['FieldNode', ...]], None]


class FieldKind(Enum):
    """Node kinds the editor distinguishes."""
    COLOR = "color"
    CHOICE = "choice"
    CONTAINER = "container"
    LIST = "list"
    OTHER = "other"


class UnknownFieldPathError(LookupError):
    """A required field path does not exist in the host form."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Unknown field path: {path}")


@dataclass(eq=False)
class FieldNode:
    """One controller in the authoring form's field hierarchy.

    Nodes compare and hash by identity; two color fields holding the same
    value are still two different fields.
    """
    kind: FieldKind
    name: str
    value: Any = None
    children: Tuple['FieldNode', ...] = ()
    items: Tuple['FieldNode', ...] = ()
    options: Tuple[Tuple[Any, str], ...] = ()
    changes: List[ChangeCallback] = field(default_factory=list, repr=False)
    item_changes: List[ItemsCallback] = field(default_factory=list, repr=False)
    parent: Optional['FieldNode'] = field(default=None, repr=False)

    def __post_init__(self):
        self.children = tuple(self.children)
        self.items = tuple(self.items)
        # Host kinds outside FieldKind are opaque and may nest like OTHER
        if self.children and self.kind in (FieldKind.COLOR, FieldKind.CHOICE, FieldKind.LIST):
            raise TypeError(f"{self.kind_label} field '{self.name}' cannot have children")
        if self.items and self.kind is not FieldKind.LIST:
            raise TypeError(f"{self.kind_label} field '{self.name}' cannot have list items")
        for child in self.children + self.items:
            child.parent = self

    @property
    def kind_label(self) -> str:
        return self.kind.name if isinstance(self.kind, FieldKind) else str(self.kind)

    # === Values ===

    def set_value(self, value: Any) -> None:
        """Set the value and notify change observers with it."""
        self.value = value
        self._notify_changes(value)

    def clear(self) -> None:
        """Clear the value; observers receive ``None`` as the cleared payload."""
        self.value = None
        self._notify_changes(None)

    def _notify_changes(self, payload: Any) -> None:
        """Fire change callbacks (best-effort)."""
        # Snapshot: a callback may append further observers
        for callback in list(self.changes):
            try:
                callback(payload)
            except Exception as e:
                logger.warning(f"Error in change callback of field '{self.name}': {e}")

    # === List structure ===

    def add_item(self, item: 'FieldNode', index: Optional[int] = None) -> None:
        self._require_list()
        items = list(self.items)
        items.insert(len(items) if index is None else index, item)
        item.parent = self
        self._replace_items(items)

    def remove_item(self, item: 'FieldNode') -> None:
        self._require_list()
        items = [existing for existing in self.items if existing is not item]
        if len(items) == len(self.items):
            raise ValueError(f"Item is not part of list field '{self.name}'")
        item.parent = None
        self._replace_items(items)

    def move_item(self, old_index: int, new_index: int) -> None:
        self._require_list()
        items = list(self.items)
        items.insert(new_index, items.pop(old_index))
        self._replace_items(items)

    def for_each_item(self, callback: Callable[['FieldNode'], None]) -> None:
        for item in self.items:
            callback(item)

    def _require_list(self) -> None:
        if self.kind is not FieldKind.LIST:
            raise TypeError(f"{self.kind_label} field '{self.name}' has no list items")

    def _replace_items(self, items: Sequence['FieldNode']) -> None:
        self.items = tuple(items)
        logger.debug(f"List field '{self.name}' now holds {len(self.items)} item(s)")
        for callback in list(self.item_changes):
            try:
                callback(self.items)
            except Exception as e:
                logger.warning(f"Error in item callback of list field '{self.name}': {e}")

    # === Navigation ===

    def get_child(self, name: str) -> Optional['FieldNode']:
        """Get a named child of a container (None if missing)."""
        for child in self.children:
            if child.name == name:
                return child
        return None


# === Factories ===

def color_field(name: str, value: Optional[str] = None) -> FieldNode:
    return FieldNode(FieldKind.COLOR, name, value)


def choice_field(name: str, value: Any = None, options: Iterable[Tuple[Any, str]] = ()) -> FieldNode:
    """Create a choice field.

    Args:
        name: Schema name (``pathStyle``, ``pathWidth``, ...)
        value: Value associated with the selected option
        options: ``(value, label)`` pairs offered by the field
    """
    return FieldNode(FieldKind.CHOICE, name, value, options=tuple(options))


def container_field(name: str, children: Iterable[FieldNode]) -> FieldNode:
    return FieldNode(FieldKind.CONTAINER, name, children=tuple(children))


def list_field(name: str, items: Iterable[FieldNode] = ()) -> FieldNode:
    """Create a list field. Items share one schema, hence one name."""
    return FieldNode(FieldKind.LIST, name, items=tuple(items))


def other_field(name: str, value: Any = None, children: Iterable[FieldNode] = ()) -> FieldNode:
    return FieldNode(FieldKind.OTHER, name, value, children=tuple(children))


# === Lookup ===

def get_root_field(node: FieldNode) -> FieldNode:
    """Follow parent links up to the form's root field."""
    while node.parent is not None:
        node = node.parent
    return node


def find_field(path: str, root: Optional[FieldNode]) -> Optional[FieldNode]:
    """Find a field by ``/``-separated schema names below ``root``.

    Container children are matched by name. A list segment continues into the
    list's first item, since all items share the list's schema.

    Returns:
        The field, or None when any segment is missing
    """
    current = root
    for segment in (part for part in path.split('/') if part):
        if current is None:
            return None
        if current.kind is FieldKind.LIST:
            current = current.items[0] if current.items else None
            if current is None or current.name != segment:
                return None
            continue
        current = current.get_child(segment)
    return current
