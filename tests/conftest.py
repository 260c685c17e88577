"""Pytest configuration and shared fixtures."""
import pytest
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from mapeditor import LiveStyleSink, clear_globals, reset_editor_config
from mapeditor.field_tree import FieldNode


class RecomputeCounter:
    """Recompute hook that counts its calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@dataclass
class FakeCanvas:
    """Records every call the editor makes on the map canvas."""
    calls: List[tuple] = field(default_factory=list)

    def update_edges(self):
        self.calls.append(('update_edges',))

    def set_map_image(self, path):
        self.calls.append(('set_map_image', path))

    def show(self):
        self.calls.append(('show',))

    def hide(self):
        self.calls.append(('hide',))

    def reset(self):
        self.calls.append(('reset',))

    def resize(self):
        self.calls.append(('resize',))

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)


@dataclass
class FakeHostForm:
    """Host form collecting ready callbacks until fire_ready() is called."""
    root_field: Optional[FieldNode] = None
    ready_callbacks: List[Callable[[], None]] = field(default_factory=list)

    def ready(self, callback):
        self.ready_callbacks.append(callback)

    def fire_ready(self):
        for callback in list(self.ready_callbacks):
            callback()

    def resolve_path(self, path):
        return f'content/{path}' if path else ''


@pytest.fixture(autouse=True)
def reset_module_state():
    """Reset editor configuration and instance globals around each test."""
    reset_editor_config()
    clear_globals()

    yield

    reset_editor_config()
    clear_globals()


@pytest.fixture
def sink():
    return LiveStyleSink()


@pytest.fixture
def recompute():
    return RecomputeCounter()


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def make_host():
    """Factory for fake host forms."""
    return FakeHostForm
