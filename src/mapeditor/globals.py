"""
Thread-local instance globals.

Editor components that are created far from the widget (canvas sub-widgets,
dialogs) look shared objects up here, e.g. the ``mainInstance`` editor.

Values are stored per thread so parallel test runs or embedded hosts do not
see each other's editor instances.
"""

import threading
from typing import Any, Dict, Optional

_instance_globals = threading.local()


def _store() -> Dict[str, Any]:
    store = getattr(_instance_globals, 'values', None)
    if store is None:
        store = {}
        _instance_globals.values = store
    return store


def set_global(key: str, value: Any) -> None:
    """Set an instance global.

    Args:
        key: Global name, e.g. ``'mainInstance'``
        value: Value to store (replaces any previous value)
    """
    _store()[key] = value


def get_global(key: str, default: Optional[Any] = None) -> Optional[Any]:
    """Get an instance global, or ``default`` when unset."""
    return _store().get(key, default)


def clear_globals() -> None:
    """Drop all instance globals of the current thread."""
    _store().clear()
