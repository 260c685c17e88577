"""
Editor configuration.

Holds the host-facing names the editor relies on. Configuration is immutable;
swap it with set_editor_config() (tests do this through a fixture).
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class EditorConfig:
    """Names and toggles used by GameMapEditor and the binding walker."""
    library_name: str = "H5PEditor.GameMap"
    css_property_prefix: str = "--editor-fields"
    container_class: str = "h5peditor-game-map"
    background_image_path: str = "backgroundImageSettings/backgroundImage"
    stages_field_name: str = "stages"
    bound_choice_names: Tuple[str, ...] = ("pathStyle", "pathWidth")
    # Off: list items added after the initial walk stay unbound
    rebind_list_items: bool = False


_editor_config: Optional[EditorConfig] = None


def set_editor_config(config: EditorConfig) -> None:
    """Set the process-wide default editor configuration."""
    global _editor_config
    _editor_config = config


def get_editor_config() -> EditorConfig:
    """Get the current default configuration, creating it on first use."""
    global _editor_config
    if _editor_config is None:
        _editor_config = EditorConfig()
    return _editor_config


def reset_editor_config() -> None:
    global _editor_config
    _editor_config = None
