"""Action-to-input bindings with clash resolution for games."""

__version__ = "0.17.0"
__all__ = ["bindings", "clashing", "conditions", "core", "input_map", "updated"]