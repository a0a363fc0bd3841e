"""
Admin surface: section registry, navigation resolver and access guard.

Submodules are imported directly (``chapel.admin.navigation``,
``chapel.admin.dependencies``); nothing is re-exported here so that the
policy modules can import the registry without pulling in FastAPI.
"""

__all__: list[str] = []
