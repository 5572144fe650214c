"""file_manager package: interactive line-oriented shell over the local filesystem.

Submodules are imported directly; keep __all__ empty.
"""

__all__: list[str] = []
