from .fixtures import (
    async_highlighter,
    highlighter,
    pygmentize,
    settings,
)

__all__ = [
    "async_highlighter",
    "highlighter",
    "pygmentize",
    "settings",
]
