"""Block registration via pluggy.

- Hookspecs: pluggy hook definitions
- Hookimpl: the built-in block provider
- Manager: registration, lookup and rendering
"""

from pdfblock.plugins.hookspecs import hookimpl, hookspec
from pdfblock.plugins.manager import BlockManager

__all__ = [
    "BlockManager",
    "hookimpl",
    "hookspec",
]
