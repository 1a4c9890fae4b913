"""Exceptions raised across subsystem boundaries."""


class BlockNotFoundError(LookupError):
    """Raised when rendering a block name nobody registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Block not registered: {name}")
        self.name = name


class BlockRenderError(Exception):
    """Raised when a block's markup cannot be produced."""
