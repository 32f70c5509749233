"""Exceptions raised by the network model."""

__all__ = ['VertexNotFoundError']


class VertexNotFoundError(KeyError):
    """A vertex looked up by name or handle is not part of the graph."""

    def __init__(self, key) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"vertex not found: {self.key!r}"
