"""Small value types shared across the engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """2D integer position.

    Positions are display-only state; nothing in the match rules reads them.
    Stored in (x, y) order to match how movement offsets are written.
    """
    x: int
    y: int

    def __add__(self, other: "Vector2") -> "Vector2":
        """Vector addition."""
        return Vector2(self.x + other.x, self.y + other.y)

    def __iter__(self):
        """Make Vector2 iterable for unpacking (x, y order)."""
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @classmethod
    def from_tuple(cls, coords: tuple[int, int]) -> "Vector2":
        """Create Vector2 from coordinate tuple (x, y order)."""
        return cls(coords[0], coords[1])

    def to_tuple(self) -> tuple[int, int]:
        """Convert to coordinate tuple (x, y order)."""
        return (self.x, self.y)


ORIGIN = Vector2(0, 0)
