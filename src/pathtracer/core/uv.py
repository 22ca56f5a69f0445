# core/uv.py
class UV:
    """
    A 2D surface (texture) coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float = 0.0, v: float = 0.0):
        self.u = u
        self.v = v

    def clamped(self) -> "UV":
        """Returns a copy with both coordinates clamped into [0, 1]."""
        return UV(min(max(self.u, 0.0), 1.0), min(max(self.v, 0.0), 1.0))

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __hash__(self) -> int:
        return hash((self.u, self.v))

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
