"""
node.py — Graph Node
====================
A node is an integer id plus a 2-D display position.  The position is
presentation metadata: no algorithm reads it.
"""

from typing import Any, Dict

from utils.errors import InvalidInput


def as_int(value: Any, field: str) -> int:
    """Integer from a JSON value; integral floats and numeric strings pass, anything else is rejected."""
    if isinstance(value, bool):
        raise InvalidInput(f"Expected an integer, got {value!r}", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidInput(f"Expected an integer, got {value!r}", field=field)


class Node:
    """
    Attributes:
        id   : Integer id, 0..N-1 within its graph.
        x, y : Canvas coordinates (pixels, caller decides the frame).
    """

    __slots__ = ("id", "x", "y")

    def __init__(self, node_id: int, x: float = 0.0, y: float = 0.0):
        self.id: int  = node_id
        self.x: float = x
        self.y: float = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        return cls(node_id=as_int(data["id"], "nodes"), x=float(data.get("x", 0.0)), y=float(data.get("y", 0.0)))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
