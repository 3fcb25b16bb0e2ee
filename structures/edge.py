"""
edge.py — Graph Edge
====================
Undirected, weighted connection between two node ids.

Design decisions:
  - `source` and `target` are node ids, NOT Node references, so edges
    stay serialisable.  On the wire they are called "from" / "to".
  - Weights are positive ints; the graph rejects anything else.
"""

from typing import Any, Dict


class Edge:
    __slots__ = ("source", "target", "weight")

    def __init__(self, source: int, target: int, weight: int = 1):
        self.source: int = source
        self.target: int = target
        self.weight: int = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, node_a: int, node_b: int) -> bool:
        """True if this edge links node_a ↔ node_b in either direction."""
        return {self.source, self.target} == {node_a, node_b}

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        return cls(
            source=data["from"],
            target=data["to"],
            weight=data.get("weight", 1),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.connects(other.source, other.target)
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash((frozenset((self.source, self.target)), self.weight))
