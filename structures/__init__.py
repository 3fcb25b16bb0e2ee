"""
structures/
-----------
Input data layer.  Public API:

    from structures import Graph, Node, Edge, Grid
    from structures import generate_random_array, parse_custom_array
"""

from structures.node   import Node
from structures.edge   import Edge
from structures.graph  import Graph
from structures.grid   import Grid, Cell, DIRECTIONS
from structures.arrays import generate_random_array, parse_custom_array

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "Grid",
    "Cell",
    "DIRECTIONS",
    "generate_random_array",
    "parse_custom_array",
]
