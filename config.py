"""
config.py — Dataset Bounds & Server Settings
=============================================
Defaults the presentation layer uses when it builds datasets, and the
bounds it enforces before handing input to the engine.  Server settings
come from the environment (a local .env file is honoured).
"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Sorting / searching arrays
# ---------------------------------------------------------------------------
SORT_ARRAY_SIZE:      int             = 50
SORT_VALUE_RANGE:     Tuple[int, int] = (5, 500)
CUSTOM_VALUE_RANGE:   Tuple[int, int] = (1, 500)
SEARCH_ARRAY_SIZE:    int             = 30
SEARCH_VALUE_RANGE:   Tuple[int, int] = (1, 100)
SEARCH_TARGET_RANGE:  Tuple[int, int] = (1, 100)
MAX_ARRAY_SIZE:       int             = 300

# ---------------------------------------------------------------------------
# Graphs
# ---------------------------------------------------------------------------
GRAPH_NODES:           int                  = 8
GRAPH_MAX_NODES:       int                  = 30
GRAPH_MAX_CONNECTIONS: int                  = 2
EDGE_WEIGHT_RANGE:     Tuple[int, int]      = (1, 15)
GRAPH_CENTER:          Tuple[float, float]  = (400.0, 250.0)
GRAPH_RADIUS:          float                = 180.0

# ---------------------------------------------------------------------------
# Pathfinding grids
# ---------------------------------------------------------------------------
GRID_ROWS:        int             = 20
GRID_COLS:        int             = 35
GRID_MAX_CELLS:   int             = 2500
DEFAULT_START:    Tuple[int, int] = (5, 5)
DEFAULT_END:      Tuple[int, int] = (15, 30)
WALL_PROBABILITY: float           = 0.25


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@dataclass
class Settings:
    log_level: str  = "INFO"
    host:      str  = "127.0.0.1"
    port:      int  = 5000
    debug:     bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            host=os.getenv("VISUALIZER_HOST", "127.0.0.1"),
            port=int(os.getenv("VISUALIZER_PORT", "5000")),
            debug=os.getenv("VISUALIZER_DEBUG", "false").lower() in ("1", "true", "yes"),
        )
