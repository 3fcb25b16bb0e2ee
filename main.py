"""
main.py — Algorithm Visualizer Flask API
=========================================
JSON API in front of the trace engine.  The client owns playback: every
run returns the complete trace in one response and the browser animates
it at its own pace.

Routes:
  GET  /api/algorithms         – registry, grouped by family
  POST /api/arrays/generate    – random array
  POST /api/arrays/parse       – "5, 3, 8" → [5, 3, 8]
  POST /api/sort               – run a sorting algorithm
  POST /api/search             – run a searching algorithm
  POST /api/graph/generate     – random circular-layout graph
  POST /api/graph/run          – run a graph traversal
  POST /api/grid/generate      – random maze
  POST /api/path/run           – run a grid pathfinder
  POST /api/compare            – two algorithms, same dataset, side by side

State management:
  None.  Every request carries its own dataset, and the engine keeps
  nothing between calls.

Errors:
  InvalidInput          → 400  {"error", "field"}
  UnsupportedAlgorithm  → 501  {"error", "algorithm", "notice": "Coming soon"}
"""

from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

import config
from algorithms import Family, list_algorithms
from structures import Graph, Grid, generate_random_array, parse_custom_array
from engine import Recorder, compare, parse_family
from utils.errors import InvalidInput, UnsupportedAlgorithm
from utils.logger import get_logger, init_logger

logger = get_logger(__name__)

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object", field="body")
    return data


def _optional_body() -> Dict[str, Any]:
    if request.get_json(silent=True) is None:
        return {}
    return _body()


def _int_field(data: Dict[str, Any], name: str, default: Optional[int] = None) -> int:
    """Read an int; numeric strings are accepted the way a text box sends them."""
    value = data.get(name, default)
    if isinstance(value, bool):
        raise InvalidInput(f"'{name}' must be an integer", field=name)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidInput(f"'{name}' must be an integer, got {value!r}", field=name)


def _seed_field(data: Dict[str, Any]) -> Optional[int]:
    if data.get("seed") is None:
        return None
    return _int_field(data, "seed")


def _check_range(value: int, bounds: Tuple[int, int], name: str) -> int:
    low, high = bounds
    if not low <= value <= high:
        raise InvalidInput(f"'{name}' must be between {low} and {high}", field=name)
    return value


def _array_field(data: Dict[str, Any]) -> list:
    values = data.get("array")
    if not isinstance(values, list):
        raise InvalidInput("'array' must be a list of integers", field="array")
    if len(values) > config.MAX_ARRAY_SIZE:
        raise InvalidInput(f"'array' is limited to {config.MAX_ARRAY_SIZE} values", field="array")
    return values


def _cell_field(data: Dict[str, Any], name: str, default: Tuple[int, int]) -> Tuple[int, int]:
    raw = data.get(name, list(default))
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise InvalidInput(f"'{name}' must be [row, col]", field=name)
    return (_int_field({name: raw[0]}, name), _int_field({name: raw[1]}, name))


def _grid_field(data: Dict[str, Any]) -> Grid:
    raw = data.get("grid")
    if not isinstance(raw, dict):
        raise InvalidInput("'grid' must be an object", field="grid")
    grid = Grid.from_dict(raw)
    if grid.rows * grid.cols > config.GRID_MAX_CELLS:
        raise InvalidInput(f"Grid is limited to {config.GRID_MAX_CELLS} cells", field="grid")
    return grid


def _run_params(family: Family, data: Dict[str, Any]) -> Dict[str, Any]:
    """Keyword arguments for Recorder.run, pulled from a request body."""
    if family is Family.SORT:
        return {"values": _array_field(data)}
    if family is Family.SEARCH:
        target = _check_range(_int_field(data, "target"), config.SEARCH_TARGET_RANGE, "target")
        return {"values": _array_field(data), "target": target}
    if family is Family.GRAPH:
        raw = data.get("graph")
        if not isinstance(raw, dict):
            raise InvalidInput("'graph' must be an object", field="graph")
        graph = Graph.from_dict(raw)
        if graph.node_count() > config.GRAPH_MAX_NODES:
            raise InvalidInput(f"Graph is limited to {config.GRAPH_MAX_NODES} nodes", field="graph")
        return {"graph": graph, "start": _int_field(data, "start", 0)}
    return {
        "grid":  _grid_field(data),
        "start": _cell_field(data, "start", config.DEFAULT_START),
        "end":   _cell_field(data, "end", config.DEFAULT_END),
    }


def _run(family: Family, data: Dict[str, Any]):
    rec = Recorder()
    metrics = rec.run(family, data.get("algorithm", ""), **_run_params(family, data))
    payload = rec.export()
    payload["notice"] = metrics.notice
    return jsonify(payload)


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(InvalidInput)
def handle_invalid_input(exc: InvalidInput):
    return jsonify({"error": str(exc), "field": exc.field}), 400


@app.errorhandler(UnsupportedAlgorithm)
def handle_unsupported(exc: UnsupportedAlgorithm):
    return jsonify({
        "error":     str(exc),
        "algorithm": exc.key,
        "family":    exc.family,
        "notice":    "Coming soon",
    }), 501


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({
        family.value: [info.to_dict() for info in list_algorithms(family)]
        for family in Family
    })


# ---------------------------------------------------------------------------
# API: Arrays
# ---------------------------------------------------------------------------
@app.route("/api/arrays/generate", methods=["POST"])
def api_arrays_generate():
    data = _optional_body()
    low, high = config.SORT_VALUE_RANGE
    size = _check_range(_int_field(data, "size", config.SORT_ARRAY_SIZE), (0, config.MAX_ARRAY_SIZE), "size")
    low  = _int_field(data, "low", low)
    high = _int_field(data, "high", high)
    seed = _seed_field(data)
    return jsonify({"array": generate_random_array(size, low, high, seed=seed)})


@app.route("/api/arrays/parse", methods=["POST"])
def api_arrays_parse():
    data = _body()
    text = data.get("text", "")
    if not isinstance(text, str):
        raise InvalidInput("'text' must be a string", field="text")
    values = parse_custom_array(text, *config.CUSTOM_VALUE_RANGE)
    if len(values) > config.MAX_ARRAY_SIZE:
        raise InvalidInput(f"'text' is limited to {config.MAX_ARRAY_SIZE} values", field="text")
    return jsonify({"array": values, "notice": f"Array created with {len(values)} elements"})


# ---------------------------------------------------------------------------
# API: Sorting / Searching
# ---------------------------------------------------------------------------
@app.route("/api/sort", methods=["POST"])
def api_sort():
    return _run(Family.SORT, _body())


@app.route("/api/search", methods=["POST"])
def api_search():
    return _run(Family.SEARCH, _body())


# ---------------------------------------------------------------------------
# API: Graphs
# ---------------------------------------------------------------------------
@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data = _optional_body()
    nodes = _check_range(_int_field(data, "nodes", config.GRAPH_NODES), (1, config.GRAPH_MAX_NODES), "nodes")
    g = Graph.generate_random(
        num_nodes=nodes,
        max_connections=config.GRAPH_MAX_CONNECTIONS,
        weight_range=config.EDGE_WEIGHT_RANGE,
        seed=_seed_field(data),
        center=config.GRAPH_CENTER,
        radius=config.GRAPH_RADIUS,
    )
    return jsonify({"graph": g.to_dict()})


@app.route("/api/graph/run", methods=["POST"])
def api_graph_run():
    return _run(Family.GRAPH, _body())


# ---------------------------------------------------------------------------
# API: Pathfinding grids
# ---------------------------------------------------------------------------
@app.route("/api/grid/generate", methods=["POST"])
def api_grid_generate():
    data  = _optional_body()
    rows  = _int_field(data, "rows", config.GRID_ROWS)
    cols  = _int_field(data, "cols", config.GRID_COLS)
    if rows <= 0 or cols <= 0 or rows * cols > config.GRID_MAX_CELLS:
        raise InvalidInput(f"Grid must be between 1 and {config.GRID_MAX_CELLS} cells", field="grid")
    start = _cell_field(data, "start", config.DEFAULT_START)
    end   = _cell_field(data, "end", config.DEFAULT_END)
    prob  = data.get("wall_probability", config.WALL_PROBABILITY)
    if isinstance(prob, bool) or not isinstance(prob, (int, float)) or not 0 <= prob <= 1:
        raise InvalidInput("'wall_probability' must be between 0 and 1", field="wall_probability")
    grid = Grid.generate_maze(rows, cols, start, end, wall_probability=prob, seed=_seed_field(data))
    return jsonify({"grid": grid.to_dict(), "start": list(start), "end": list(end)})


@app.route("/api/path/run", methods=["POST"])
def api_path_run():
    return _run(Family.PATH, _body())


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data   = _body()
    fam    = parse_family(data.get("family", ""))
    params = data.get("params")
    if not isinstance(params, dict):
        raise InvalidInput("'params' must be an object", field="params")

    left, right = Recorder(), Recorder()
    left.run(fam, data.get("left", ""), **_run_params(fam, params))
    right.run(fam, data.get("right", ""), **_run_params(fam, params))
    return jsonify(compare(left, right).to_dict())


if __name__ == "__main__":
    settings = config.Settings.from_env()
    init_logger(settings.log_level)
    logger.info("server_start", host=settings.host, port=settings.port)
    app.run(debug=settings.debug, host=settings.host, port=settings.port)
