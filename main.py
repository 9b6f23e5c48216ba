"""
main.py — Graph Algorithm Visualizer Flask App
================================================
JSON service in front of the trace engines.  Rendering happens in the
browser: the client receives a complete trace and replays it itself.

Routes:
  GET  /health                 – liveness probe
  GET  /api/algorithms         – registry cards (label, pseudocode, …)
  GET  /api/samples            – sample application graphs
  POST /api/samples/<key>      – load a sample into the session
  GET  /api/graph              – current session graph
  PUT  /api/graph              – replace the session graph
  POST /api/graph/generate     – random connected graph into the session
  POST /api/run                – run one algorithm → steps + summary
  POST /api/compare            – run two algorithms on the same graph

State management:
  The Flask session holds the current graph (serialised) and the
  IdSequence to continue numbering from.  /api/run and /api/compare
  accept an inline "graph" instead, which leaves the session untouched.

Configuration (environment, prefix ALGOVIZ_):
  ALGOVIZ_SECRET_KEY, ALGOVIZ_MAX_NODES, ALGOVIZ_RANDOM_GRAPH_NODES,
  ALGOVIZ_RANDOM_GRAPH_MIN_WEIGHT, ALGOVIZ_RANDOM_GRAPH_MAX_WEIGHT

The session is a signed cookie, so the whole graph travels with every
request.  Browsers drop cookies over ~4 KB; MAX_NODES defaults to 20 to
stay under that.  Raise it only together with a server-side session store.
"""

import logging
import secrets
from typing import Optional, Tuple

from flask import Flask, jsonify, request, session

from graph import Graph, GraphError, IdSequence, get_sample, list_samples
from algorithms import get_algorithm, list_algorithms
from algorithms.step import trace_to_dicts
from engine import record_run, compare


logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "SECRET_KEY":              secrets.token_hex(32),
    "MAX_NODES":               20,
    "RANDOM_GRAPH_NODES":      8,
    "RANDOM_GRAPH_MIN_WEIGHT": 1,
    "RANDOM_GRAPH_MAX_WEIGHT": 20,
}

app = Flask(__name__)
app.config.from_mapping(DEFAULT_CONFIG)
app.config.from_prefixed_env("ALGOVIZ")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
@app.errorhandler(GraphError)
def handle_graph_error(exc: GraphError):
    logger.warning("Rejected graph: %s", exc)
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(ValueError)
def handle_value_error(exc: ValueError):
    logger.warning("Rejected request: %s", exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Deserialise graph from session, or create a default random one."""
    if "graph" not in session:
        g, ids = Graph.generate_random(
            num_nodes=app.config["RANDOM_GRAPH_NODES"],
            min_weight=app.config["RANDOM_GRAPH_MIN_WEIGHT"],
            max_weight=app.config["RANDOM_GRAPH_MAX_WEIGHT"],
            seed=42,
        )
        save_graph(g, ids)
    return Graph.from_dict(session["graph"])


def get_ids() -> IdSequence:
    if "ids" in session:
        return IdSequence.from_dict(session["ids"])
    g = get_graph()
    return IdSequence.after(g.nodes, g.edges)


def save_graph(graph: Graph, ids: Optional[IdSequence] = None) -> None:
    session["graph"] = graph.to_dict()
    session["ids"] = (ids or IdSequence.after(graph.nodes, graph.edges)).to_dict()


def check_size(graph: Graph) -> None:
    limit = app.config["MAX_NODES"]
    if graph.node_count() > limit:
        raise GraphError(f"Graph has {graph.node_count()} nodes; the limit is {limit}")


def graph_payload():
    return jsonify({"graph": get_graph().to_dict(), **get_ids().to_dict()})


def request_graph(data: dict) -> Graph:
    """Inline graph from the request body if given, otherwise the session graph."""
    graph = Graph.from_dict(data["graph"]) if "graph" in data else get_graph()
    check_size(graph)
    return graph


def start_node(data: dict) -> Optional[str]:
    """startNode from the request body; anything but a string or null is a ValueError."""
    start = data.get("startNode")
    if start is not None and not isinstance(start, str):
        raise ValueError("startNode must be a node id string")
    return start


def json_body() -> Tuple[Optional[dict], Optional[tuple]]:
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return None, (jsonify({"error": "Request body must be a JSON object"}), 400)
    return data, None


# ---------------------------------------------------------------------------
# Health & catalogue
# ---------------------------------------------------------------------------
@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/samples")
def api_samples():
    return jsonify({"samples": [{"key": k, "description": d} for k, d in list_samples().items()]})


@app.route("/api/samples/<key>", methods=["POST"])
def api_load_sample(key: str):
    sample = get_sample(key)
    if sample is None:
        return jsonify({"error": f"Unknown sample: {key}"}), 404
    save_graph(sample.graph, sample.ids)
    logger.info("Loaded sample graph %s", key)
    return jsonify(sample.to_dict())


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph", methods=["GET"])
def api_graph_get():
    return graph_payload()


@app.route("/api/graph", methods=["PUT"])
def api_graph_put():
    data, error = json_body()
    if error:
        return error
    g = Graph.from_dict(data.get("graph", data))
    check_size(g)
    try:
        ids = IdSequence.from_dict(data) if "nextNodeId" in data else None
    except (TypeError, ValueError):
        return jsonify({"error": "nextNodeId and nextEdgeId must be integers"}), 400
    save_graph(g, ids)
    logger.info("Graph replaced: %d nodes, %d edges", g.node_count(), g.edge_count())
    return graph_payload()


@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data, error = json_body()
    if error:
        return error
    try:
        num_nodes  = int(data.get("nodes", app.config["RANDOM_GRAPH_NODES"]))
        min_weight = int(data.get("minWeight", app.config["RANDOM_GRAPH_MIN_WEIGHT"]))
        max_weight = int(data.get("maxWeight", app.config["RANDOM_GRAPH_MAX_WEIGHT"]))
        seed       = data.get("seed")
        seed       = int(seed) if seed is not None else None
    except (TypeError, ValueError):
        return jsonify({"error": "nodes, minWeight, maxWeight and seed must be integers"}), 400

    if num_nodes > app.config["MAX_NODES"]:
        return jsonify({"error": f"At most {app.config['MAX_NODES']} nodes"}), 400

    g, ids = Graph.generate_random(num_nodes=num_nodes, min_weight=min_weight, max_weight=max_weight, seed=seed)
    save_graph(g, ids)
    logger.info("Generated random graph: %d nodes, %d edges", g.node_count(), g.edge_count())
    return jsonify({
        "graph": g.to_dict(),
        **ids.to_dict(),
        "message": f"Generated random graph with {num_nodes} nodes. All nodes are connected.",
    })


# ---------------------------------------------------------------------------
# API: Run & Compare
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data, error = json_body()
    if error:
        return error
    key = data.get("algorithm")
    if get_algorithm(key) is None:
        return jsonify({"error": f"Unknown algorithm: {key}"}), 400

    graph = request_graph(data)
    trace, summary = record_run(key, graph, start_node(data))
    return jsonify({
        "algorithm": key,
        "steps":     trace_to_dicts(trace),
        "summary":   summary.to_dict(),
    })


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data, error = json_body()
    if error:
        return error
    left_key  = data.get("left", "prim")
    right_key = data.get("right", "kruskal")
    for key in (left_key, right_key):
        if get_algorithm(key) is None:
            return jsonify({"error": f"Unknown algorithm: {key}"}), 400

    graph = request_graph(data)
    start = start_node(data)
    _, left  = record_run(left_key, graph, start)
    _, right = record_run(right_key, graph, start)
    return jsonify(compare(left, right).to_dict())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host="0.0.0.0", port=5000)
