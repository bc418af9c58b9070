"""
Graph serialization.

Graphs are stored as JSON documents:

    {
      "version": 1,
      "name": "main",
      "nodes": [{"id": 0, "kind": "MakeScalar", "label": "MakeScalar",
                 "values": {"value": 2.0}}],
      "connections": [{"from": [0, "out"], "to": [1, "v1"]}],
      "active_node": 1,
      "options": {"3": {"texture_path": "tex.png", "draw_edge": false}}
    }

Node ids are preserved; slot ids are reallocated on load, which is why
connections refer to sockets by (node id, socket name).
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from .errors import PersistenceError, ShaderGraphError
from .ir.graph import Graph, NodeOptions
from .ir.kinds import NodeKind
from .logger import log_warning

FORMAT_VERSION = 1
DEFAULT_ENCODING = "utf-8"


@dataclass
class GraphDocument:
    """A graph together with the editor state saved alongside it."""
    graph: Graph
    active_node: Optional[int] = None
    options: Dict[int, NodeOptions] = field(default_factory=dict)


def _encode_value(value):
    if isinstance(value, tuple):
        return list(value)
    return value


def graph_to_dict(graph: Graph, active_node: Optional[int] = None,
                  options: Optional[Dict[int, NodeOptions]] = None) -> Dict[str, Any]:
    nodes = []
    for node in graph.iter_nodes():
        values = {name: _encode_value(graph.input_value(input_id)) for name, input_id in node.inputs}
        nodes.append({
            "id": node.id,
            "kind": node.kind.value,
            "label": node.label,
            "values": values,
        })

    connections = []
    for input_id, output_id in graph.connections.items():
        inp = graph.input(input_id)
        out = graph.output(output_id)
        connections.append({
            "from": [out.node, out.name],
            "to": [inp.node, inp.name],
        })

    saved_options = {}
    for node_id, opts in (options or {}).items():
        if node_id in graph.nodes:
            saved_options[str(node_id)] = asdict(opts)

    return {
        "version": FORMAT_VERSION,
        "name": graph.name,
        "nodes": nodes,
        "connections": connections,
        "active_node": active_node if active_node in graph.nodes else None,
        "options": saved_options,
    }


def graph_from_dict(data: Dict[str, Any]) -> GraphDocument:
    """Rebuild a graph document. Malformed input raises PersistenceError."""
    if not isinstance(data, dict):
        raise PersistenceError("Graph document must be a JSON object")
    version = data.get("version")
    if version != FORMAT_VERSION:
        raise PersistenceError(f"Unsupported graph format version: {version!r}")

    try:
        graph = Graph(name=data.get("name", "main"))

        for entry in data["nodes"]:
            kind = NodeKind(entry["kind"])
            node = graph.add_node(kind, label=entry.get("label"), node_id=int(entry["id"]))
            for name, value in entry.get("values", {}).items():
                try:
                    input_id = node.get_input(name)
                except ShaderGraphError:
                    log_warning(f"Ignoring unknown input '{name}' on {node.label} ({node.id})")
                    continue
                graph.set_value(input_id, value)

        for entry in data.get("connections", []):
            src_node, src_name = entry["from"]
            dst_node, dst_name = entry["to"]
            graph.connect(graph.find_output(int(src_node), src_name),
                          graph.find_input(int(dst_node), dst_name))

        options = {}
        for key, opts in data.get("options", {}).items():
            node_id = int(key)
            graph.node(node_id)
            options[node_id] = NodeOptions(
                texture_path=str(opts.get("texture_path", "")),
                draw_edge=bool(opts.get("draw_edge", False)),
            )

        active_node = data.get("active_node")
        if active_node is not None:
            active_node = int(active_node)
            graph.node(active_node)

    except PersistenceError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError, ShaderGraphError) as e:
        raise PersistenceError(f"Malformed graph document: {e}") from e

    return GraphDocument(graph, active_node, options)


def dumps(graph: Graph, active_node: Optional[int] = None,
          options: Optional[Dict[int, NodeOptions]] = None) -> str:
    return json.dumps(graph_to_dict(graph, active_node, options), indent=2)


def loads(text: str) -> GraphDocument:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PersistenceError(f"Invalid JSON: {e}") from e
    return graph_from_dict(data)


def save_graph(path: str, graph: Graph, active_node: Optional[int] = None,
               options: Optional[Dict[int, NodeOptions]] = None):
    with open(path, "w", encoding=DEFAULT_ENCODING) as f:
        f.write(dumps(graph, active_node, options))


def load_graph(path: str) -> GraphDocument:
    try:
        with open(path, "r", encoding=DEFAULT_ENCODING) as f:
            text = f.read()
    except OSError as e:
        raise PersistenceError(f"Cannot read graph file: {e}", path=path) from e
    try:
        return loads(text)
    except PersistenceError as e:
        e.path = path
        raise


def save_effect(path: str, text: str, encoding: str = DEFAULT_ENCODING):
    """Write assembled effect source. The target encoding is the host's choice."""
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)
