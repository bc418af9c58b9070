from typing import Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass

from ..categories import DATA_TYPE_NAMES
from ..errors import GraphError, InvalidConnectionError, NodeNotFoundError
from .kinds import NodeKind
from .types import DataType


class InputParam:
    """
    An input slot on a node.

    ``value`` is the editable literal. It is kept while the slot is
    connected so that disconnecting falls back to the last edited value.
    """
    def __init__(self, id: int, node: int, name: str, type: DataType, value):
        self.id = id
        self.node = node
        self.name = name
        self.type = type
        self.value = value

    def __repr__(self):
        return f"<In {self.name}#{self.id} of {self.node}>"


class OutputParam:
    def __init__(self, id: int, node: int, name: str, type: DataType):
        self.id = id
        self.node = node
        self.name = name
        self.type = type

    def __repr__(self):
        return f"<Out {self.name}#{self.id} of {self.node}>"


class Node:
    """
    A node instance. Inputs and outputs are (name, slot_id) pairs in
    registry order, which is the positional order of the emitted call.
    """
    def __init__(self, id: int, kind: NodeKind, label: str):
        self.id = id
        self.kind = kind
        self.label = label
        self.inputs: List[Tuple[str, int]] = []
        self.outputs: List[Tuple[str, int]] = []

    def input_ids(self) -> List[int]:
        return [i for _, i in self.inputs]

    def output_ids(self) -> List[int]:
        return [o for _, o in self.outputs]

    def get_input(self, name: str) -> int:
        for n, i in self.inputs:
            if n == name:
                return i
        raise NodeNotFoundError(f"Node {self.label} ({self.id}) has no input '{name}'", node_id=self.id)

    def get_output(self, name: str) -> int:
        for n, o in self.outputs:
            if n == name:
                return o
        raise NodeNotFoundError(f"Node {self.label} ({self.id}) has no output '{name}'", node_id=self.id)

    def __repr__(self):
        return f"Node({self.id}, {self.kind.name})"


@dataclass
class NodeOptions:
    """
    Auxiliary per-node data kept outside the Graph.

    texture_path: image file bound by a CustomTexture2D node
    draw_edge: enables the edge pass when set on the Main node
    """
    texture_path: str = ""
    draw_edge: bool = False


class Graph:
    """
    Nodes, their slots, and the connections between them.

    ``connections`` maps an input slot to the output slot feeding it, so an
    input has at most one producer while an output may feed many inputs.
    Acyclicity is not enforced here; the orderer detects cycles.
    """
    def __init__(self, name: str = "main"):
        self.name = name
        self.nodes: Dict[int, Node] = {}
        self.inputs: Dict[int, InputParam] = {}
        self.outputs: Dict[int, OutputParam] = {}
        self.connections: Dict[int, int] = {}
        self._next_id = 0

    def _new_id(self) -> int:
        i = self._next_id
        self._next_id += 1
        return i

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, kind: NodeKind, label: Optional[str] = None, node_id: Optional[int] = None) -> Node:
        """
        Instantiate a node from its registry template.

        Every input slot starts with its socket's default value. ``node_id``
        is only passed when restoring a saved graph.
        """
        from ..nodes import lookup
        info = lookup(kind)

        if node_id is None:
            node_id = self._new_id()
        elif node_id in self.nodes:
            raise GraphError(f"Node id {node_id} already exists")
        else:
            self._next_id = max(self._next_id, node_id + 1)

        node = Node(node_id, kind, label or info.label)
        self.nodes[node_id] = node

        for spec in info.inputs:
            param = InputParam(self._new_id(), node_id, spec.name, spec.type, spec.default_value())
            self.inputs[param.id] = param
            node.inputs.append((spec.name, param.id))

        for spec in info.outputs:
            param = OutputParam(self._new_id(), node_id, spec.name, spec.type)
            self.outputs[param.id] = param
            node.outputs.append((spec.name, param.id))

        return node

    def remove_node(self, node_id: int) -> List[int]:
        """Remove a node with its slots. Returns the input ids that lost their producer."""
        node = self.node(node_id)
        own_outputs = set(node.output_ids())
        orphaned = []

        for input_id, output_id in list(self.connections.items()):
            if output_id in own_outputs:
                del self.connections[input_id]
                if self.inputs[input_id].node != node_id:
                    orphaned.append(input_id)

        for input_id in node.input_ids():
            self.connections.pop(input_id, None)
            del self.inputs[input_id]
        for output_id in own_outputs:
            del self.outputs[output_id]

        del self.nodes[node_id]
        return orphaned

    def node(self, node_id: int) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(f"No node with id {node_id}", node_id=node_id)

    def input(self, input_id: int) -> InputParam:
        try:
            return self.inputs[input_id]
        except KeyError:
            raise NodeNotFoundError(f"No input slot with id {input_id}")

    def output(self, output_id: int) -> OutputParam:
        try:
            return self.outputs[output_id]
        except KeyError:
            raise NodeNotFoundError(f"No output slot with id {output_id}")

    def iter_nodes(self) -> Iterator[Node]:
        return iter(list(self.nodes.values()))

    def find_input(self, node_id: int, name: str) -> int:
        return self.node(node_id).get_input(name)

    def find_output(self, node_id: int, name: str) -> int:
        return self.node(node_id).get_output(name)

    def node_of_output(self, output_id: int) -> int:
        return self.output(output_id).node

    def output_index(self, output_id: int) -> int:
        """Position of an output slot on its node, found by identity."""
        node = self.node(self.node_of_output(output_id))
        for k, (_, oid) in enumerate(node.outputs):
            if oid == output_id:
                return k
        raise NodeNotFoundError(f"Output {output_id} is not listed on node {node.id}", node_id=node.id)

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------

    def connect(self, output_id: int, input_id: int):
        """
        Connect an output slot to an input slot, replacing any previous
        producer of that input.
        """
        out = self.output(output_id)
        inp = self.input(input_id)
        if out.type != inp.type:
            raise InvalidConnectionError(
                f"Cannot connect {DATA_TYPE_NAMES[out.type]} output to {DATA_TYPE_NAMES[inp.type]} input '{inp.name}'",
                output_id=output_id, input_id=input_id)
        if out.node == inp.node:
            raise InvalidConnectionError(
                f"Cannot connect node {out.node} to itself",
                output_id=output_id, input_id=input_id)
        self.connections[input_id] = output_id

    def disconnect(self, input_id: int) -> Optional[int]:
        """Remove the connection into an input. Returns the former producer."""
        self.input(input_id)
        return self.connections.pop(input_id, None)

    def connection(self, input_id: int) -> Optional[int]:
        return self.connections.get(input_id)

    def consumers(self, output_id: int) -> List[int]:
        """Input ids fed by an output (fan-out)."""
        return [i for i, o in self.connections.items() if o == output_id]

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def set_value(self, input_id: int, value):
        param = self.input(input_id)
        param.value = param.type.coerce_value(value)

    def input_value(self, input_id: int):
        return self.input(input_id).value

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"<Graph {self.name} | {len(self.nodes)} Nodes | {len(self.connections)} Connections>"
