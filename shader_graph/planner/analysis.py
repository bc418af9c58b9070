from typing import Callable, Iterator, List, Optional, Set, Tuple

from ..errors import GraphCycleError
from ..ir.graph import Graph
from ..nodes import lookup
from ..sockets import InputSocketSpec

SocketFilter = Callable[[InputSocketSpec], bool]


def visible_inputs(graph: Graph, node_id: int, socket_filter: Optional[SocketFilter] = None) -> List[Tuple[InputSocketSpec, int]]:
    """
    (spec, input_id) pairs of a node in registry order, restricted to the
    sockets accepted by ``socket_filter``.
    """
    node = graph.node(node_id)
    info = lookup(node.kind)
    pairs = []
    for spec, (_, input_id) in zip(info.inputs, node.inputs):
        if socket_filter is None or socket_filter(spec):
            pairs.append((spec, input_id))
    return pairs


def _producers(graph: Graph, node_id: int, socket_filter: Optional[SocketFilter]) -> Iterator[int]:
    """Producer node of each connected visible input, in input order."""
    for _, input_id in visible_inputs(graph, node_id, socket_filter):
        output_id = graph.connection(input_id)
        if output_id is not None:
            yield graph.node_of_output(output_id)


def postorder(graph: Graph, root: int, socket_filter: Optional[SocketFilter] = None) -> List[int]:
    """
    Returns node ids reachable from ``root`` in postorder.

    Every dependency is emitted before its consumer and each node appears
    once: a node already emitted is skipped, so a shared upstream node sits
    where the first consumer in input order reached it. Unconnected inputs
    end the walk; nodes not reachable from the root are left out. The root
    is always last.

    Raises GraphCycleError when a node is reached again while it is still
    on the current path.
    """
    graph.node(root)

    order: List[int] = []
    done: Set[int] = set()
    on_path: Set[int] = {root}

    # Explicit stack instead of recursion: long chains must not hit the
    # interpreter's recursion limit.
    stack = [(root, _producers(graph, root, socket_filter))]

    while stack:
        node_id, producers = stack[-1]
        descended = False
        for next_id in producers:
            if next_id in done:
                continue
            if next_id in on_path:
                path = tuple(n for n, _ in stack)
                start = path.index(next_id)
                raise GraphCycleError(
                    f"Cycle detected through node {next_id}",
                    node_id=next_id, path=path[start:])
            on_path.add(next_id)
            stack.append((next_id, _producers(graph, next_id, socket_filter)))
            descended = True
            break

        if not descended:
            stack.pop()
            on_path.discard(node_id)
            done.add(node_id)
            order.append(node_id)

    return order


def reachable(graph: Graph, root: int) -> Set[int]:
    """All nodes the root depends on through any connected input, plus the root."""
    return set(postorder(graph, root))


def find_cycle(graph: Graph) -> Optional[Tuple[int, ...]]:
    """
    Returns the node ids of one cycle in the graph, or None if it is a DAG.
    """
    done: Set[int] = set()
    for node in graph.iter_nodes():
        if node.id in done:
            continue
        try:
            done.update(postorder(graph, node.id))
        except GraphCycleError as e:
            return e.path
    return None


def would_create_cycle(graph: Graph, output_id: int, input_id: int) -> bool:
    """
    True if connecting ``output_id`` into ``input_id`` closes a cycle, i.e.
    the consumer is already upstream of the producer.
    """
    producer = graph.node_of_output(output_id)
    consumer = graph.input(input_id).node
    if producer == consumer:
        return True
    try:
        return consumer in reachable(graph, producer)
    except GraphCycleError:
        return True
