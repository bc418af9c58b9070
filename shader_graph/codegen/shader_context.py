from typing import Dict, Optional

from ..ir.graph import Graph, Node
from ..planner.passes import Stage


class EmitContext:
    """
    Context object passed to HLSL emitters.
    Wraps the state required to emit one node in one stage.
    """
    def __init__(self,
                 graph: Graph,
                 stage: Stage,
                 sampler_indices: Dict[int, int]):
        self.graph = graph
        self.stage = stage
        # Shared by every stage of one generate() call
        self._sampler_indices = sampler_indices

    def sampler_index(self, node_id: int) -> Optional[int]:
        return self._sampler_indices.get(node_id)

    def sampler_name(self, node: Node) -> str:
        index = self.sampler_index(node.id)
        if index is None:
            # Numbering is done before emission; a miss means the node was
            # not part of either stage's order.
            raise KeyError(f"No sampler assigned to node {node.id}")
        return sampler_name(index)

    @property
    def is_vertex(self) -> bool:
        return self.stage == Stage.VERTEX


def sampler_name(index: int) -> str:
    return f"custom_sampler_{index}"


def texture_name(index: int) -> str:
    return f"custom_tex_{index}"
