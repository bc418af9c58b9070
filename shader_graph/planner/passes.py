from enum import Enum, auto
from typing import List

from ..sockets import InputSocketSpec, SocketRole


class Stage(Enum):
    PIXEL = auto()
    VERTEX = auto()

    @property
    def role(self) -> SocketRole:
        return SocketRole.PIXEL if self == Stage.PIXEL else SocketRole.VERTEX


def stage_filter(stage: Stage):
    """
    Socket predicate for a stage traversal: untagged sockets are followed by
    both stages, tagged ones only by their own.
    """
    def accepts(spec: InputSocketSpec) -> bool:
        return spec.role == SocketRole.ANY or spec.role == stage.role
    return accepts


class ShaderPass:
    """
    One shader stage's slice of the graph: the nodes reachable from the
    root through that stage's sockets, in emission order.
    """
    def __init__(self, stage: Stage, root: int):
        self.stage = stage
        self.root = root
        self.order: List[int] = []  # Postorder, root last
        self.lines: List[str] = []

        # Shader Source
        self.source: str = ""

    @property
    def socket_filter(self):
        return stage_filter(self.stage)

    def __repr__(self):
        return f"<ShaderPass {self.stage.name} | {len(self.order)} Nodes | root {self.root}>"
