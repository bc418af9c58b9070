"""
Socket specifications used by the node type registry.

An input socket either has an editable literal default, or is wired to a
builtin shader expression (e.g. ``vso.uv``) that is substituted verbatim
when nothing is connected. The role tags which shader stage follows the
socket; it is independent of the socket's DataType.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Tuple, Union

from .ir.kinds import NodeKind
from .ir.types import DataType


class SocketRole(Enum):
    ANY = auto()     # Followed by both stages
    PIXEL = auto()   # Pixel-stage only (e.g. Main.color)
    VERTEX = auto()  # Vertex-stage only (e.g. Main.offset)


@dataclass(frozen=True)
class LiteralDefault:
    """Editable constant used while the socket is unconnected."""
    value: Any


@dataclass(frozen=True)
class BuiltinDefault:
    """Builtin expression emitted verbatim while the socket is unconnected."""
    expression: str


DefaultResolution = Union[LiteralDefault, BuiltinDefault]


@dataclass(frozen=True)
class InputSocketSpec:
    name: str
    type: DataType
    default: DefaultResolution
    role: SocketRole = SocketRole.ANY

    @property
    def is_builtin(self) -> bool:
        return isinstance(self.default, BuiltinDefault)

    def default_value(self):
        """Value stored in a new slot. Builtin defaults store the type's zero."""
        if isinstance(self.default, LiteralDefault):
            return self.type.coerce_value(self.default.value)
        return self.type.default_value()


@dataclass(frozen=True)
class OutputSocketSpec:
    name: str
    type: DataType


@dataclass(frozen=True)
class NodeTypeInfo:
    """
    Registry entry for one NodeKind.

    Input and output order is significant: it is the positional argument
    order of the emitted call.
    """
    kind: NodeKind
    label: str
    categories: Tuple[str, ...]
    inputs: Tuple[InputSocketSpec, ...] = field(default_factory=tuple)
    outputs: Tuple[OutputSocketSpec, ...] = field(default_factory=tuple)

    def input_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.inputs)

    def output_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.outputs)

    def input_index(self, name: str) -> int:
        for i, spec in enumerate(self.inputs):
            if spec.name == name:
                return i
        raise KeyError(f"{self.label} has no input '{name}'")

    def input_spec(self, name: str) -> InputSocketSpec:
        return self.inputs[self.input_index(name)]

    def is_terminal(self) -> bool:
        """Terminal nodes have no outputs and compile to a return statement."""
        return len(self.outputs) == 0

    def has_role(self, role: SocketRole) -> bool:
        return any(s.role == role for s in self.inputs)


# Shorthands for registry tables
def scalar_in(name: str, value: float = 0.0, role: SocketRole = SocketRole.ANY) -> InputSocketSpec:
    return InputSocketSpec(name, DataType.SCALAR, LiteralDefault(float(value)), role)


def vector_in(name: str, value=(0.0, 0.0, 0.0), role: SocketRole = SocketRole.ANY) -> InputSocketSpec:
    return InputSocketSpec(name, DataType.VEC3, LiteralDefault(tuple(float(v) for v in value)), role)


def builtin_in(name: str, dtype: DataType, expression: str, role: SocketRole = SocketRole.ANY) -> InputSocketSpec:
    return InputSocketSpec(name, dtype, BuiltinDefault(expression), role)


def scalar_out(name: str = "out") -> OutputSocketSpec:
    return OutputSocketSpec(name, DataType.SCALAR)


def vector_out(name: str = "out") -> OutputSocketSpec:
    return OutputSocketSpec(name, DataType.VEC3)
