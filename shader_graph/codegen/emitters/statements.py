# Statement forms: declarations, calls and returns

from typing import List

from ...errors import CodeGenerationError
from ...ir.kinds import NodeKind
from ...ir.types import DataType
from ...planner.passes import Stage


def output_var(name: str, index: int) -> str:
    return f"{name}_o{index}"


def emit_out_declaration(name: str, index: int, dtype: DataType) -> str:
    """Declaration of a secondary output, passed to the call as an out-parameter."""
    return f"{dtype.hlsl_type()} {output_var(name, index)};"


def emit_call(name: str, dtype: DataType, callee: str, args: List[str]) -> str:
    """Primary output declared and initialised by the node's helper call."""
    return f"{dtype.hlsl_type()} {output_var(name, 0)} = {callee}({', '.join(args)});"


def emit_root_return(name: str, dtype: DataType) -> str:
    """
    Return statement for a root that is an intermediate expression:
    the value is widened to an opaque float4 color.
    """
    var = output_var(name, 0)
    if dtype == DataType.SCALAR:
        return f"return float4({var}, {var}, {var}, 1.0);"
    elif dtype == DataType.VEC3:
        return f"return float4({var}, 1.0);"
    raise CodeGenerationError(f"Cannot return a {dtype} from the pixel shader")


def emit_terminal(kind: NodeKind, stage: Stage, callee: str, args: List[str], node_id: int = None) -> str:
    """Statement for a node without outputs. Only Main is terminal."""
    if kind == NodeKind.MAIN:
        if stage == Stage.VERTEX:
            return f"return {callee}Vertex({', '.join(args)});"
        return f"return {callee}({', '.join(args)});"
    raise CodeGenerationError(f"{kind} has no terminal statement form", node_id=node_id)
