# Trailing Argument Registry
# Maps NodeKind -> function returning the fixed arguments appended after the
# declared sockets. Every kind is listed explicitly.

from typing import Callable, Dict, List, Optional

from ...errors import RegistryMissError
from ...ir.graph import Node
from ...ir.kinds import NodeKind
from ..shader_context import EmitContext

from .intrinsics import no_args, normal_args, uv_args, world_pos_args, screen_pos_args
from .intrinsics import fresnel_args, custom_texture_args, main_args

# Signature: (node: Node, ctx: EmitContext) -> List[str]
TrailingArgsType = Callable[[Node, EmitContext], List[str]]


TRAILING_ARGS: Dict[NodeKind, TrailingArgsType] = {
    # Scalar
    NodeKind.MAKE_SCALAR: no_args,
    NodeKind.ADD_SCALAR: no_args,
    NodeKind.SUBTRACT_SCALAR: no_args,

    # Vector
    NodeKind.MAKE_VECTOR: no_args,
    NodeKind.ADD_VECTOR: no_args,
    NodeKind.SUBTRACT_VECTOR: no_args,
    NodeKind.VECTOR_TIMES_SCALAR: no_args,
    NodeKind.DOT_PRODUCT: no_args,
    NodeKind.FLOAT_TO_VECTOR3: no_args,

    # Arithmetic
    NodeKind.CLAMP01_SCALAR: no_args,
    NodeKind.CLAMP01_VECTOR: no_args,
    NodeKind.FMA_SCALAR: no_args,
    NodeKind.FMA_VECTOR: no_args,
    NodeKind.STEP: no_args,
    NodeKind.MAX: no_args,
    NodeKind.MIN: no_args,
    NodeKind.MUL: no_args,
    NodeKind.DIV: no_args,

    # Geometry
    NodeKind.NORMAL_DIRECTION: normal_args,
    NodeKind.UV0: uv_args,
    NodeKind.SCREEN_POS: screen_pos_args,
    NodeKind.WORLD_POS: world_pos_args,
    NodeKind.CAMERA_POS: no_args,
    NodeKind.DEPTH: screen_pos_args,
    NodeKind.VIEW_DIRECTION: world_pos_args,
    NodeKind.FRESNEL: fresnel_args,

    # Lighting
    NodeKind.LIGHT_DIRECTION: no_args,

    # Textures (the fixed MME textures use global samplers)
    NodeKind.MAIN_TEXTURE_2D: no_args,
    NodeKind.MATCAP_TEXTURE_2D: no_args,
    NodeKind.TOON_TEXTURE_2D: no_args,
    NodeKind.CUSTOM_TEXTURE_2D: custom_texture_args,

    # Output
    NodeKind.MAIN: main_args,
}


def get_trailing_args(kind: NodeKind) -> TrailingArgsType:
    """Get the trailing-argument rule for a kind. A miss is a programmer error."""
    rule: Optional[TrailingArgsType] = TRAILING_ARGS.get(kind)
    if rule is None:
        raise RegistryMissError(f"No trailing-argument rule for {kind!r}", kind=kind)
    return rule


# Kinds that bind a generated sampler and take part in sampler numbering
SAMPLER_KINDS = frozenset({NodeKind.CUSTOM_TEXTURE_2D})


__all__ = ['TRAILING_ARGS', 'SAMPLER_KINDS', 'get_trailing_args']
