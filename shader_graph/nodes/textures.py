# Texture sampling nodes. Each returns the rgb sample and its alpha as a
# second output, which compiles to an out-parameter.

from ..ir.kinds import NodeKind
from ..ir.types import DataType
from ..sockets import NodeTypeInfo, builtin_in, scalar_out, vector_in, vector_out
from .. import categories as cat


TEXTURE_NODES = [
    NodeTypeInfo(
        NodeKind.MAIN_TEXTURE_2D, "MainTexure2D", (cat.MAIN,),
        inputs=(builtin_in("uv", DataType.VEC3, "vso.uv"),),
        outputs=(vector_out("out"), scalar_out("alpha")),
    ),
    NodeTypeInfo(
        NodeKind.MATCAP_TEXTURE_2D, "MatCapTexure2D", (cat.MAIN,),
        inputs=(vector_in("uv"),),
        outputs=(vector_out("out"), scalar_out("alpha")),
    ),
    NodeTypeInfo(
        NodeKind.TOON_TEXTURE_2D, "ToonTexure2D", (cat.MAIN,),
        inputs=(vector_in("uv"),),
        outputs=(vector_out("out"), scalar_out("alpha")),
    ),
    # The texture file path lives in NodeOptions.texture_path
    NodeTypeInfo(
        NodeKind.CUSTOM_TEXTURE_2D, "CustomTexture2D", (cat.MAIN,),
        inputs=(vector_in("uv"),),
        outputs=(vector_out("out"), scalar_out("alpha")),
    ),
]
