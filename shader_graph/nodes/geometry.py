# Geometry, camera and lighting inputs.
# Most of these have no sockets: the intrinsic vertex data they read is
# appended as a fixed trailing argument by the code generator.

from ..ir.kinds import NodeKind
from ..sockets import NodeTypeInfo, scalar_in, scalar_out, vector_out
from .. import categories as cat


GEOMETRY_NODES = [
    NodeTypeInfo(
        NodeKind.NORMAL_DIRECTION, "NormalDirection", (cat.GEOMETRY_DATA,),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.UV0, "UV0", (cat.GEOMETRY_DATA,),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.SCREEN_POS, "ScreenPos", (cat.GEOMETRY_DATA,),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.WORLD_POS, "WorldPos", (cat.GEOMETRY_DATA,),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.CAMERA_POS, "CameraPos", (cat.GEOMETRY_DATA,),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.DEPTH, "Depth", (cat.GEOMETRY_DATA,),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.VIEW_DIRECTION, "ViewDirection", (cat.GEOMETRY_DATA,),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.FRESNEL, "Fresenl", (cat.GEOMETRY_DATA,),
        inputs=(scalar_in("exp", 1.0),),
        outputs=(scalar_out(),),
    ),
]


LIGHTING_NODES = [
    NodeTypeInfo(
        NodeKind.LIGHT_DIRECTION, "LightDirection", (cat.LIGHTING,),
        outputs=(vector_out(),),
    ),
]
