# Vector node definitions

from ..ir.kinds import NodeKind
from ..sockets import NodeTypeInfo, scalar_in, scalar_out, vector_in, vector_out
from .. import categories as cat


VECTOR_NODES = [
    NodeTypeInfo(
        NodeKind.MAKE_VECTOR, "MakeVector", (cat.VECTOR_OPERATIONS,),
        inputs=(scalar_in("x"), scalar_in("y"), scalar_in("z")),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.ADD_VECTOR, "AddVector", (cat.VECTOR_OPERATIONS,),
        inputs=(vector_in("v1"), vector_in("v2")),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.SUBTRACT_VECTOR, "SubtractVector", (cat.VECTOR_OPERATIONS,),
        inputs=(vector_in("v1", (1.0, 1.0, 1.0)), vector_in("v2")),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.VECTOR_TIMES_SCALAR, "VectorTimesScalar", (cat.VECTOR_OPERATIONS,),
        inputs=(vector_in("vector"), scalar_in("scalar")),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.DOT_PRODUCT, "DotProduct", (cat.VECTOR_OPERATIONS,),
        inputs=(vector_in("v1"), vector_in("v2")),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.FLOAT_TO_VECTOR3, "FloatToVector3", (cat.VECTOR_OPERATIONS,),
        inputs=(scalar_in("value"),),
        outputs=(vector_out(),),
    ),
]
