# Scalar and arithmetic node definitions

from ..ir.kinds import NodeKind
from ..sockets import NodeTypeInfo, scalar_in, scalar_out, vector_in, vector_out
from .. import categories as cat


SCALAR_NODES = [
    NodeTypeInfo(
        NodeKind.MAKE_SCALAR, "MakeScalar", (cat.SCALAR,),
        inputs=(scalar_in("value"),),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.ADD_SCALAR, "AddScalar", (cat.SCALAR,),
        inputs=(scalar_in("v1"), scalar_in("v2")),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.SUBTRACT_SCALAR, "SubtractScalar", (cat.SCALAR,),
        inputs=(scalar_in("v1", 1.0), scalar_in("v2")),
        outputs=(scalar_out(),),
    ),
]


ARITHMETIC_NODES = [
    NodeTypeInfo(
        NodeKind.CLAMP01_SCALAR, "Clamp01Scalar", (cat.ARITHMETIC,),
        inputs=(scalar_in("value"),),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.CLAMP01_VECTOR, "Clamp01Vector", (cat.ARITHMETIC,),
        inputs=(vector_in("value"),),
        outputs=(vector_out(),),
    ),
    # a * b + c
    NodeTypeInfo(
        NodeKind.FMA_SCALAR, "FMAScalar", (cat.ARITHMETIC,),
        inputs=(scalar_in("a"), scalar_in("b", 0.5), scalar_in("c", 0.5)),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.FMA_VECTOR, "FMAVector", (cat.ARITHMETIC,),
        inputs=(vector_in("a"), vector_in("b", (0.5, 0.5, 0.5)), vector_in("c", (0.5, 0.5, 0.5))),
        outputs=(vector_out(),),
    ),
    NodeTypeInfo(
        NodeKind.STEP, "Step", (cat.ARITHMETIC,),
        inputs=(scalar_in("edge"), scalar_in("x")),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.MAX, "Max", (cat.ARITHMETIC,),
        inputs=(scalar_in("a"), scalar_in("b")),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.MIN, "Min", (cat.ARITHMETIC,),
        inputs=(scalar_in("a"), scalar_in("b", 1.0)),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.MUL, "Mul", (cat.ARITHMETIC,),
        inputs=(scalar_in("a"), scalar_in("b", 1.0)),
        outputs=(scalar_out(),),
    ),
    NodeTypeInfo(
        NodeKind.DIV, "Div", (cat.ARITHMETIC,),
        inputs=(scalar_in("a", 1.0), scalar_in("b")),
        outputs=(scalar_out(),),
    ),
]
