# Output node definitions

from ..ir.kinds import NodeKind
from ..sockets import NodeTypeInfo, SocketRole, scalar_in, vector_in
from .. import categories as cat


OUTPUT_NODES = [
    # Terminal node: no outputs, compiles to the stage's return statement.
    # color/alpha feed the pixel shader, offset displaces the vertex in
    # object space.
    NodeTypeInfo(
        NodeKind.MAIN, "Main", (cat.MAIN,),
        inputs=(
            vector_in("color", role=SocketRole.PIXEL),
            scalar_in("alpha", 1.0, role=SocketRole.PIXEL),
            vector_in("offset", role=SocketRole.VERTEX),
        ),
    ),
]
