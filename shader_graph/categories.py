from .ir.types import DataType

# Node finder groups, in menu order
SCALAR = "Scalar"
VECTOR_OPERATIONS = "VectorOperations"
ARITHMETIC = "Arithmetic"
GEOMETRY_DATA = "GeometryData"
LIGHTING = "Lighting"
MAIN = "Main"

CATEGORY_ORDER = (
    SCALAR,
    VECTOR_OPERATIONS,
    ARITHMETIC,
    GEOMETRY_DATA,
    LIGHTING,
    MAIN,
)

# Socket colors (RGB) used by host widgets
DATA_TYPE_COLORS = {
    DataType.SCALAR: (38, 109, 211),
    DataType.VEC3: (238, 207, 109),
}

# Display names for the connection tooltip
DATA_TYPE_NAMES = {
    DataType.SCALAR: "scalar",
    DataType.VEC3: "3d vector",
}

def get_data_type_color(dtype: DataType) -> tuple:
    """Get the socket color for a data type."""
    return DATA_TYPE_COLORS[dtype]
