from enum import Enum


class NodeKind(Enum):
    """
    Closed set of shader operations.

    The value is the persisted name and matches the HLSL helper called by
    the generated code, including the historical spellings of
    ``MainTexure2D`` and ``Fresenl``.
    """
    # --- Scalar ---
    MAKE_SCALAR = "MakeScalar"
    ADD_SCALAR = "AddScalar"
    SUBTRACT_SCALAR = "SubtractScalar"

    # --- Vector ---
    MAKE_VECTOR = "MakeVector"
    ADD_VECTOR = "AddVector"
    SUBTRACT_VECTOR = "SubtractVector"
    VECTOR_TIMES_SCALAR = "VectorTimesScalar"
    DOT_PRODUCT = "DotProduct"
    FLOAT_TO_VECTOR3 = "FloatToVector3"

    # --- Arithmetic ---
    CLAMP01_SCALAR = "Clamp01Scalar"
    CLAMP01_VECTOR = "Clamp01Vector"
    FMA_SCALAR = "FMAScalar"
    FMA_VECTOR = "FMAVector"
    STEP = "Step"
    MAX = "Max"
    MIN = "Min"
    MUL = "Mul"
    DIV = "Div"

    # --- Geometry / intrinsic inputs ---
    NORMAL_DIRECTION = "NormalDirection"
    UV0 = "UV0"
    SCREEN_POS = "ScreenPos"
    WORLD_POS = "WorldPos"
    CAMERA_POS = "CameraPos"
    DEPTH = "Depth"
    VIEW_DIRECTION = "ViewDirection"
    FRESNEL = "Fresenl"

    # --- Lighting ---
    LIGHT_DIRECTION = "LightDirection"

    # --- Textures ---
    MAIN_TEXTURE_2D = "MainTexure2D"
    MATCAP_TEXTURE_2D = "MatCapTexure2D"
    TOON_TEXTURE_2D = "ToonTexure2D"
    CUSTOM_TEXTURE_2D = "CustomTexture2D"

    # --- Output ---
    MAIN = "Main"

    def __str__(self):
        return self.value
