# Shader HLSL Library Package
# Re-exports the fixed boilerplate written around the generated code

from .semantics import SEMANTICS_HLSL, STRUCTS_HLSL
from .functions import FUNCTIONS_HLSL, HLSL_FUNCTIONS
from .techniques import TECHNIQUES_HLSL

# Everything above the sampler declarations
HEADER_HLSL = SEMANTICS_HLSL + STRUCTS_HLSL + FUNCTIONS_HLSL

__all__ = [
    'SEMANTICS_HLSL',
    'STRUCTS_HLSL',
    'FUNCTIONS_HLSL',
    'HLSL_FUNCTIONS',
    'TECHNIQUES_HLSL',
    'HEADER_HLSL',
]
