# HLSL Emitters Package
# Per-kind trailing arguments, statement forms and literal formatting

from .registry import get_trailing_args, SAMPLER_KINDS
from .const import format_constant

__all__ = ['get_trailing_args', 'SAMPLER_KINDS', 'format_constant']
