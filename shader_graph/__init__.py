# Shader Graph: node graphs compiled to MikuMikuEffect HLSL

__version__ = "0.1.0"

from .errors import ShaderGraphError
from .ir.graph import Graph, NodeOptions
from .ir.kinds import NodeKind
from .ir.types import DataType
from .codegen.hlsl import GenCode, ShaderGenerator, generate_code
from .codegen.assembler import build_effect
from .session import EditorSession

__all__ = [
    'ShaderGraphError',
    'Graph',
    'NodeOptions',
    'NodeKind',
    'DataType',
    'GenCode',
    'ShaderGenerator',
    'generate_code',
    'build_effect',
    'EditorSession',
]
