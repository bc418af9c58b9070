# Sampler declarations for CustomTexture2D nodes

from ..shader_context import sampler_name, texture_name


def escape_resource_path(path: str) -> str:
    """Texture paths go into an HLSL string literal: forward slashes, no quotes."""
    return path.replace("\\", "/").replace('"', "")


def emit_sampler_declaration(index: int, path: str) -> str:
    """Texture resource plus a linear, wrapping sampler bound to it."""
    tex = texture_name(index)
    lines = [
        f'texture {tex} < string ResourceName = "{escape_resource_path(path)}"; >;',
        f"sampler {sampler_name(index)} = sampler_state {{",
        f"    texture = <{tex}>;",
        "    MINFILTER = LINEAR;",
        "    MAGFILTER = LINEAR;",
        "    ADDRESSU = WRAP;",
        "    ADDRESSV = WRAP;",
        "};",
    ]
    return "\n".join(lines) + "\n"
