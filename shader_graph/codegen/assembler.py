"""
Shader Template Assembler

Concatenates generated fragments into the fixed effect-file layout:

    header | samplers | Basic_VS { vertex } | Basic_PS { pixel } | footer

Fragments are not validated; malformed input yields a byte-exact but
uncompilable file.
"""

from typing import Iterable

from .shader_lib import HEADER_HLSL, TECHNIQUES_HLSL

VS_BEGIN = """
VS_OUTPUT Basic_VS(float4 pos : POSITION, float3 normal : NORMAL, float2 uv : TEXCOORD0) {
    VS_OUTPUT vso = MainVertex(float3(0, 0, 0), pos, normal, uv);
"""
VS_END = "}\n"

PS_BEGIN = """
float4 Basic_PS(VS_OUTPUT vso) : COLOR0 {
"""
PS_END = "}\n"


def assemble(header: str, sampler_code: str, vertex_code: str, pixel_code: str, footer: str) -> str:
    """Join the fragments in slot order around the two entry points."""
    return "".join([
        header,
        sampler_code,
        VS_BEGIN, vertex_code, VS_END,
        PS_BEGIN, pixel_code, PS_END,
        footer,
    ])


def render_defines(defines: Iterable[str]) -> str:
    return "".join(f"#define {name}\n" for name in defines)


def build_effect(gen_code) -> str:
    """Full effect file text for a GenCode bundle."""
    return assemble(
        render_defines(gen_code.defines) + HEADER_HLSL,
        gen_code.sampler_code,
        gen_code.vertex_code,
        gen_code.pixel_code,
        TECHNIQUES_HLSL,
    )
