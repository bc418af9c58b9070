"""
HLSL helper functions, one per node kind.

Each generated call `{Label}(args)` resolves to the helper of the same
name. Secondary outputs are `out` parameters after the declared and
intrinsic arguments.
"""

from typing import Dict, Iterable, List, Set

HLSL_FUNCTIONS: Dict[str, Dict] = {
    # =========================================================================
    # SCALAR
    # =========================================================================
    'MakeScalar': {
        'code': '''
float MakeScalar(float value) {
    return value;
}''',
        'deps': []
    },
    'AddScalar': {
        'code': '''
float AddScalar(float v1, float v2) {
    return v1 + v2;
}''',
        'deps': []
    },
    'SubtractScalar': {
        'code': '''
float SubtractScalar(float v1, float v2) {
    return v1 - v2;
}''',
        'deps': []
    },

    # =========================================================================
    # VECTOR
    # =========================================================================
    'MakeVector': {
        'code': '''
float3 MakeVector(float x, float y, float z) {
    return float3(x, y, z);
}''',
        'deps': []
    },
    'AddVector': {
        'code': '''
float3 AddVector(float3 v1, float3 v2) {
    return v1 + v2;
}''',
        'deps': []
    },
    'SubtractVector': {
        'code': '''
float3 SubtractVector(float3 v1, float3 v2) {
    return v1 - v2;
}''',
        'deps': []
    },
    'VectorTimesScalar': {
        'code': '''
float3 VectorTimesScalar(float3 v, float s) {
    return v * s;
}''',
        'deps': []
    },
    'DotProduct': {
        'code': '''
float DotProduct(float3 a, float3 b) {
    return dot(a, b);
}''',
        'deps': []
    },
    'FloatToVector3': {
        'code': '''
float3 FloatToVector3(float value) {
    return float3(value, value, value);
}''',
        'deps': []
    },

    # =========================================================================
    # ARITHMETIC
    # =========================================================================
    'Clamp01Scalar': {
        'code': '''
float Clamp01Scalar(float value) {
    return saturate(value);
}''',
        'deps': []
    },
    'Clamp01Vector': {
        'code': '''
float3 Clamp01Vector(float3 value) {
    return saturate(value);
}''',
        'deps': []
    },
    'FMAScalar': {
        'code': '''
float FMAScalar(float a, float b, float c) {
    return a * b + c;
}''',
        'deps': []
    },
    'FMAVector': {
        'code': '''
float3 FMAVector(float3 a, float3 b, float3 c) {
    return a * b + c;
}''',
        'deps': []
    },
    'Step': {
        'code': '''
float Step(float edge, float x) {
    return step(edge, x);
}''',
        'deps': []
    },
    'Max': {
        'code': '''
float Max(float a, float b) {
    return max(a, b);
}''',
        'deps': []
    },
    'Min': {
        'code': '''
float Min(float a, float b) {
    return min(a, b);
}''',
        'deps': []
    },
    'Mul': {
        'code': '''
float Mul(float a, float b) {
    return a * b;
}''',
        'deps': []
    },
    'Div': {
        'code': '''
float Div(float a, float b) {
    return a / b;
}''',
        'deps': []
    },

    # =========================================================================
    # GEOMETRY / LIGHTING
    # =========================================================================
    'NormalDirection': {
        'code': '''
float3 NormalDirection(float3 nrm) {
    return normalize(nrm);
}''',
        'deps': []
    },
    'UV0': {
        'code': '''
float3 UV0(float3 uv) {
    return uv;
}''',
        'deps': []
    },
    'ScreenPos': {
        'code': '''
float3 ScreenPos(float4 spos) {
    return float3(spos.xy / spos.w * float2(0.5, -0.5) + 0.5, 0);
}''',
        'deps': []
    },
    'WorldPos': {
        'code': '''
float3 WorldPos(float3 wpos) {
    return wpos;
}''',
        'deps': []
    },
    'CameraPos': {
        'code': '''
float3 CameraPos() {
    return cam_pos;
}''',
        'deps': []
    },
    'Depth': {
        'code': '''
float Depth(float4 spos) {
    return spos.z / spos.w;
}''',
        'deps': []
    },
    'ViewDirection': {
        'code': '''
float3 ViewDirection(float3 wpos) {
    return normalize(cam_pos - wpos);
}''',
        'deps': []
    },
    'Fresenl': {
        'code': '''
float Fresenl(float power, float3 wpos, float3 nrm) {
    return pow(1.0 - saturate(dot(ViewDirection(wpos), normalize(nrm))), power);
}''',
        'deps': ['ViewDirection']
    },
    'LightDirection': {
        'code': '''
float3 LightDirection() {
    return -light_dir;
}''',
        'deps': []
    },

    # =========================================================================
    # TEXTURES
    # =========================================================================
    'MainTexure2D': {
        'code': '''
float3 MainTexure2D(float3 uv, out float alpha) {
    float4 c = tex2Dlod(mat_tex_sampler, float4(uv.xy, 0, 0));
    alpha = c.a;
    return c.rgb;
}''',
        'deps': []
    },
    'MatCapTexure2D': {
        'code': '''
float3 MatCapTexure2D(float3 uv, out float alpha) {
    float4 c = tex2Dlod(sph_tex_sampler, float4(uv.xy, 0, 0));
    alpha = c.a;
    return c.rgb;
}''',
        'deps': []
    },
    'ToonTexure2D': {
        'code': '''
float3 ToonTexure2D(float3 uv, out float alpha) {
    float4 c = tex2Dlod(toon_tex_sampler, float4(uv.xy, 0, 0));
    alpha = c.a;
    return c.rgb;
}''',
        'deps': []
    },
    'CustomTexture2D': {
        'code': '''
float3 CustomTexture2D(float3 uv, sampler s, out float alpha) {
    float4 c = tex2Dlod(s, float4(uv.xy, 0, 0));
    alpha = c.a;
    return c.rgb;
}''',
        'deps': []
    },

    # =========================================================================
    # OUTPUT
    # =========================================================================
    'Main': {
        'code': '''
float4 Main(float3 color, float alpha) {
    return float4(color, alpha);
}''',
        'deps': []
    },
    'MainVertex': {
        'code': '''
VS_OUTPUT MainVertex(float3 offset, float4 pos, float3 normal, float2 uv) {
    VS_OUTPUT vso;
    float4 p = float4(pos.xyz + offset, pos.w);
    vso.pos = mul(p, worldViewProjMatrix);
    vso.nrm = normalize(mul(normal, (float3x3)worldMatrix));
    vso.uv = float3(uv, 0);
    vso.wpos = mul(p, worldMatrix).xyz;
    vso.spos = vso.pos;
    return vso;
}''',
        'deps': []
    },
}


def resolve_dependencies(func_names: Iterable[str]) -> List[str]:
    """
    Returns the requested helpers and everything they call, each after its
    dependencies, otherwise in request order.
    """
    ordered: List[str] = []
    seen: Set[str] = set()

    def visit(name: str):
        if name in seen:
            return
        if name not in HLSL_FUNCTIONS:
            raise KeyError(f"Unknown HLSL helper: {name}")
        seen.add(name)
        for dep in HLSL_FUNCTIONS[name]['deps']:
            visit(dep)
        ordered.append(name)

    for name in func_names:
        visit(name)
    return ordered


def get_functions_code(func_names: Iterable[str]) -> str:
    """Get combined code for the requested helpers in dependency order."""
    return '\n'.join(HLSL_FUNCTIONS[name]['code'] for name in resolve_dependencies(func_names)) + '\n'


# The whole library, as written into every effect file
FUNCTIONS_HLSL = get_functions_code(HLSL_FUNCTIONS.keys())
