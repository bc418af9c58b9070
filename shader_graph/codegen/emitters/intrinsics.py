# Fixed trailing arguments per NodeKind.
# Intrinsic inputs (vertex attributes, samplers) enter the call after the
# declared sockets; they are not sockets themselves.

# VS_OUTPUT fields, filled by MainVertex before any vertex code runs
VSO_NORMAL = "vso.nrm"
VSO_UV = "vso.uv"
VSO_WORLD_POS = "vso.wpos"
VSO_SCREEN_POS = "vso.spos"

# Basic_VS parameters
VS_INPUTS = ["pos", "normal", "uv"]


def no_args(node, ctx):
    return []


def normal_args(node, ctx):
    return [VSO_NORMAL]


def uv_args(node, ctx):
    return [VSO_UV]


def world_pos_args(node, ctx):
    return [VSO_WORLD_POS]


def screen_pos_args(node, ctx):
    return [VSO_SCREEN_POS]


def fresnel_args(node, ctx):
    return [VSO_WORLD_POS, VSO_NORMAL]


def custom_texture_args(node, ctx):
    """The generated sampler bound to this node's texture path."""
    return [ctx.sampler_name(node)]


def main_args(node, ctx):
    # Vertex stage: MainVertex rebuilds the output from the raw attributes
    if ctx.is_vertex:
        return list(VS_INPUTS)
    return []
