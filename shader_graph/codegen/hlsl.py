import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from ..ir.graph import Graph, NodeOptions
from ..ir.kinds import NodeKind
from ..logger import log_debug
from ..nodes import lookup
from ..planner.analysis import postorder, visible_inputs
from ..planner.passes import ShaderPass, Stage
from ..sockets import BuiltinDefault, InputSocketSpec, SocketRole
from .shader_context import EmitContext
from .emitters import format_constant, get_trailing_args, SAMPLER_KINDS
from .emitters.statements import emit_call, emit_out_declaration, emit_root_return, emit_terminal, output_var
from .emitters.textures import emit_sampler_declaration

# Vertex body used when the root has no vertex-stage sockets: Basic_VS
# already holds the undisplaced output in `vso`.
DEFAULT_VERTEX_BODY = "return vso;\n"

DRAW_EDGE_DEFINE = "ENABLE_DRAW_EDGE_PASS"


@dataclass(frozen=True)
class GenCode:
    """
    Generated shader fragments for one root. Recomputed on every edit.

    sampler_indices maps CustomTexture2D node ids to their sampler number;
    the same numbering is used by every stage.
    """
    vertex_code: str = ""
    pixel_code: str = ""
    sampler_code: str = ""
    defines: Tuple[str, ...] = ()
    sampler_indices: Dict[int, int] = field(default_factory=dict)


class ShaderGenerator:
    """
    Generates HLSL shader bodies from a node graph.

    The graph is only read. Auxiliary per-node data (texture paths, the
    edge flag) is passed separately; nodes without an entry use defaults.
    """
    def __init__(self, graph: Graph, options: Optional[Mapping[int, NodeOptions]] = None):
        self.graph = graph
        self.options: Mapping[int, NodeOptions] = options or {}

    def generate(self, root: int) -> GenCode:
        # 1. Order each stage from the root
        pixel_pass = self._plan(Stage.PIXEL, root)
        vertex_pass = None
        root_info = lookup(self.graph.node(root).kind)
        if root_info.has_role(SocketRole.VERTEX):
            vertex_pass = self._plan(Stage.VERTEX, root)

        # 2. Sampler numbering, once for both stages
        sampler_indices = self._assign_samplers([p for p in (pixel_pass, vertex_pass) if p])

        # 3. Stage bodies
        pixel_code = self._emit_pass(pixel_pass, sampler_indices)
        if vertex_pass is not None:
            vertex_code = self._emit_pass(vertex_pass, sampler_indices)
        else:
            vertex_code = DEFAULT_VERTEX_BODY

        return GenCode(
            vertex_code=vertex_code,
            pixel_code=pixel_code,
            sampler_code=self._generate_samplers(sampler_indices),
            defines=self._generate_defines(root),
            sampler_indices=sampler_indices,
        )

    def _plan(self, stage: Stage, root: int) -> ShaderPass:
        shader_pass = ShaderPass(stage, root)
        shader_pass.order = postorder(self.graph, root, shader_pass.socket_filter)
        log_debug(f"{stage.name} order: {shader_pass.order}")
        return shader_pass

    def _assign_samplers(self, passes: List[ShaderPass]) -> Dict[int, int]:
        """Number sampler-bound nodes by first discovery, pixel stage first."""
        indices: Dict[int, int] = {}
        for shader_pass in passes:
            for node_id in shader_pass.order:
                if node_id in indices:
                    continue
                if self.graph.node(node_id).kind in SAMPLER_KINDS:
                    indices[node_id] = len(indices)
        if indices:
            log_debug(f"Sampler assignment: {indices}")
        return indices

    def _generate_samplers(self, sampler_indices: Dict[int, int]) -> str:
        parts = []
        for node_id, index in sorted(sampler_indices.items(), key=lambda item: item[1]):
            opts = self.options.get(node_id) or NodeOptions()
            parts.append(emit_sampler_declaration(index, opts.texture_path))
        return "".join(parts)

    def _generate_defines(self, root: int) -> Tuple[str, ...]:
        defines = []
        opts = self.options.get(root)
        if opts is not None and opts.draw_edge and self.graph.node(root).kind == NodeKind.MAIN:
            defines.append(DRAW_EDGE_DEFINE)
        return tuple(defines)

    def _emit_pass(self, shader_pass: ShaderPass, sampler_indices: Dict[int, int]) -> str:
        ctx = EmitContext(self.graph, shader_pass.stage, sampler_indices)
        order = shader_pass.order
        names = [self._var_name(i, self.graph.node(nid).label) for i, nid in enumerate(order)]
        positions = {nid: i for i, nid in enumerate(order)}

        lines = []
        for i, node_id in enumerate(order):
            node = self.graph.node(node_id)
            info = lookup(node.kind)

            args = [
                self._param(spec, input_id, names, positions)
                for spec, input_id in visible_inputs(self.graph, node_id, shader_pass.socket_filter)
            ]
            args.extend(get_trailing_args(node.kind)(node, ctx))

            if info.is_terminal():
                lines.append(emit_terminal(node.kind, shader_pass.stage, info.label, args, node_id))
                break

            name = names[i]
            # Secondary outputs become out-parameters of the same call
            for k in range(1, len(info.outputs)):
                lines.append(emit_out_declaration(name, k, info.outputs[k].type))
                args.append(output_var(name, k))
            lines.append(emit_call(name, info.outputs[0].type, info.label, args))

            if i == len(order) - 1:
                lines.append(emit_root_return(name, info.outputs[0].type))

        shader_pass.lines = lines
        shader_pass.source = "".join(line + "\n" for line in lines)
        return shader_pass.source

    def _param(self, spec: InputSocketSpec, input_id: int, names: List[str], positions: Dict[int, int]) -> str:
        """Resolves an input socket to its HLSL argument text."""
        output_id = self.graph.connection(input_id)
        if output_id is not None:
            producer = self.graph.node_of_output(output_id)
            return output_var(names[positions[producer]], self.graph.output_index(output_id))
        if isinstance(spec.default, BuiltinDefault):
            return spec.default.expression
        # The stored value, which the user may have edited away from the default
        return format_constant(self.graph.input_value(input_id), spec.type)

    def _var_name(self, index: int, label: str) -> str:
        return f"_{index}_{self._sanitize_name(label)}"

    def _sanitize_name(self, name: str) -> str:
        # Replace non-alphanumeric chars with underscore
        s = re.sub(r'[^a-zA-Z0-9_]', '_', name)
        # Collapse multiple underscores
        s = re.sub(r'_+', '_', s)
        return s.strip('_') or "node"


def generate_code(graph: Graph, root: int, options: Optional[Mapping[int, NodeOptions]] = None) -> GenCode:
    """Generate the shader fragments for ``root``."""
    return ShaderGenerator(graph, options).generate(root)
