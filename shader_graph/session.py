from enum import Enum, auto
from typing import Dict, Optional

from .codegen.assembler import build_effect
from .codegen.hlsl import GenCode, ShaderGenerator
from .errors import CompilationError, GraphError
from .ir.graph import Graph, Node, NodeOptions
from .ir.kinds import NodeKind
from .logger import log_error, log_info
from . import persistence


class Response(Enum):
    """Node-level events raised by the host UI."""
    SET_ACTIVE_NODE = auto()
    CLEAR_ACTIVE_NODE = auto()
    VALUE_CHANGED = auto()


class EditorSession:
    """
    Host-facing editor state.

    Owns the graph, the auxiliary per-node options and the active node, and
    regenerates the shader whenever an edit may affect the active node.
    Generation failures are logged and leave the session in a "no code
    generated" state instead of propagating into the UI loop.
    """
    def __init__(self, graph: Optional[Graph] = None,
                 options: Optional[Dict[int, NodeOptions]] = None,
                 active_node: Optional[int] = None):
        self.graph = graph if graph is not None else Graph()
        self.options: Dict[int, NodeOptions] = dict(options or {})
        self.active_node = active_node

        self.gen_code: Optional[GenCode] = None
        self.last_error: Optional[Exception] = None

        # Where "Save Fx" / "Save Graph" write; set by the host's file dialogs
        self.fx_path: Optional[str] = None
        self.graph_path: Optional[str] = None

        if self.active_node is not None:
            self.regenerate()

    # ------------------------------------------------------------------
    # Generated output
    # ------------------------------------------------------------------

    @property
    def code(self) -> str:
        """Pixel body shown in the editor overlay; empty when nothing was generated."""
        return self.gen_code.pixel_code if self.gen_code else ""

    def effect_text(self) -> str:
        return build_effect(self.gen_code) if self.gen_code else ""

    def regenerate(self) -> Optional[GenCode]:
        if self.active_node is None:
            self.gen_code = None
            self.last_error = None
            return None

        try:
            generator = ShaderGenerator(self.graph, self.options)
            self.gen_code = generator.generate(self.active_node)
            self.last_error = None
            log_info(f"Generated shader for node {self.active_node} ({len(self.gen_code.pixel_code)} chars)")
        except (GraphError, CompilationError) as e:
            log_error(f"No code generated: {e}")
            self.gen_code = None
            self.last_error = e
        return self.gen_code

    # ------------------------------------------------------------------
    # UI responses
    # ------------------------------------------------------------------

    def handle_response(self, response: Response, node_id: Optional[int] = None):
        if response == Response.SET_ACTIVE_NODE:
            self.active_node = node_id
        elif response == Response.CLEAR_ACTIVE_NODE:
            self.active_node = None

        self._after_edit()

    def _after_edit(self):
        """Regenerate, then rewrite the effect file when one is bound."""
        self.regenerate()
        if self.gen_code is not None and self.fx_path:
            self.save_fx()

    def set_active(self, node_id: int):
        self.handle_response(Response.SET_ACTIVE_NODE, node_id)

    def clear_active(self):
        self.handle_response(Response.CLEAR_ACTIVE_NODE)

    def value_changed(self):
        self.handle_response(Response.VALUE_CHANGED)

    # ------------------------------------------------------------------
    # Graph edits
    # ------------------------------------------------------------------

    def add_node(self, kind: NodeKind, label: Optional[str] = None) -> Node:
        node = self.graph.add_node(kind, label)
        self._after_edit()
        return node

    def remove_node(self, node_id: int):
        self.graph.remove_node(node_id)
        self.options.pop(node_id, None)
        if self.active_node == node_id:
            self.active_node = None
        self._after_edit()

    def connect(self, output_id: int, input_id: int):
        self.graph.connect(output_id, input_id)
        self._after_edit()

    def disconnect(self, input_id: int):
        self.graph.disconnect(input_id)
        self._after_edit()

    def set_value(self, input_id: int, value):
        self.graph.set_value(input_id, value)
        self.value_changed()

    def set_options(self, node_id: int, texture_path: Optional[str] = None,
                    draw_edge: Optional[bool] = None) -> NodeOptions:
        self.graph.node(node_id)
        opts = self.options.setdefault(node_id, NodeOptions())
        if texture_path is not None:
            opts.texture_path = texture_path
        if draw_edge is not None:
            opts.draw_edge = draw_edge
        self.value_changed()
        return opts

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def save_fx(self, path: Optional[str] = None, encoding: str = persistence.DEFAULT_ENCODING) -> bool:
        """Write the effect file. Returns False when there is nothing to write."""
        if path is not None:
            self.fx_path = path
        if not self.fx_path or self.gen_code is None:
            return False
        persistence.save_effect(self.fx_path, self.effect_text(), encoding=encoding)
        return True

    def save_graph(self, path: Optional[str] = None) -> bool:
        if path is not None:
            self.graph_path = path
        if not self.graph_path:
            return False
        persistence.save_graph(self.graph_path, self.graph, self.active_node, self.options)
        return True

    def load_graph(self, path: str):
        document = persistence.load_graph(path)
        self.graph = document.graph
        self.options = document.options
        self.active_node = document.active_node
        self.graph_path = path
        self.regenerate()
