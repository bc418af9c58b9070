import unittest

from shader_graph.codegen.assembler import PS_BEGIN, PS_END, VS_BEGIN, VS_END, assemble, build_effect, render_defines
from shader_graph.codegen.hlsl import generate_code
from shader_graph.codegen.shader_lib import HEADER_HLSL, TECHNIQUES_HLSL
from shader_graph.ir.graph import Graph, NodeOptions
from shader_graph.ir.kinds import NodeKind


class TestAssembler(unittest.TestCase):
    def test_slot_order(self):
        text = assemble("H\n", "S\n", "V\n", "P\n", "F\n")
        self.assertEqual(text, "H\nS\n" + VS_BEGIN + "V\n" + VS_END + PS_BEGIN + "P\n" + PS_END + "F\n")

    def test_fragments_not_validated(self):
        # Garbage in, garbage out: the assembler only concatenates
        text = assemble("", "", "}}}", "", "")
        self.assertIn("}}}", text)

    def test_render_defines(self):
        self.assertEqual(render_defines(()), "")
        self.assertEqual(render_defines(["A", "B"]), "#define A\n#define B\n")

    def test_build_effect(self):
        graph = Graph()
        main = graph.add_node(NodeKind.MAIN)
        gen = generate_code(graph, main.id)
        text = build_effect(gen)

        self.assertTrue(text.startswith(HEADER_HLSL))
        self.assertTrue(text.endswith(TECHNIQUES_HLSL))
        self.assertIn(VS_BEGIN + gen.vertex_code + VS_END, text)
        self.assertIn(PS_BEGIN + gen.pixel_code + PS_END, text)
        self.assertLess(text.index("Basic_VS("), text.index("Basic_PS("))

    def test_edge_define_precedes_header(self):
        graph = Graph()
        main = graph.add_node(NodeKind.MAIN)
        gen = generate_code(graph, main.id, {main.id: NodeOptions(draw_edge=True)})
        text = build_effect(gen)
        self.assertTrue(text.startswith("#define ENABLE_DRAW_EDGE_PASS\n" + HEADER_HLSL))

    def test_samplers_between_header_and_vertex(self):
        graph = Graph()
        tex = graph.add_node(NodeKind.CUSTOM_TEXTURE_2D)
        gen = generate_code(graph, tex.id, {tex.id: NodeOptions(texture_path="a.png")})
        text = build_effect(gen)
        start = len(HEADER_HLSL)
        self.assertEqual(text[start:start + len(gen.sampler_code)], gen.sampler_code)


if __name__ == '__main__':
    unittest.main()
