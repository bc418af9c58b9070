import unittest
import tempfile
import os

from shader_graph.codegen.assembler import build_effect
from shader_graph.errors import GraphCycleError, NodeNotFoundError
from shader_graph.ir.kinds import NodeKind
from shader_graph.session import EditorSession, Response


class TestEditorSession(unittest.TestCase):
    def setUp(self):
        self.session = EditorSession()
        self.make = self.session.add_node(NodeKind.MAKE_SCALAR)
        self.add = self.session.add_node(NodeKind.ADD_SCALAR)
        graph = self.session.graph
        self.session.connect(graph.find_output(self.make.id, "out"), graph.find_input(self.add.id, "v1"))

    def test_no_active_node(self):
        self.assertIsNone(self.session.gen_code)
        self.assertEqual(self.session.code, "")
        self.assertEqual(self.session.effect_text(), "")

    def test_set_active_generates(self):
        self.session.set_active(self.add.id)
        self.assertIn("AddScalar(_0_MakeScalar_o0, 0);", self.session.code)
        self.assertIsNone(self.session.last_error)

    def test_value_change_regenerates(self):
        self.session.set_active(self.add.id)
        self.session.set_value(self.session.graph.find_input(self.add.id, "v2"), 4)
        self.assertIn("AddScalar(_0_MakeScalar_o0, 4);", self.session.code)

    def test_disconnect_regenerates(self):
        self.session.set_active(self.add.id)
        self.session.disconnect(self.session.graph.find_input(self.add.id, "v1"))
        self.assertEqual(self.session.code.split("\n")[0], "float _0_AddScalar_o0 = AddScalar(0, 0);")

    def test_clear_active(self):
        self.session.set_active(self.add.id)
        self.session.clear_active()
        self.assertIsNone(self.session.active_node)
        self.assertEqual(self.session.code, "")

    def test_cycle_leaves_no_code(self):
        self.session.set_active(self.add.id)
        graph = self.session.graph
        self.session.connect(graph.find_output(self.add.id, "out"), graph.find_input(self.make.id, "value"))

        self.assertIsNone(self.session.gen_code)
        self.assertEqual(self.session.code, "")
        self.assertIsInstance(self.session.last_error, GraphCycleError)

        # Breaking the cycle recovers
        self.session.disconnect(graph.find_input(self.make.id, "value"))
        self.assertIsNotNone(self.session.gen_code)
        self.assertIsNone(self.session.last_error)

    def test_unknown_active_node(self):
        self.session.handle_response(Response.SET_ACTIVE_NODE, 1234)
        self.assertIsInstance(self.session.last_error, NodeNotFoundError)
        self.assertEqual(self.session.code, "")

    def test_remove_active_node(self):
        self.session.set_active(self.add.id)
        self.session.remove_node(self.add.id)
        self.assertIsNone(self.session.active_node)
        self.assertIsNone(self.session.gen_code)

    def test_set_options(self):
        main = self.session.add_node(NodeKind.MAIN)
        self.session.set_active(main.id)
        opts = self.session.set_options(main.id, draw_edge=True)
        self.assertTrue(opts.draw_edge)
        self.assertEqual(self.session.gen_code.defines, ("ENABLE_DRAW_EDGE_PASS",))

    def test_set_options_unknown_node(self):
        with self.assertRaises(NodeNotFoundError):
            self.session.set_options(999, texture_path="a.png")


class TestSessionFiles(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.session = EditorSession()
        self.main = self.session.add_node(NodeKind.MAIN)

    def tearDown(self):
        self.tmp.cleanup()

    def _path(self, name):
        return os.path.join(self.tmp.name, name)

    def test_save_fx_without_code(self):
        self.assertFalse(self.session.save_fx(self._path("out.fx")))
        self.assertFalse(os.path.exists(self._path("out.fx")))

    def test_save_fx(self):
        self.session.set_active(self.main.id)
        path = self._path("out.fx")
        self.assertTrue(self.session.save_fx(path))
        with open(path, encoding="utf-8", newline="") as f:
            self.assertEqual(f.read(), build_effect(self.session.gen_code))

    def test_fx_rewritten_on_change(self):
        path = self._path("out.fx")
        self.session.fx_path = path
        self.session.set_active(self.main.id)
        self.session.set_value(self.session.graph.find_input(self.main.id, "alpha"), 0.5)
        with open(path, encoding="utf-8") as f:
            self.assertIn("return Main(float3(0, 0, 0), 0.5);", f.read())

    def test_fx_rewritten_after_graph_edit(self):
        graph = self.session.graph
        make = self.session.add_node(NodeKind.MAKE_VECTOR)
        self.session.connect(graph.find_output(make.id, "out"), graph.find_input(self.main.id, "color"))
        self.session.set_active(self.main.id)
        path = self._path("out.fx")
        self.assertTrue(self.session.save_fx(path))

        self.session.disconnect(graph.find_input(self.main.id, "color"))
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        self.assertEqual(text, self.session.effect_text())
        self.assertIn("return Main(float3(0, 0, 0), 1);", text)

    def test_graph_round_trip(self):
        self.session.set_active(self.main.id)
        self.session.set_options(self.main.id, draw_edge=True)
        path = self._path("graph.json")
        self.assertTrue(self.session.save_graph(path))

        restored = EditorSession()
        restored.load_graph(path)
        self.assertEqual(restored.active_node, self.main.id)
        self.assertEqual(restored.gen_code, self.session.gen_code)

    def test_save_graph_without_path(self):
        self.assertFalse(self.session.save_graph())


if __name__ == '__main__':
    unittest.main()
