import unittest

from shader_graph.categories import CATEGORY_ORDER, get_data_type_color
from shader_graph.codegen.emitters.registry import TRAILING_ARGS, get_trailing_args
from shader_graph.codegen.shader_lib import HLSL_FUNCTIONS
from shader_graph.codegen.shader_lib.functions import resolve_dependencies
from shader_graph.errors import RegistryMissError, ValueTypeError
from shader_graph.ir.kinds import NodeKind
from shader_graph.ir.types import DataType
from shader_graph.nodes import NODE_TYPE_INFOS, categories, kinds_in_category, lookup
from shader_graph.sockets import BuiltinDefault, LiteralDefault, SocketRole


class TestNodeRegistry(unittest.TestCase):
    def test_every_kind_registered(self):
        for kind in NodeKind:
            info = lookup(kind)
            self.assertEqual(info.kind, kind)
            self.assertEqual(info.label, kind.value)

    def test_every_input_has_default(self):
        for info in NODE_TYPE_INFOS.values():
            for spec in info.inputs:
                self.assertIsInstance(spec.default, (LiteralDefault, BuiltinDefault))

    def test_lookup_miss_is_fatal(self):
        with self.assertRaises(RegistryMissError):
            lookup("NotAKind")

    def test_main_texture_uv_is_builtin(self):
        spec = lookup(NodeKind.MAIN_TEXTURE_2D).input_spec("uv")
        self.assertTrue(spec.is_builtin)
        self.assertEqual(spec.default.expression, "vso.uv")
        # A fresh slot still stores the type's zero
        self.assertEqual(spec.default_value(), (0.0, 0.0, 0.0))

    def test_literal_defaults(self):
        self.assertEqual(lookup(NodeKind.SUBTRACT_SCALAR).input_spec("v1").default_value(), 1.0)
        self.assertEqual(lookup(NodeKind.SUBTRACT_VECTOR).input_spec("v1").default_value(), (1.0, 1.0, 1.0))
        self.assertEqual(lookup(NodeKind.FMA_SCALAR).input_spec("b").default_value(), 0.5)
        self.assertEqual(lookup(NodeKind.MAIN).input_spec("alpha").default_value(), 1.0)
        self.assertEqual(lookup(NodeKind.FRESNEL).input_spec("exp").default_value(), 1.0)

    def test_main_is_only_terminal(self):
        terminals = [k for k, info in NODE_TYPE_INFOS.items() if info.is_terminal()]
        self.assertEqual(terminals, [NodeKind.MAIN])

    def test_main_socket_roles(self):
        info = lookup(NodeKind.MAIN)
        self.assertEqual(info.input_spec("color").role, SocketRole.PIXEL)
        self.assertEqual(info.input_spec("alpha").role, SocketRole.PIXEL)
        self.assertEqual(info.input_spec("offset").role, SocketRole.VERTEX)
        self.assertTrue(info.has_role(SocketRole.VERTEX))
        self.assertFalse(lookup(NodeKind.ADD_SCALAR).has_role(SocketRole.VERTEX))

    def test_texture_nodes_have_alpha_output(self):
        for kind in (NodeKind.MAIN_TEXTURE_2D, NodeKind.MATCAP_TEXTURE_2D,
                     NodeKind.TOON_TEXTURE_2D, NodeKind.CUSTOM_TEXTURE_2D):
            info = lookup(kind)
            self.assertEqual(info.output_names(), ("out", "alpha"))
            self.assertEqual(info.outputs[1].type, DataType.SCALAR)

    def test_categories(self):
        self.assertEqual(tuple(categories()[:len(CATEGORY_ORDER)]), CATEGORY_ORDER)
        self.assertIn(NodeKind.MAKE_SCALAR, kinds_in_category("Scalar"))
        self.assertIn(NodeKind.MAIN, kinds_in_category("Main"))
        listed = {k for c in categories() for k in kinds_in_category(c)}
        self.assertEqual(listed, set(NodeKind))

    def test_socket_colors(self):
        self.assertEqual(get_data_type_color(DataType.SCALAR), (38, 109, 211))
        self.assertEqual(get_data_type_color(DataType.VEC3), (238, 207, 109))


class TestEmitterRegistry(unittest.TestCase):
    def test_every_kind_has_trailing_rule(self):
        self.assertEqual(set(TRAILING_ARGS), set(NodeKind))
        for kind in NodeKind:
            self.assertTrue(callable(get_trailing_args(kind)))

    def test_every_label_has_helper(self):
        for info in NODE_TYPE_INFOS.values():
            self.assertIn(info.label, HLSL_FUNCTIONS)
        self.assertIn("MainVertex", HLSL_FUNCTIONS)

    def test_helper_dependencies_come_first(self):
        order = resolve_dependencies(["Fresenl"])
        self.assertEqual(order, ["ViewDirection", "Fresenl"])


class TestDataType(unittest.TestCase):
    def test_coerce_scalar(self):
        self.assertEqual(DataType.SCALAR.coerce_value(3), 3.0)
        with self.assertRaises(ValueTypeError):
            DataType.SCALAR.coerce_value("3")
        with self.assertRaises(ValueTypeError):
            DataType.SCALAR.coerce_value(True)

    def test_coerce_vector(self):
        self.assertEqual(DataType.VEC3.coerce_value([1, 2, 3]), (1.0, 2.0, 3.0))
        with self.assertRaises(ValueTypeError):
            DataType.VEC3.coerce_value((1, 2))
        with self.assertRaises(ValueTypeError):
            DataType.VEC3.coerce_value(1.0)

    def test_coerce_rejects_out_of_range(self):
        for value in (10 ** 400, 1e39, -1e39, float("inf"), float("nan")):
            with self.assertRaises(ValueTypeError):
                DataType.SCALAR.coerce_value(value)
        with self.assertRaises(ValueTypeError):
            DataType.VEC3.coerce_value((0.0, 1e39, 0.0))
        with self.assertRaises(ValueTypeError):
            DataType.VEC3.coerce_value((0, 10 ** 400, 0))

    def test_coerce_accepts_float32_extremes(self):
        self.assertEqual(DataType.SCALAR.coerce_value(3.4e38), 3.4e38)
        self.assertEqual(DataType.SCALAR.coerce_value(-1e-45), -1e-45)

    def test_type_helpers(self):
        self.assertTrue(DataType.SCALAR.is_scalar())
        self.assertTrue(DataType.VEC3.is_vector())
        self.assertEqual(DataType.VEC3.component_count(), 3)
        self.assertEqual(DataType.SCALAR.component_count(), 1)

    def test_hlsl_types(self):
        self.assertEqual(DataType.SCALAR.hlsl_type(), "float")
        self.assertEqual(DataType.VEC3.hlsl_type(), "float3")


if __name__ == '__main__':
    unittest.main()
