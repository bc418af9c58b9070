"""
Tests for the command line entry point.
"""

import pytest

from shader_graph import persistence
from shader_graph.cli import main
from shader_graph.codegen.assembler import build_effect
from shader_graph.codegen.hlsl import generate_code
from shader_graph.logger import get_logger


@pytest.fixture(autouse=True)
def reset_logger():
    # main() binds a handler to the captured stdout of the running test
    yield
    get_logger().handlers.clear()


@pytest.fixture
def saved_chain(tmp_path, scalar_chain):
    graph, make, add = scalar_chain
    path = tmp_path / "chain.json"
    persistence.save_graph(str(path), graph, active_node=add.id)
    return path, graph, add


class TestBuild:
    def test_build_to_file(self, tmp_path, saved_chain):
        path, graph, add = saved_chain
        out = tmp_path / "chain.fx"
        assert main(["build", str(path), "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8") == build_effect(generate_code(graph, add.id))

    def test_build_to_stdout(self, capsys, saved_chain):
        path, _, _ = saved_chain
        assert main(["build", str(path)]) == 0
        assert "float _1_AddScalar_o0 = AddScalar(_0_MakeScalar_o0, 3);" in capsys.readouterr().out

    def test_explicit_root(self, capsys, saved_chain):
        path, _, _ = saved_chain
        assert main(["build", str(path), "--root", "0"]) == 0
        out = capsys.readouterr().out
        assert "return float4(_0_MakeScalar_o0, _0_MakeScalar_o0, _0_MakeScalar_o0, 1.0);" in out

    def test_missing_active_node(self, tmp_path, scalar_chain):
        graph, _, _ = scalar_chain
        path = tmp_path / "inactive.json"
        persistence.save_graph(str(path), graph)
        assert main(["build", str(path)]) == 1

    def test_missing_file(self, tmp_path):
        assert main(["build", str(tmp_path / "nope.json")]) == 1

    def test_out_of_range_value(self, tmp_path):
        path = tmp_path / "huge.json"
        path.write_text('{"version": 1, "active_node": 0, "nodes": [{"id": 0, "kind": "MakeScalar", "values": {"value": 1'
                        + "0" * 400 + "}}]}", encoding="utf-8")
        assert main(["build", str(path)]) == 1

    def test_unknown_root(self, saved_chain):
        path, _, _ = saved_chain
        assert main(["build", str(path), "--root", "77"]) == 1


class TestKinds:
    def test_lists_registry(self, capsys):
        assert main(["kinds"]) == 0
        out = capsys.readouterr().out
        assert "Scalar\n" in out
        assert "  AddScalar(scalar v1, scalar v2) -> (scalar out)" in out
        assert "  MainTexure2D(vec3 uv) -> (vec3 out, scalar alpha)" in out
        assert "  Main(vec3 color, scalar alpha, vec3 offset) -> ()" in out
