# tests/core_test/test_visualizer.py
"""
Tests for the Visualizer facade and the module-level shortcuts.
"""
import json

import pytest

from objviz import visualize, write_visualization, Visualizer, VisualizerConfig
from objviz.exceptions import EmitterNotFoundError, InvalidInputError, SinkError, TraversalLimitError
from tests.conftest import Box


class TestVisualize:

    def test_returns_dot_text(self, family):
        text = visualize(family, whitelist=["name"])
        lines = text.splitlines()
        assert lines[0].startswith("// created ")
        assert lines[0].endswith(" by objviz")
        assert lines[1] == "digraph Person {"
        assert lines[-1] == "}"
        assert "<1> name: Herbert" in text

    def test_options_override_config(self, chain):
        with pytest.raises(TraversalLimitError):
            visualize(chain(10), max_nodes=3)

    def test_config_and_options_combine(self):
        text = visualize(Box(a=1), config=VisualizerConfig(tool_name="probe"), rankdir="LR")
        assert " by probe" in text.splitlines()[0]
        assert "  rankdir=LR;" in text.splitlines()

    def test_json_emitter(self, ring):
        data = json.loads(visualize(ring, emitter="json"))
        assert data["graph"] == "Link"
        assert len(data["nodes"]) == 2

    def test_none_root(self):
        with pytest.raises(InvalidInputError):
            visualize(None)

    def test_calls_are_independent(self, family):
        assert visualize(family).splitlines()[1:] == visualize(family).splitlines()[1:]


class TestVisualizerFacade:

    def test_emitter_names(self, visualizer):
        assert {"dot", "json"} <= set(visualizer.get_emitter_names())

    def test_unknown_emitter(self, visualizer):
        with pytest.raises(EmitterNotFoundError, match="svg"):
            visualizer.get_emitter("svg")

    def test_default_emitter_from_config(self):
        viz = Visualizer(VisualizerConfig(default_emitter="json"))
        assert viz.emitter_name == "json"
        assert viz.get_emitter().file_extension == "json"

    def test_emitter_argument_wins(self):
        viz = Visualizer(VisualizerConfig(default_emitter="json"), emitter="dot")
        assert viz.emitter_name == "dot"

    def test_build_returns_document(self, visualizer, shared_ref):
        doc = visualizer.build(shared_ref)
        assert doc.root_type_name == "Box"
        assert doc.get_number_of_edges() == 2

    def test_create_session_is_fresh(self, visualizer, ring):
        assert visualizer.create_session(ring) is not visualizer.create_session(ring)

    def test_diagnostics_warning(self, visualizer, caplog):
        class Broken:
            @property
            def value(self):
                raise KeyError("gone")

        doc = visualizer.build(Broken())
        assert len(doc.diagnostics) == 1
        assert "1 member(s) could not be read" in caplog.text


class TestWriteVisualization:

    def test_default_file_name(self, tmp_path, family):
        path = write_visualization(family, ["name"], directory=tmp_path)
        assert path == tmp_path / "vis_Person.dot"
        assert path.read_text(encoding="utf-8").startswith("// created ")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["vis_Person.dot"]

    def test_explicit_path(self, tmp_path, ring):
        target = tmp_path / "nested" / "ring.gv"
        assert write_visualization(ring, path=target) == target
        assert "digraph Link {" in target.read_text(encoding="utf-8")

    def test_json_extension(self, tmp_path, ring):
        path = write_visualization(ring, directory=tmp_path, emitter="json")
        assert path.name == "vis_Link.json"

    def test_failed_traversal_writes_nothing(self, tmp_path, chain):
        with pytest.raises(TraversalLimitError):
            write_visualization(chain(10), directory=tmp_path, max_nodes=2)
        assert list(tmp_path.iterdir()) == []

    def test_none_root_writes_nothing(self, tmp_path):
        with pytest.raises(InvalidInputError):
            write_visualization(None, directory=tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_unwritable_directory(self, tmp_path, ring):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(SinkError):
            write_visualization(ring, directory=blocker)
        assert blocker.read_text() == "not a directory"
