"""Unit tests for graph snapshot loading and validation."""

import json

import pytest
from entity_graph_search.data.loader import (
    GraphDataError,
    load_graph_data,
    load_sample_graph,
    parse_graph_data,
    validate_graph_data,
)
from entity_graph_search.models.graph import Edge, GraphData, Node


class TestGraphLoader:
    """Test cases for the snapshot loader."""

    @pytest.fixture
    def payload(self):
        """A valid decoded graph payload."""
        return {
            "nodes": [
                {
                    "id": "root_0",
                    "name": "Acme Corp",
                    "description": "Holding company",
                    "attributes": {"employees": 120, "public": False, "industry": "retail"}
                },
                {
                    "id": "level1_0",
                    "name": "Alice Smith",
                    "description": "Engineer at Acme",
                    "parent_id": "root_0",
                    "level": 1
                }
            ],
            "edges": [
                {"id": "root_0-level1_0", "source": "root_0", "target": "level1_0"}
            ]
        }

    def test_load_sample_graph(self):
        """Test the bundled sample graph loads and validates."""
        graph = load_sample_graph()

        assert len(graph.nodes) == 8
        assert len(graph.edges) == 8
        assert graph.nodes[0].name == "Shanghai Trading Co."

    def test_parse_graph_data(self, payload):
        """Test parsing a full payload."""
        graph = parse_graph_data(payload)

        assert [node.id for node in graph.nodes] == ["root_0", "level1_0"]
        assert graph.nodes[1].parent_id == "root_0"
        assert graph.edges[0].type == "single"

    def test_attribute_types_preserved(self, payload):
        """Test attribute values keep their JSON types."""
        attributes = parse_graph_data(payload).nodes[0].attributes

        assert attributes["employees"] == 120
        assert isinstance(attributes["employees"], int)
        assert attributes["public"] is False
        assert attributes["industry"] == "retail"

    def test_null_and_container_attributes_accepted(self):
        """Test null, list and object attribute values do not reject the snapshot."""
        graph = parse_graph_data([
            {
                "id": "n1",
                "name": "Office",
                "description": "Regional",
                "attributes": {"manager": None, "tags": ["a", "b"], "geo": {"lat": 30.27}, "city": "Hangzhou"}
            }
        ])

        node = graph.nodes[0]
        assert node.attributes["manager"] is None
        assert node.attributes["tags"] == ["a", "b"]
        assert node.attributes["geo"] == {"lat": 30.27}
        assert node.string_attributes() == ["Hangzhou"]

    def test_parse_bare_node_list(self, payload):
        """Test a bare list is read as nodes without edges."""
        graph = parse_graph_data(payload["nodes"])

        assert len(graph.nodes) == 2
        assert graph.edges == []

    def test_schema_error(self):
        """Test schema violations raise GraphDataError."""
        with pytest.raises(GraphDataError) as exc_info:
            parse_graph_data({"nodes": [{"id": "n1"}]})

        assert exc_info.value.problems

    def test_unknown_edge_endpoint(self, payload):
        """Test edges must reference existing nodes."""
        payload["edges"].append({"id": "bad", "source": "root_0", "target": "ghost"})

        with pytest.raises(GraphDataError, match="edge 'bad'"):
            parse_graph_data(payload)

    def test_duplicate_node_id(self, payload):
        """Test node ids must be unique."""
        payload["nodes"].append({"id": "root_0", "name": "Again", "description": "Duplicate"})

        with pytest.raises(GraphDataError, match="duplicate node id 'root_0'"):
            parse_graph_data(payload)

    def test_missing_description(self):
        """Test nodes need a description."""
        graph = GraphData(nodes=[Node(id="n1", name="Alice")])

        with pytest.raises(GraphDataError):
            validate_graph_data(graph)

    def test_validate_valid_graph(self):
        """Test a consistent graph passes."""
        graph = GraphData(
            nodes=[
                Node(id="a", name="A", description="first"),
                Node(id="b", name="B", description="second"),
            ],
            edges=[Edge(id="a-b", source="a", target="b", type="weighted", weight=0.4)]
        )

        validate_graph_data(graph)

    def test_graph_data_error_is_value_error(self):
        """Test callers can catch loader errors as ValueError."""
        with pytest.raises(ValueError):
            parse_graph_data({"nodes": "not a list"})

    def test_load_graph_data(self, tmp_path, payload):
        """Test loading from a JSON file."""
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")

        graph = load_graph_data(str(path))

        assert len(graph.nodes) == 2

    def test_load_missing_file(self, tmp_path):
        """Test a missing file raises GraphDataError."""
        with pytest.raises(GraphDataError, match="Cannot read graph data"):
            load_graph_data(str(tmp_path / "missing.json"))

    def test_load_invalid_json(self, tmp_path):
        """Test malformed JSON raises GraphDataError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(GraphDataError):
            load_graph_data(str(path))
