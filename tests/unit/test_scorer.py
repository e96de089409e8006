"""Unit tests for the node scorer."""

from datetime import date

import pytest
from entity_graph_search.core.scorer import FIELD_WEIGHTS, NodeScorer, terms_overlap
from entity_graph_search.models.graph import Node


class TestNodeScorer:
    """Test cases for the NodeScorer class."""

    @pytest.fixture
    def scorer(self):
        """Create a scorer instance for testing."""
        return NodeScorer()

    @pytest.fixture
    def alice(self):
        return Node(id="n1", name="Alice Smith", description="Engineer at Acme")

    @pytest.fixture
    def office(self):
        return Node(id="o1", name="Office", description="Regional", attributes={"city": "Hangzhou"})

    def test_weights(self):
        """Test the fixed weight table."""
        assert FIELD_WEIGHTS["name"] == (10.0, 5.0)
        assert FIELD_WEIGHTS["description"] == (3.0, 1.0)
        assert FIELD_WEIGHTS["attribute"] == (2.0, 0.5)

    def test_terms_overlap(self):
        """Test the symmetric contains test."""
        assert terms_overlap("ali", "alice")
        assert terms_overlap("company", "co")
        assert terms_overlap("steel", "steel")
        assert not terms_overlap("bob", "alice")

    def test_exact_name_match(self, scorer, alice):
        """Test an exact name term scores 10."""
        assert scorer.score(alice, "alice") == 10

    def test_partial_name_match(self, scorer, alice):
        """Test a partial name term scores 5."""
        assert scorer.score(alice, "ali") == 5

    def test_description_matches(self, scorer):
        """Test description exact and partial weights."""
        node = Node(id="n2", name="Bob Jones", description="Manager")

        assert scorer.score(node, "manager") == 3
        assert scorer.score(node, "manage") == 1

    def test_attribute_matches(self, scorer, office):
        """Test attribute exact and partial weights."""
        assert scorer.score(office, "hangzhou") == 2
        assert scorer.score(office, "hang") == 0.5

    def test_field_contained_in_query(self, scorer):
        """Test a field term contained in the query counts as partial."""
        node = Node(id="c1", name="Acme Co", description="Widgets")

        assert scorer.score(node, "company") == 5

    def test_fields_are_summed(self, scorer):
        """Test matches across field groups add up."""
        node = Node(
            id="p1",
            name="Steel Lamp",
            description="Steel desk lamp",
            attributes={"material": "Steel"}
        )

        assert scorer.score(node, "steel") == 15

    def test_repeated_terms_are_not_capped(self, scorer):
        """Test every overlapping pair contributes."""
        repeated_name = Node(id="s1", name="Steel Steel")
        single_name = Node(id="s2", name="Steel")

        assert scorer.score(repeated_name, "steel") == 20
        assert scorer.score(single_name, "steel steel") == 20

    def test_query_term_matching_several_field_terms(self, scorer):
        """Test one query term can match several field terms."""
        node = Node(id="s3", name="Shanghai Shang")

        assert scorer.score(node, "shang") == 15

    def test_multiple_query_terms(self, scorer, alice):
        """Test scores of several query terms are summed."""
        assert scorer.score(alice, "alice acme") == 13

    def test_non_string_attributes_ignored(self, scorer):
        """Test numbers, booleans and dates never score."""
        node = Node(
            id="n1",
            name="Alice",
            attributes={"salary": 42000, "active": True, "birth_date": date(1990, 5, 1)}
        )

        assert scorer.score(node, "42000") == 0
        assert scorer.score(node, "true") == 0
        assert scorer.score(node, "1990") == 0

    def test_cjk_substring(self, scorer):
        """Test CJK text matches by substring."""
        node = Node(id="c1", name="上海贸易有限公司", description="产品经理")

        assert scorer.score(node, "上海") == 5
        assert scorer.score(node, "产品经理") == 3

    def test_no_match(self, scorer, alice):
        """Test unrelated queries score 0."""
        assert scorer.score(alice, "xyz123") == 0

    @pytest.mark.parametrize("query", ["", "   ", "!!!"])
    def test_empty_query(self, scorer, alice, query):
        """Test queries without terms score 0."""
        assert scorer.score(alice, query) == 0

    def test_score_terms(self, scorer, alice):
        """Test scoring pre-tokenized terms."""
        assert scorer.score_terms(alice, ["alice"]) == scorer.score(alice, "Alice!")
        assert scorer.score_terms(alice, []) == 0
