"""Unit tests for the component link graph."""

import pytest
from pydantic import ValidationError

from laylder.links import (
    ComponentLink,
    LinkErrorCode,
    are_components_linked,
    calculate_connected_groups,
    calculate_link_groups,
    get_component_group,
    get_connected_group,
    validate_component_links,
)


class TestComponentLink:
    """Tests for the ComponentLink model."""

    @pytest.mark.unit
    def test_coerce_accepts_pairs_and_mappings(self):
        """Pairs, mappings and models all coerce to the same link."""
        expected = ComponentLink(source="c1", target="c2")
        assert ComponentLink.coerce(("c1", "c2")) == expected
        assert ComponentLink.coerce({"source": "c1", "target": "c2"}) == expected
        assert ComponentLink.coerce(expected) is expected

    @pytest.mark.unit
    def test_key_ignores_direction(self):
        """(a, b) and (b, a) share a key."""
        forward = ComponentLink(source="a", target="b")
        backward = ComponentLink(source="b", target="a")
        assert forward.key() == backward.key()

    @pytest.mark.unit
    def test_missing_target_rejected(self):
        """A mapping without a target is a shape error."""
        with pytest.raises(ValidationError):
            ComponentLink.coerce({"source": "c1"})


class TestCalculateLinkGroups:
    """Tests for link graph connected groups."""

    @pytest.mark.unit
    def test_empty_links(self):
        """No links means no groups."""
        assert calculate_link_groups([]) == []

    @pytest.mark.unit
    def test_two_separate_groups(self):
        """Chains form one group each, in first-seen order."""
        groups = calculate_link_groups([("c1", "c2"), ("c2", "c3"), ("c4", "c5")])
        assert groups == [["c1", "c2", "c3"], ["c4", "c5"]]
        assert [len(g) for g in groups] == [3, 2]

    @pytest.mark.unit
    def test_cycle_terminates(self):
        """A cycle yields a single group without looping forever."""
        groups = calculate_link_groups([("a", "b"), ("b", "c"), ("c", "a")])
        assert len(groups) == 1
        assert sorted(groups[0]) == ["a", "b", "c"]

    @pytest.mark.unit
    def test_long_chain_does_not_recurse(self):
        """Chains longer than the recursion limit are handled."""
        links = [(f"c{i}", f"c{i + 1}") for i in range(5000)]
        groups = calculate_link_groups(links)
        assert len(groups) == 1
        assert len(groups[0]) == 5001

    @pytest.mark.unit
    def test_self_loop_forms_singleton_group(self):
        """A self loop still mentions its component."""
        assert calculate_link_groups([("x", "x")]) == [["x"]]

    @pytest.mark.unit
    def test_members_in_first_seen_order(self):
        """Ids keep the order in which links first mention them."""
        groups = calculate_link_groups([("c3", "c2"), ("c4", "c5"), ("c1", "c2")])
        assert groups == [["c3", "c2", "c1"], ["c4", "c5"]]

    @pytest.mark.unit
    def test_accepts_mappings(self):
        """Wire-form link dictionaries are accepted."""
        groups = calculate_link_groups([{"source": "c1", "target": "c2"}])
        assert groups == [["c1", "c2"]]


class TestComponentGroupLookup:
    """Tests for get_component_group and are_components_linked."""

    LINKS = [("c1", "c2"), ("c2", "c3")]

    @pytest.mark.unit
    def test_linked_component_returns_group(self):
        """A linked component returns its whole group."""
        assert get_component_group("c3", self.LINKS) == ["c1", "c2", "c3"]

    @pytest.mark.unit
    def test_unlinked_component_is_singleton(self):
        """Non-strict lookup treats unlinked as linked only to itself."""
        assert get_component_group("c9", self.LINKS) == ["c9"]

    @pytest.mark.unit
    def test_unlinked_component_strict(self):
        """Strict lookup reports unlinked components as not found."""
        assert get_component_group("c9", self.LINKS, strict=True) is None

    @pytest.mark.unit
    def test_transitive_link(self):
        """Components linked through a third are linked."""
        assert are_components_linked("c1", "c3", self.LINKS) is True

    @pytest.mark.unit
    def test_not_linked(self):
        """Components in different groups are not linked."""
        links = self.LINKS + [("c4", "c5")]
        assert are_components_linked("c1", "c4", links) is False

    @pytest.mark.unit
    def test_unlinked_component_not_linked_to_itself(self):
        """a == b is linked only when a participates in some link."""
        assert are_components_linked("c9", "c9", self.LINKS) is False
        assert are_components_linked("c1", "c1", self.LINKS) is True


class TestValidateComponentLinks:
    """Tests for link validation."""

    @pytest.mark.unit
    def test_valid_links(self):
        """Links between known components are valid."""
        result = validate_component_links([("c1", "c2")], {"c1", "c2"})
        assert result.valid is True
        assert result.errors == []

    @pytest.mark.unit
    def test_self_loop(self):
        """(x, x) is a self loop and nothing else."""
        result = validate_component_links([("x", "x")], {"x"})
        assert result.valid is False
        assert result.codes() == ["SELF_LOOP"]

    @pytest.mark.unit
    def test_reverse_duplicate_reported_once(self):
        """(a, b) followed by (b, a) is exactly one duplicate."""
        result = validate_component_links([("a", "b"), ("b", "a")], {"a", "b"})
        assert result.codes() == ["DUPLICATE_LINK"]
        assert result.errors[0].index == 1

    @pytest.mark.unit
    def test_orphans(self):
        """Unknown source and target are both reported."""
        result = validate_component_links([("ghost", "phantom")], {"c1"})
        assert result.codes() == ["ORPHAN_SOURCE", "ORPHAN_TARGET"]
        assert all(error.index == 0 for error in result.errors)

    @pytest.mark.unit
    def test_each_repeat_reported(self):
        """Every repeat of an earlier edge is a duplicate."""
        links = [("a", "b"), ("a", "b"), ("b", "a")]
        result = validate_component_links(links, {"a", "b"})
        assert [e.index for e in result.errors] == [1, 2]
        assert {e.code for e in result.errors} == {LinkErrorCode.DUPLICATE_LINK}

    @pytest.mark.unit
    def test_error_str(self):
        """String form carries code and index."""
        result = validate_component_links([("x", "x")], {"x"})
        assert str(result.errors[0]).startswith("[SELF_LOOP] Link 0:")


class TestConnectedGroups:
    """Tests for union-find grouping of listed elements."""

    @pytest.mark.unit
    def test_unlinked_elements_stay_apart(self):
        """Without edges every element is its own group."""
        groups = calculate_connected_groups(["a", "b"], [])
        assert sorted(groups.values()) == [["a"], ["b"]]

    @pytest.mark.unit
    def test_union_is_transitive(self):
        """Chained edges merge into one group in first-seen order."""
        elements = ["a", "b", "c"]
        edges = [("a", "b"), ("b", "c")]
        groups = calculate_connected_groups(elements, edges)
        assert list(groups.values()) == [["a", "b", "c"]]
        assert get_connected_group("c", elements, edges) == ["a", "b", "c"]

    @pytest.mark.unit
    def test_edge_only_elements_are_added(self):
        """Elements named only by an edge join the grouping."""
        groups = calculate_connected_groups(["a"], [("a", "z")])
        assert list(groups.values()) == [["a", "z"]]

    @pytest.mark.unit
    def test_repeated_edges_keep_one_group(self):
        """Repeated and reversed edges keep a single group."""
        groups = calculate_connected_groups(["a", "b"], [("a", "b"), ("b", "a")])
        assert len(groups) == 1

    @pytest.mark.unit
    def test_unknown_element_is_singleton(self):
        """Looking up an unlisted element yields only itself."""
        assert get_connected_group("q", ["a", "b"], [("a", "b")]) == ["q"]

    @pytest.mark.unit
    def test_groups_keep_singletons(self):
        """calculate_connected_groups reports unlinked elements."""
        groups = calculate_connected_groups(
            ["c1", "c2", "c3"], [{"source": "c1", "target": "c2"}]
        )
        assert sorted(sorted(g) for g in groups.values()) == [["c1", "c2"], ["c3"]]

    @pytest.mark.unit
    def test_get_connected_group(self):
        """get_connected_group returns members of one group."""
        members = get_connected_group(
            "c3", ["c1", "c2", "c3"], [ComponentLink(source="c2", target="c3")]
        )
        assert sorted(members) == ["c2", "c3"]
