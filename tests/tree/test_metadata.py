"""Tests for domain-metadata parsing (requirements, system blocks, metadata)."""

from __future__ import annotations

from typing import Any

import pytest

from tree_explorer.exceptions import HierarchyValidationError
from tree_explorer.tree.builder import TreeBuilder
from tree_explorer.tree.metadata import (
    NodeMetadata,
    Requirement,
    SystemBlock,
    Verification,
    parse_domain_metadata,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def engineering_node() -> dict[str, Any]:
    return {
        "name": "Brake Controller",
        "id": "SYS-042",
        "value": 12,
        "requirements": [
            {
                "reqId": "REQ-7",
                "title": "Stop distance",
                "text": "The vehicle shall stop within 40 m from 100 km/h.",
                "priority": "high",
                "status": "approved",
                "source": "customer",
                "acceptanceCriteria": "Track test, dry asphalt",
                "verification": {"method": "test", "status": "passed"},
            },
            {"reqId": "REQ-8", "title": "Fail safe"},
        ],
        "relatedSystemBlocks": [
            {
                "blockId": "BLK-1",
                "name": "ECU",
                "type": "hardware",
                "layer": "physical",
                "interfaceRefs": ["CAN-1", "PWR-2"],
            },
        ],
        "metadata": {"owner": "chassis-team", "version": 3, "lastUpdated": "2024-05-01"},
        "color": "red",
    }


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseDomainMetadata:
    """Structured records are extracted and validated."""

    def test_empty_node(self) -> None:
        domain = parse_domain_metadata({"name": "x"})
        assert domain.is_empty
        assert domain.id is None
        assert domain.requirements == ()
        assert domain.related_system_blocks == ()
        assert domain.metadata is None
        assert dict(domain.extra) == {}

    def test_id(self, engineering_node: dict[str, Any]) -> None:
        assert parse_domain_metadata(engineering_node).id == "SYS-042"

    def test_requirements(self, engineering_node: dict[str, Any]) -> None:
        reqs = parse_domain_metadata(engineering_node).requirements
        assert len(reqs) == 2
        assert reqs[0] == Requirement(
            req_id="REQ-7",
            title="Stop distance",
            text="The vehicle shall stop within 40 m from 100 km/h.",
            priority="high",
            status="approved",
            source="customer",
            acceptance_criteria="Track test, dry asphalt",
            verification=Verification(method="test", status="passed"),
        )
        assert reqs[1].req_id == "REQ-8"
        assert reqs[1].verification is None

    def test_system_blocks(self, engineering_node: dict[str, Any]) -> None:
        blocks = parse_domain_metadata(engineering_node).related_system_blocks
        assert blocks == (
            SystemBlock(
                block_id="BLK-1",
                name="ECU",
                type="hardware",
                layer="physical",
                interface_refs=("CAN-1", "PWR-2"),
            ),
        )

    def test_metadata_numbers_are_stringified(self, engineering_node: dict[str, Any]) -> None:
        meta = parse_domain_metadata(engineering_node).metadata
        assert meta == NodeMetadata(owner="chassis-team", version="3", last_updated="2024-05-01")

    def test_bool_text_field(self) -> None:
        domain = parse_domain_metadata({"name": "x", "requirements": [{"status": True}]})
        assert domain.requirements[0].status == "true"

    def test_unknown_keys_go_to_extra(self, engineering_node: dict[str, Any]) -> None:
        domain = parse_domain_metadata(engineering_node)
        assert dict(domain.extra) == {"color": "red"}
        assert not domain.is_empty

    def test_extra_is_read_only(self, engineering_node: dict[str, Any]) -> None:
        extra = parse_domain_metadata(engineering_node).extra
        with pytest.raises(TypeError):
            extra["color"] = "blue"  # type: ignore[index]


class TestParseDomainMetadataErrors:
    """Malformed domain fields raise HierarchyValidationError."""

    @pytest.mark.parametrize(
        "raw",
        [
            {"name": "x", "requirements": {"reqId": "R"}},
            {"name": "x", "requirements": ["R-1"]},
            {"name": "x", "relatedSystemBlocks": "BLK"},
            {"name": "x", "relatedSystemBlocks": [{"interfaceRefs": "CAN-1"}]},
            {"name": "x", "requirements": [{"verification": "passed"}]},
            {"name": "x", "metadata": ["owner"]},
            {"name": "x", "id": ["a", "b"]},
            {"name": "x", "metadata": {"owner": {"team": "a"}}},
        ],
    )
    def test_malformed_fields_rejected(self, raw: dict[str, Any]) -> None:
        with pytest.raises(HierarchyValidationError):
            parse_domain_metadata(raw)

    def test_path_is_reported(self) -> None:
        with pytest.raises(HierarchyValidationError) as exc_info:
            parse_domain_metadata({"name": "x", "metadata": 5}, path=(2, 1))
        assert exc_info.value.path == (2, 1)


class TestBuilderIntegration:
    """TreeBuilder attaches parsed metadata to each node."""

    def test_domain_attached_to_child(self, engineering_node: dict[str, Any]) -> None:
        tree = TreeBuilder().build({"name": "vehicle", "children": [engineering_node]})
        child = tree.children[0]
        assert child.domain.id == "SYS-042"
        assert child.value == 12
        assert child.domain.metadata is not None
        assert child.domain.metadata.owner == "chassis-team"
        assert tree.domain.is_empty
