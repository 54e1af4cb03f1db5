"""Structured domain-metadata records carried by full-tree nodes.

Hierarchy objects may carry engineering metadata next to ``name``,
``children`` and ``value``:

- ``id``                  -> DomainMetadata.id
- ``requirements``        -> tuple of Requirement
- ``relatedSystemBlocks`` -> tuple of SystemBlock
- ``metadata``            -> NodeMetadata (owner / version / lastUpdated)

Every other key is kept verbatim in ``DomainMetadata.extra``.  The
navigation engine never reads these records; they are looked up by absolute
path for the detail panel only.

``parse_domain_metadata`` validates the shapes once, at load time, and
raises HierarchyValidationError on anything it cannot interpret.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from tree_explorer.exceptions import HierarchyValidationError

__all__ = [
    "RESERVED_KEYS",
    "DomainMetadata",
    "NodeMetadata",
    "Requirement",
    "SystemBlock",
    "Verification",
    "parse_domain_metadata",
]

# Keys consumed by TreeBuilder or by the structured records below.
RESERVED_KEYS: frozenset[str] = frozenset(
    {"name", "children", "value", "id", "requirements", "relatedSystemBlocks", "metadata"}
)


@dataclass(frozen=True, slots=True)
class Verification:
    method: str | None = None
    status: str | None = None


@dataclass(frozen=True, slots=True)
class Requirement:
    """A requirement linked to a hierarchy node."""

    req_id: str | None = None
    title: str | None = None
    text: str | None = None
    priority: str | None = None
    status: str | None = None
    source: str | None = None
    acceptance_criteria: str | None = None
    verification: Verification | None = None


@dataclass(frozen=True, slots=True)
class SystemBlock:
    """A system block related to a hierarchy node."""

    block_id: str | None = None
    name: str | None = None
    type: str | None = None
    layer: str | None = None
    interface_refs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NodeMetadata:
    owner: str | None = None
    version: str | None = None
    last_updated: str | None = None


def _empty_extra() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class DomainMetadata:
    """All domain fields of a full-tree node, validated at load time.

    Attributes:
        id: Optional external identifier of the node.
        requirements: Linked requirements, in input order.
        related_system_blocks: Related system blocks, in input order.
        metadata: Ownership/versioning record, or None when absent.
        extra: Read-only view of every unrecognised key of the input object.
    """

    id: str | None = None
    requirements: tuple[Requirement, ...] = ()
    related_system_blocks: tuple[SystemBlock, ...] = ()
    metadata: NodeMetadata | None = None
    extra: Mapping[str, Any] = field(default_factory=_empty_extra)

    @property
    def is_empty(self) -> bool:
        return (
            self.id is None
            and not self.requirements
            and not self.related_system_blocks
            and self.metadata is None
            and not self.extra
        )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _text(raw: Mapping[str, Any], key: str, path: tuple[int, ...] | None) -> str | None:
    """Read an optional scalar text field; numbers are stringified."""
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    msg = f"{key!r} must be a string or number, got {type(value).__name__}"
    raise HierarchyValidationError(msg, path=path)


def _records(raw: Mapping[str, Any], key: str, path: tuple[int, ...] | None) -> list[Mapping[str, Any]]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"{key!r} must be a list when provided, got {type(value).__name__}"
        raise HierarchyValidationError(msg, path=path)
    for idx, item in enumerate(value):
        if not isinstance(item, Mapping):
            msg = f"{key}[{idx}] must be an object, got {type(item).__name__}"
            raise HierarchyValidationError(msg, path=path)
    return value


def _parse_requirement(raw: Mapping[str, Any], path: tuple[int, ...] | None) -> Requirement:
    verification = None
    raw_verification = raw.get("verification")
    if raw_verification is not None:
        if not isinstance(raw_verification, Mapping):
            msg = "'verification' must be an object when provided"
            raise HierarchyValidationError(msg, path=path)
        verification = Verification(
            method=_text(raw_verification, "method", path),
            status=_text(raw_verification, "status", path),
        )
    return Requirement(
        req_id=_text(raw, "reqId", path),
        title=_text(raw, "title", path),
        text=_text(raw, "text", path),
        priority=_text(raw, "priority", path),
        status=_text(raw, "status", path),
        source=_text(raw, "source", path),
        acceptance_criteria=_text(raw, "acceptanceCriteria", path),
        verification=verification,
    )


def _parse_block(raw: Mapping[str, Any], path: tuple[int, ...] | None) -> SystemBlock:
    refs = raw.get("interfaceRefs")
    if refs is None:
        interface_refs: tuple[str, ...] = ()
    elif isinstance(refs, list) and all(isinstance(r, (str, int)) for r in refs):
        interface_refs = tuple(str(r) for r in refs)
    else:
        msg = "'interfaceRefs' must be a list of strings when provided"
        raise HierarchyValidationError(msg, path=path)
    return SystemBlock(
        block_id=_text(raw, "blockId", path),
        name=_text(raw, "name", path),
        type=_text(raw, "type", path),
        layer=_text(raw, "layer", path),
        interface_refs=interface_refs,
    )


def parse_domain_metadata(raw: Mapping[str, Any], path: tuple[int, ...] | None = None) -> DomainMetadata:
    """Extract and validate the domain fields of one input object.

    Args:
        raw:  The input object for a single hierarchy node.
        path: Index path of the node, used in error messages.

    Returns:
        A DomainMetadata record (all fields empty when the node carries none).

    Raises:
        HierarchyValidationError: If a domain field has the wrong shape.
    """
    meta = None
    raw_meta = raw.get("metadata")
    if raw_meta is not None:
        if not isinstance(raw_meta, Mapping):
            msg = f"'metadata' must be an object when provided, got {type(raw_meta).__name__}"
            raise HierarchyValidationError(msg, path=path)
        meta = NodeMetadata(
            owner=_text(raw_meta, "owner", path),
            version=_text(raw_meta, "version", path),
            last_updated=_text(raw_meta, "lastUpdated", path),
        )

    extra = {k: v for k, v in raw.items() if k not in RESERVED_KEYS}

    return DomainMetadata(
        id=_text(raw, "id", path),
        requirements=tuple(
            _parse_requirement(r, path) for r in _records(raw, "requirements", path)
        ),
        related_system_blocks=tuple(
            _parse_block(b, path) for b in _records(raw, "relatedSystemBlocks", path)
        ),
        metadata=meta,
        extra=MappingProxyType(extra),
    )
