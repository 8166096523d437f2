"""Projecting a finalized EmojiCatalog into the serializable Catalog model."""

from __future__ import annotations

from datetime import datetime, timezone

from ..catalog.builder import EmojiCatalog, Group
from ..catalog.subgroup import Constant, Subgroup
from ..core.models.catalog import (
    AccessorEntry,
    Catalog,
    CatalogMeta,
    Declaration,
    EmojiConstant,
    GroupConstant,
    SubgroupConstant,
)


def emoji_constant(emoji: Constant) -> EmojiConstant:
    declaration = emoji.declaration()
    return EmojiConstant(
        identifier=emoji.identifier,
        name=emoji.name,
        preview=emoji.graphemes(),
        declaration=Declaration(
            type=declaration.type,
            value=declaration.value,
            docs=list(declaration.docs),
        ),
        full_list_accessors=[
            AccessorEntry(
                const_accessor=e.const_accessor,
                accessor=e.accessor,
                grapheme=e.grapheme,
            )
            for e in emoji.full_emoji_list()
        ],
        default_list_accessors=[
            AccessorEntry(
                const_accessor=e.const_accessor,
                accessor=e.accessor,
                grapheme=e.grapheme,
            )
            for e in emoji.default_emoji_list()
        ],
    )


def subgroup_constant(sub: Subgroup) -> SubgroupConstant:
    return SubgroupConstant(
        identifier=sub.identifier,
        name=sub.name,
        preview=sub.preview(),
        emojis=[emoji_constant(emoji) for emoji in sub],
    )


def group_constant(group: Group) -> GroupConstant:
    return GroupConstant(
        identifier=group.identifier,
        name=group.name,
        preview=group.preview(),
        subgroups=[subgroup_constant(sub) for sub in group.subgroups.values()],
    )


def project_catalog(
    catalog: EmojiCatalog,
    source: str,
    generated_at: datetime | None = None,
) -> Catalog:
    """Build the Catalog model of a finalized catalogue.

    Args:
        catalog: Result of ``build_catalog``
        source: Where the feed came from
        generated_at: Timestamp to record (now, in UTC, when omitted)
    """
    return Catalog(
        meta=CatalogMeta(
            source=source,
            generated_at=generated_at or datetime.now(timezone.utc),
            lines=catalog.stats.lines,
            skipped=catalog.stats.skipped,
            malformed=len(catalog.stats.malformed),
        ),
        groups=[group_constant(group) for group in catalog.groups],
    )
