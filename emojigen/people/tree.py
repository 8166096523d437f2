"""Qualified accessor trees and their two projections.

A tree is either a ``QualifiedLeaf`` holding one concrete PersonKind, or a
``QualifiedNode`` tagged with a dimension type name holding an optional
default branch plus ordered ``(const accessor, accessor, subtree)`` entries.

- Constructor projection (``declaration``): type, constructor expression and
  documentation of a constant.
- Enumeration projection (``accessors``): every accessor path reaching a leaf.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, NamedTuple, Union

from ..core.errors import InconsistentTreeError
from .kinds import PersonKind


class Declaration(NamedTuple):
    type: str
    value: str
    docs: tuple[str, ...]


class AccessorEntry(NamedTuple):
    const_accessor: str
    accessor: str
    kind: PersonKind


@dataclass(frozen=True)
class QualifiedLeaf:
    kind: PersonKind

    def declaration(self, accessor: str, variants: Mapping) -> Declaration:
        variant = variants.get(self.kind)
        if variant is None:
            raise InconsistentTreeError(
                f"Leaf {self.kind!r} at {accessor} has no variant"
            )
        version = variant.since.source() if variant.since else "None"
        value = f"Emoji({variant.name!r}, {version}, {variant.grapheme!r})"
        return Declaration("Emoji", value, (f"{accessor}: {variant.grapheme}",))

    def accessors(self, const_accessor: str, accessor: str) -> list[AccessorEntry]:
        return [AccessorEntry(const_accessor, accessor, self.kind)]

    def kinds(self) -> list[PersonKind]:
        return [self.kind]


@dataclass(frozen=True)
class QualifiedNode:
    type_name: str
    default: QualifiedTree | None
    subs: tuple[tuple[str, str, QualifiedTree], ...]

    def declaration(self, accessor: str, variants: Mapping) -> Declaration:
        container = "With" if self.default is not None else "WithNoDef"
        branches: list[Declaration] = []
        if self.default is not None:
            branches.append(self.default.declaration(accessor, variants))
        for _, pub, subtree in self.subs:
            branches.append(subtree.declaration(f"{accessor}.{pub}", variants))
        if not branches:
            raise InconsistentTreeError(f"Node {self.type_name} at {accessor} is empty")

        inner = branches[0].type
        for branch in branches[1:]:
            if branch.type != inner:
                raise InconsistentTreeError(
                    f"Mixed subtree types under {accessor}: {inner} and {branch.type}"
                )

        docs = tuple(line for branch in branches for line in branch.docs)
        if self.default is not None:
            default, rest = branches[0], branches[1:]
            entries = ", ".join(b.value for b in rest)
            value = f"{container}({default.value}, [{entries}])"
        else:
            entries = ", ".join(b.value for b in branches)
            value = f"{container}([{entries}])"
        return Declaration(f"{container}[{self.type_name}, {inner}]", value, docs)

    def accessors(self, const_accessor: str, accessor: str) -> list[AccessorEntry]:
        result: list[AccessorEntry] = []
        if self.default is not None:
            result.extend(
                self.default.accessors(f"{const_accessor}.default", accessor)
            )
        for const, pub, subtree in self.subs:
            result.extend(
                subtree.accessors(f"{const_accessor}.{const}", f"{accessor}.{pub}")
            )
        return result

    def kinds(self) -> list[PersonKind]:
        found = [] if self.default is None else self.default.kinds()
        for _, _, subtree in self.subs:
            found.extend(subtree.kinds())
        return found


QualifiedTree = Union[QualifiedLeaf, QualifiedNode]
