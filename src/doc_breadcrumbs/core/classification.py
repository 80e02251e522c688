"""
Kind classification table driving the extractor's recursion policy.

Each ``NodeKind`` can be a *container* (its children mix documentable
members with incidental syntax), a *documentable member* (may carry its own
comment and path segment when met directly under a container), both, or
neither. *Callable* members additionally have their parameters re-entered
one segment below the member itself.
"""

from dataclasses import dataclass, replace
from typing import Self

from doc_breadcrumbs.core.models import NodeKind

DEFAULT_CONTAINER_KINDS = frozenset({
    NodeKind.TYPE_LITERAL,
    NodeKind.INTERFACE,
    NodeKind.TYPE_ALIAS,
    NodeKind.OBJECT_LITERAL,
    NodeKind.CLASS,
    NodeKind.METHOD,
    NodeKind.CONSTRUCTOR,
    NodeKind.ENUM,
})

DEFAULT_MEMBER_KINDS = frozenset({
    NodeKind.PROPERTY,
    NodeKind.METHOD,
    NodeKind.CONSTRUCTOR,
    NodeKind.ACCESSOR,
    NodeKind.ENUM_MEMBER,
    NodeKind.PARAMETER,
})

DEFAULT_CALLABLE_KINDS = frozenset({
    NodeKind.METHOD,
    NodeKind.CONSTRUCTOR,
})


@dataclass(frozen=True, slots=True)
class KindClassification:
    """Lookup table mapping node kinds to their traversal roles."""

    container_kinds: frozenset[NodeKind] = DEFAULT_CONTAINER_KINDS
    member_kinds: frozenset[NodeKind] = DEFAULT_MEMBER_KINDS
    callable_kinds: frozenset[NodeKind] = DEFAULT_CALLABLE_KINDS

    def __post_init__(self) -> None:
        stray = self.callable_kinds - self.member_kinds
        if stray:
            names = sorted(kind.value for kind in stray)
            raise ValueError(f"callable kinds must also be member kinds: {names}")

    def is_container(self, kind: NodeKind) -> bool:
        return kind in self.container_kinds

    def is_member(self, kind: NodeKind) -> bool:
        return kind in self.member_kinds

    def is_callable(self, kind: NodeKind) -> bool:
        return kind in self.callable_kinds

    def with_container_kinds(self, *kinds: NodeKind) -> Self:
        """Return a copy that also treats ``kinds`` as containers."""
        return replace(self, container_kinds=self.container_kinds | frozenset(kinds))

    def with_member_kinds(self, *kinds: NodeKind) -> Self:
        """Return a copy that also treats ``kinds`` as documentable members."""
        return replace(self, member_kinds=self.member_kinds | frozenset(kinds))


DEFAULT_CLASSIFICATION = KindClassification()
