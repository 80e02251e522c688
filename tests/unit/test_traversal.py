"""Tests for the extractor's traversal policy on hand-built trees."""

import itertools

import pytest

from doc_breadcrumbs.core import (
    DEFAULT_CLASSIFICATION,
    DocComment,
    KindClassification,
    NodeKind,
    SyntaxNode,
)
from doc_breadcrumbs.extraction import BreadcrumbExtractor

SOURCE = " " * 400


class TreeFactory:
    """Builds SyntaxNodes with unique ids and one doc comment per request."""

    def __init__(self) -> None:
        self._ids = itertools.count()
        self._offsets = itertools.count(0, 10)

    def doc(self, text: str = "/** d */") -> DocComment:
        start = next(self._offsets)
        return DocComment(start=start, end=start + len(text), text=text)

    def node(
        self,
        kind: NodeKind,
        name: str | None = None,
        *children: SyntaxNode,
        documented: bool = False,
    ) -> SyntaxNode:
        doc_comments = (self.doc(),) if documented else ()
        start = doc_comments[0].end if doc_comments else 0
        return SyntaxNode(
            node_id=next(self._ids),
            kind=kind,
            start=start,
            end=start,
            name=name,
            doc_comments=doc_comments,
            children=children,
        )


@pytest.fixture
def factory() -> TreeFactory:
    return TreeFactory()


def _paths(root: SyntaxNode, extractor: BreadcrumbExtractor | None = None) -> list[tuple[str, ...]]:
    return [r.breadcrumbs for r in (extractor or BreadcrumbExtractor()).extract_from_root(root, SOURCE)]


class TestTraversal:
    """Tests for the recursion rules."""

    def test_unnamed_wrapper_inherits_path(self, factory: TreeFactory):
        wrapper = factory.node(NodeKind.OTHER, None, documented=True)
        cls = factory.node(NodeKind.CLASS, "Widget", wrapper)
        root = factory.node(NodeKind.MODULE, None, cls)

        assert _paths(root) == [("Widget",)]

    def test_constructor_name_is_normalized(self, factory: TreeFactory):
        ctor = factory.node(NodeKind.CONSTRUCTOR, "constructor", documented=True)
        root = factory.node(NodeKind.MODULE, None, factory.node(NodeKind.CLASS, "Foo", ctor))

        assert _paths(root) == [("Foo", "Constructor")]

    def test_unnamed_constructor_gets_segment(self, factory: TreeFactory):
        ctor = factory.node(NodeKind.CONSTRUCTOR, None, documented=True)

        assert _paths(ctor) == [("Constructor",)]

    def test_variable_statement_is_unwrapped(self, factory: TreeFactory):
        first = factory.node(NodeKind.VARIABLE_DECLARATOR, "a", documented=True)
        second = factory.node(NodeKind.VARIABLE_DECLARATOR, "b", documented=True)
        stray = factory.node(NodeKind.OTHER, None, documented=True)
        statement = factory.node(NodeKind.VARIABLE_STATEMENT, None, first, second, stray)

        assert _paths(factory.node(NodeKind.MODULE, None, statement)) == [("a",), ("b",)]

    def test_variable_statement_keeps_unforwarded_comments(self, factory: TreeFactory):
        statement = factory.node(NodeKind.VARIABLE_STATEMENT, None, documented=True)
        root = factory.node(NodeKind.CLASS, "Holder", statement)

        assert _paths(root) == [("Holder",)]

    def test_sibling_paths_do_not_leak(self, factory: TreeFactory):
        left = factory.node(NodeKind.PROPERTY, "left", factory.node(NodeKind.OTHER, None, documented=True))
        right = factory.node(NodeKind.PROPERTY, "right", documented=True)
        root = factory.node(NodeKind.OBJECT_LITERAL, None, left, right)

        assert _paths(root) == [("left",), ("right",)]

    def test_method_parameters_are_one_segment_below_method(self, factory: TreeFactory):
        parameter = factory.node(NodeKind.PARAMETER, "value", documented=True)
        method = factory.node(NodeKind.METHOD, "update", parameter, documented=True)
        root = factory.node(NodeKind.CLASS, "Store", method)

        assert _paths(root) == [("Store", "update"), ("Store", "update", "value")]

    def test_parameters_nest_under_non_container_method(self, factory: TreeFactory):
        classification = KindClassification(
            container_kinds=DEFAULT_CLASSIFICATION.container_kinds - {NodeKind.METHOD}
        )
        parameter = factory.node(NodeKind.PARAMETER, "value", documented=True)
        method = factory.node(NodeKind.METHOD, "update", parameter)
        root = factory.node(NodeKind.CLASS, "Store", method)

        paths = _paths(root, BreadcrumbExtractor(classification))

        assert paths == [("Store", "update", "value")]

    def test_shared_node_is_visited_once(self, factory: TreeFactory):
        shared = factory.node(NodeKind.PROPERTY, "shared", documented=True)
        first = factory.node(NodeKind.OTHER, None, shared)
        second = factory.node(NodeKind.OTHER, None, shared)
        root = factory.node(NodeKind.MODULE, None, first, second)

        assert _paths(root) == [("shared",)]

    def test_multiple_comments_share_path_and_indentation(self, factory: TreeFactory):
        node = SyntaxNode(
            node_id=0,
            kind=NodeKind.FUNCTION,
            start=40,
            end=60,
            name="run",
            doc_comments=(factory.doc("/** a */"), factory.doc("/** b */")),
        )

        records = BreadcrumbExtractor().extract_from_root(node, SOURCE)

        assert [r.text for r in records] == ["/** a */", "/** b */"]
        assert records[0].breadcrumbs == records[1].breadcrumbs == ("run",)
        assert records[0].indentation == records[1].indentation


class TestKindClassification:
    """Tests for the classification table."""

    def test_default_containers(self):
        for kind in (
            NodeKind.TYPE_LITERAL,
            NodeKind.INTERFACE,
            NodeKind.TYPE_ALIAS,
            NodeKind.OBJECT_LITERAL,
            NodeKind.CLASS,
            NodeKind.METHOD,
            NodeKind.CONSTRUCTOR,
            NodeKind.ENUM,
        ):
            assert DEFAULT_CLASSIFICATION.is_container(kind)
        assert not DEFAULT_CLASSIFICATION.is_container(NodeKind.FUNCTION)

    def test_default_members(self):
        assert DEFAULT_CLASSIFICATION.is_member(NodeKind.ENUM_MEMBER)
        assert DEFAULT_CLASSIFICATION.is_member(NodeKind.ACCESSOR)
        assert not DEFAULT_CLASSIFICATION.is_member(NodeKind.VARIABLE_DECLARATOR)
        assert DEFAULT_CLASSIFICATION.is_callable(NodeKind.CONSTRUCTOR)
        assert not DEFAULT_CLASSIFICATION.is_callable(NodeKind.ACCESSOR)

    def test_extension_returns_new_table(self):
        extended = DEFAULT_CLASSIFICATION.with_container_kinds(NodeKind.FUNCTION)

        assert extended.is_container(NodeKind.FUNCTION)
        assert not DEFAULT_CLASSIFICATION.is_container(NodeKind.FUNCTION)

    def test_callable_kinds_must_be_members(self):
        with pytest.raises(ValueError):
            KindClassification(callable_kinds=frozenset({NodeKind.FUNCTION}))
