"""Syntax tree provider backed by tree-sitter."""

import dataclasses
from collections.abc import Iterator

from tree_sitter import Language as TSLanguage, Node, Parser

from doc_breadcrumbs.core import DocComment, Language, NodeKind, SyntaxNode, SyntaxTree
from doc_breadcrumbs.logging import get_logger
from doc_breadcrumbs.parsers.base import SyntaxTreeProvider
from doc_breadcrumbs.parsers.grammar import (
    ACCESSOR_KEYWORDS,
    AMBIENT_WRAPPER,
    COMMENT_TYPES,
    CONSTRUCTOR_NAME,
    DECLARATION_TYPES,
    EXPORT_WRAPPER,
    EXPRESSION_WRAPPER,
    IDENTIFIER_TYPES,
    KIND_BY_TYPE,
    METHOD_TYPES,
    NAME_FIELDS,
    NAMESPACE_TYPES,
    PASS_THROUGH_TYPES,
    TRANSPARENT_TYPES,
    is_doc_comment,
)

logger = get_logger(__name__)


class _CharOffsets:
    """Converts tree-sitter byte offsets into character offsets."""

    def __init__(self, source_code: str, source_bytes: bytes) -> None:
        self._table: list[int] | None = None
        if len(source_bytes) != len(source_code):
            table: list[int] = []
            for index, char in enumerate(source_code):
                table.extend([index] * len(char.encode("utf-8")))
            table.append(len(source_code))
            self._table = table

    def __call__(self, byte_offset: int) -> int:
        if self._table is None:
            return byte_offset
        return self._table[byte_offset]


class _TreeBuilder:
    """
    Builds one ``SyntaxNode`` tree from a tree-sitter tree.

    Single use: node ids are allocated in pre-order from zero.
    """

    def __init__(self, source_code: str, source_bytes: bytes) -> None:
        self._source_bytes = source_bytes
        self._offsets = _CharOffsets(source_code, source_bytes)
        self._next_id = 0

    @property
    def node_count(self) -> int:
        return self._next_id

    def build(self, root: Node) -> SyntaxNode:
        return self._build(root, (), None)

    def _build(
        self,
        node: Node,
        doc_comments: tuple[DocComment, ...],
        context_kind: NodeKind | None,
    ) -> SyntaxNode:
        declaration = self._unwrapped_declaration(node)
        if declaration is not None:
            inner = self._doc_comments_for(node, declaration)
            return self._build(declaration, doc_comments + inner, context_kind)

        node_id = self._next_id
        self._next_id += 1

        kind = self._classify(node, context_kind)
        children = self._build_children(node)

        if kind == NodeKind.VARIABLE_STATEMENT and doc_comments:
            children, doc_comments = self._forward_to_first_declarator(children, doc_comments)

        return SyntaxNode(
            node_id=node_id,
            kind=kind,
            start=self._offsets(node.start_byte),
            end=self._offsets(node.end_byte),
            name=self._name_of(node, kind),
            doc_comments=doc_comments,
            children=tuple(children),
            grammar_type=node.type,
        )

    def _build_children(self, node: Node, context_kind: NodeKind | None = None) -> list[SyntaxNode]:
        children: list[SyntaxNode] = []
        single_parameter = (
            node.child_by_field_name("parameter") if node.type == "arrow_function" else None
        )
        for child, doc_comments in self._attachments(node):
            if child.type in TRANSPARENT_TYPES:
                children.extend(self._build_children(child, TRANSPARENT_TYPES[child.type]))
                continue
            if child.type in PASS_THROUGH_TYPES:
                children.append(self._build(child, (), None))
                continue
            child_context = NodeKind.PARAMETER if child == single_parameter else context_kind
            children.append(self._build(child, doc_comments, child_context))
        return children

    def _attachments(self, node: Node) -> Iterator[tuple[Node, tuple[DocComment, ...]]]:
        """
        Yield each named child with the doc comments attached to it.

        A run of doc comments attaches to the next named sibling. Ordinary
        comments and pass-through nodes (decorators) keep the run alive;
        anonymous tokens and transparent bodies discard it.
        """
        pending: list[DocComment] = []
        for child in node.children:
            if child.type in COMMENT_TYPES:
                doc_comment = self._doc_comment(child)
                if doc_comment is not None:
                    pending.append(doc_comment)
            elif child.type in PASS_THROUGH_TYPES:
                yield child, ()
            elif not child.is_named or child.type in TRANSPARENT_TYPES:
                pending = []
                if child.is_named:
                    yield child, ()
            else:
                yield child, tuple(pending)
                pending = []

    def _doc_comments_for(self, wrapper: Node, target: Node) -> tuple[DocComment, ...]:
        for child, doc_comments in self._attachments(wrapper):
            if child == target:
                return doc_comments
        return ()

    def _doc_comment(self, node: Node) -> DocComment | None:
        text = self._text(node)
        if not is_doc_comment(text):
            return None
        return DocComment(
            start=self._offsets(node.start_byte),
            end=self._offsets(node.end_byte),
            text=text,
        )

    def _unwrapped_declaration(self, node: Node) -> Node | None:
        """The declaration an ``export``/``declare`` wrapper stands for, if any."""
        if node.type == EXPORT_WRAPPER:
            return node.child_by_field_name("declaration")
        if node.type == AMBIENT_WRAPPER:
            candidates = DECLARATION_TYPES
        elif node.type == EXPRESSION_WRAPPER:
            candidates = NAMESPACE_TYPES
        else:
            return None
        for child in node.named_children:
            if child.type in COMMENT_TYPES:
                continue
            return child if child.type in candidates else None
        return None

    def _classify(self, node: Node, context_kind: NodeKind | None) -> NodeKind:
        if context_kind is not None:
            return context_kind
        kind = KIND_BY_TYPE.get(node.type, NodeKind.OTHER)
        if node.type in METHOD_TYPES:
            if any(not child.is_named and child.type in ACCESSOR_KEYWORDS for child in node.children):
                return NodeKind.ACCESSOR
            name_node = node.child_by_field_name("name")
            parent = node.parent
            if (
                name_node is not None
                and parent is not None
                and parent.type == "class_body"
                and self._text(name_node) == CONSTRUCTOR_NAME
            ):
                return NodeKind.CONSTRUCTOR
        return kind

    def _name_of(self, node: Node, kind: NodeKind) -> str | None:
        """Bound simple-identifier name of a node, or None."""
        if node.type in IDENTIFIER_TYPES:
            # A bare identifier only names itself when it is the declaration
            return self._text(node) if kind != NodeKind.OTHER else None
        if node.type in ("rest_pattern", "assignment_pattern") and kind != NodeKind.PARAMETER:
            return None
        if node.type == "rest_pattern":
            target = node.named_children[0] if node.named_children else None
        else:
            target = node.child_by_field_name(NAME_FIELDS.get(node.type, "name"))
        while target is not None and target.type in ("rest_pattern", "assignment_pattern"):
            if target.type == "rest_pattern":
                target = target.named_children[0] if target.named_children else None
            else:
                target = target.child_by_field_name("left")
        if target is None or target.type not in IDENTIFIER_TYPES:
            return None
        return self._text(target)

    def _forward_to_first_declarator(
        self,
        children: list[SyntaxNode],
        doc_comments: tuple[DocComment, ...],
    ) -> tuple[list[SyntaxNode], tuple[DocComment, ...]]:
        """Move a variable statement's doc comments onto its first declarator."""
        for index, child in enumerate(children):
            if child.kind == NodeKind.VARIABLE_DECLARATOR:
                children = list(children)
                children[index] = dataclasses.replace(
                    child, doc_comments=doc_comments + child.doc_comments
                )
                return children, ()
        return children, doc_comments

    def _text(self, node: Node) -> str:
        return self._source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


class TreeSitterTreeProvider(SyntaxTreeProvider):
    """
    Shared tree-sitter implementation.

    Subclasses supply the grammar; node conversion is identical for the
    JavaScript and TypeScript grammars.
    """

    def __init__(self, ts_language: TSLanguage, language: Language, extensions: frozenset[str]) -> None:
        self._ts_language = ts_language
        self._parser = Parser(ts_language)
        self._code_language = language
        self._extensions = extensions

    @property
    def language(self) -> Language:
        return self._code_language

    @property
    def file_extensions(self) -> frozenset[str]:
        return self._extensions

    def parse(self, source_code: str) -> SyntaxTree:
        """Parse source code into a ``SyntaxTree``."""
        source_bytes = source_code.encode("utf-8")
        tree = self._parser.parse(source_bytes)

        builder = _TreeBuilder(source_code, source_bytes)
        root = builder.build(tree.root_node)
        has_errors = tree.root_node.has_error

        logger.debug(
            "syntax_tree_built",
            language=self.language.value,
            node_count=builder.node_count,
            has_errors=has_errors,
        )

        return SyntaxTree(
            root=root,
            source_text=source_code,
            language=self.language,
            has_errors=has_errors,
        )
