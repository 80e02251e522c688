"""
Breadcrumb extraction over a provider-built syntax tree.

Walks the tree depth-first in pre-order, threading an immutable path of
name segments, and emits one ``CommentRecord`` per attached doc comment.
Which children consume a path segment, and which are re-entered, is
decided by a ``KindClassification`` lookup rather than per-kind code.
"""

from doc_breadcrumbs.core import (
    DEFAULT_CLASSIFICATION,
    CommentRecord,
    KindClassification,
    LineIndex,
    NodeKind,
    SyntaxNode,
    SyntaxTree,
    TextRange,
)
from doc_breadcrumbs.logging import get_logger

logger = get_logger(__name__)

CONSTRUCTOR_SEGMENT = "Constructor"

Path = tuple[str, ...]


class _ExtractionRun:
    """State of a single extraction call: output, visited node ids, line index."""

    def __init__(self, source_text: str, classification: KindClassification) -> None:
        self._lines = LineIndex(source_text)
        self._classification = classification
        self._visited: set[int] = set()
        self.records: list[CommentRecord] = []

    def visit(self, node: SyntaxNode, path: Path, segment: str | None = None) -> Path | None:
        """
        Visit ``node`` under ``path``.

        Returns the path the node's own comments and children were given,
        or None if the node had already been visited in this run.
        """
        if node.node_id in self._visited:
            return None
        self._visited.add(node.node_id)

        if node.kind == NodeKind.VARIABLE_STATEMENT:
            # Not path-bearing: each declarator contributes its own segment
            self._emit(node, path)
            for child in node.children:
                if child.kind == NodeKind.VARIABLE_DECLARATOR:
                    self.visit(child, path)
            return path

        segment = segment or self._segment(node)
        if segment:
            path = (*path, segment)

        self._emit(node, path)

        if self._classification.is_container(node.kind):
            self._visit_members(node, path)
        else:
            for child in node.children:
                self.visit(child, path)

        return path

    def _visit_members(self, node: SyntaxNode, path: Path) -> None:
        for child in node.children:
            if not self._classification.is_member(child.kind):
                # Scaffolding (heritage clauses, bodies): no segment of its own
                self.visit(child, path)
                continue

            override = CONSTRUCTOR_SEGMENT if child.kind == NodeKind.CONSTRUCTOR else None
            member_path = self.visit(child, path, override)

            if member_path is not None and self._classification.is_callable(child.kind):
                for parameter in child.parameters:
                    if parameter.name is not None:
                        self.visit(parameter, member_path)

    def _segment(self, node: SyntaxNode) -> str | None:
        if node.kind == NodeKind.CONSTRUCTOR:
            return CONSTRUCTOR_SEGMENT
        return node.name

    def _emit(self, node: SyntaxNode, path: Path) -> None:
        if not node.doc_comments:
            return
        indentation = self._lines.indentation_at(node.start)
        for doc_comment in node.doc_comments:
            start = self._lines.offset_to_line_column(doc_comment.start)
            end = self._lines.offset_to_line_column(doc_comment.end)
            self.records.append(
                CommentRecord(
                    text=doc_comment.text,
                    start_line=start.line,
                    range=TextRange(start=start, end=end),
                    breadcrumbs=path,
                    indentation=indentation,
                )
            )


class BreadcrumbExtractor:
    """
    Extracts doc comments with their breadcrumb paths.

    Stateless between calls; one instance may serve any number of trees,
    concurrently or not.
    """

    def __init__(self, classification: KindClassification | None = None) -> None:
        self._classification = classification or DEFAULT_CLASSIFICATION

    @property
    def classification(self) -> KindClassification:
        return self._classification

    def extract(self, tree: SyntaxTree) -> list[CommentRecord]:
        """Extract comment records from a parsed document, in source order."""
        return self.extract_from_root(tree.root, tree.source_text)

    def extract_from_root(self, root: SyntaxNode, source_text: str) -> list[CommentRecord]:
        """
        Extract comment records from a root node.

        ``source_text`` must be the text the tree was built from; it is used
        for line/column conversion and indentation capture.
        """
        run = _ExtractionRun(source_text, self._classification)
        run.visit(root, ())

        logger.debug("comments_extracted", comment_count=len(run.records))

        return run.records
