"""Core domain models - pure Python dataclasses with no framework dependencies."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Self


class Language(StrEnum):
    """Source languages a syntax tree provider exists for."""

    TYPESCRIPT = "typescript"
    TSX = "tsx"
    JAVASCRIPT = "javascript"

    @classmethod
    def from_extension(cls, extension: str) -> Self | None:
        """Get language from file extension."""
        mapping = {
            ".ts": cls.TYPESCRIPT,
            ".mts": cls.TYPESCRIPT,
            ".cts": cls.TYPESCRIPT,
            ".tsx": cls.TSX,
            ".js": cls.JAVASCRIPT,
            ".jsx": cls.JAVASCRIPT,
            ".mjs": cls.JAVASCRIPT,
            ".cjs": cls.JAVASCRIPT,
        }
        return mapping.get(extension.lower())


class NodeKind(StrEnum):
    """Closed set of node categories the extractor distinguishes."""

    MODULE = "module"
    VARIABLE_STATEMENT = "variable_statement"
    VARIABLE_DECLARATOR = "variable_declarator"
    INTERFACE = "interface"
    TYPE_ALIAS = "type_alias"
    TYPE_LITERAL = "type_literal"
    OBJECT_LITERAL = "object_literal"
    CLASS = "class"
    ENUM = "enum"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    PROPERTY = "property"
    PARAMETER = "parameter"
    ACCESSOR = "accessor"
    ENUM_MEMBER = "enum_member"
    FUNCTION = "function"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class LineColumn:
    """A 0-indexed line/column pair."""

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError("line must be >= 0")
        if self.column < 0:
            raise ValueError("column must be >= 0")

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open range between two line/column positions."""

    start: LineColumn
    end: LineColumn

    def __post_init__(self) -> None:
        if (self.end.line, self.end.column) < (self.start.line, self.start.column):
            raise ValueError("range end must not precede range start")

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class DocComment:
    """
    A documentation comment attached to a syntax node.

    Offsets are character offsets into the source text, so
    ``source_text[start:end] == text``.
    """

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be >= 0")
        if self.end < self.start:
            raise ValueError("end must be >= start")


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """
    Read-only node of a provider-built syntax tree.

    ``node_id`` is the node's pre-order arena index within its tree; it is
    the identity used when tracking visited nodes. ``name`` is only set when
    the node binds a simple identifier.
    """

    node_id: int
    kind: NodeKind
    start: int
    end: int
    name: str | None = None
    doc_comments: tuple[DocComment, ...] = ()
    children: tuple["SyntaxNode", ...] = ()
    grammar_type: str = ""  # Raw tree-sitter type, e.g. "method_definition"

    @property
    def parameters(self) -> tuple["SyntaxNode", ...]:
        """Direct parameter children (parameter lists are flattened into their owner)."""
        return tuple(child for child in self.children if child.kind == NodeKind.PARAMETER)

    def walk(self) -> Iterator["SyntaxNode"]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    """A parsed document: its root node plus the text it was built from."""

    root: SyntaxNode
    source_text: str
    language: Language
    has_errors: bool = False

    @property
    def doc_comment_count(self) -> int:
        return sum(len(node.doc_comments) for node in self.root.walk())


@dataclass(frozen=True, slots=True)
class CommentRecord:
    """
    One extracted doc comment and the declaration path it documents.

    ``indentation`` is the leading whitespace of the line the documented
    node starts on, not the comment's own line.
    """

    text: str
    start_line: int  # 0-indexed, equal to range.start.line
    range: TextRange
    breadcrumbs: tuple[str, ...]
    indentation: str = ""

    def __post_init__(self) -> None:
        if self.start_line != self.range.start.line:
            raise ValueError("start_line must match range start line")

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "startLine": self.start_line,
            "range": self.range.to_dict(),
            "breadcrumbs": list(self.breadcrumbs),
            "indentation": self.indentation,
        }


@dataclass(frozen=True, slots=True)
class FileComments:
    """Result of extracting one file."""

    relative_path: str
    language: Language | None
    comments: tuple[CommentRecord, ...] = ()
    errors: tuple[str, ...] = ()
    has_syntax_errors: bool = False
    metadata: dict[str, str | int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors
