"""Core domain layer - pure Python business logic."""

from doc_breadcrumbs.core.classification import (
    DEFAULT_CLASSIFICATION,
    KindClassification,
)
from doc_breadcrumbs.core.exceptions import (
    CommentNotFoundError,
    InvalidCommentError,
    UnsupportedLanguageError,
)
from doc_breadcrumbs.core.models import (
    CommentRecord,
    DocComment,
    FileComments,
    Language,
    LineColumn,
    NodeKind,
    SyntaxNode,
    SyntaxTree,
    TextRange,
)
from doc_breadcrumbs.core.positions import LineIndex, offset_to_line_column

__all__ = [
    "CommentNotFoundError",
    "CommentRecord",
    "DEFAULT_CLASSIFICATION",
    "DocComment",
    "FileComments",
    "InvalidCommentError",
    "KindClassification",
    "Language",
    "LineColumn",
    "LineIndex",
    "NodeKind",
    "SyntaxNode",
    "SyntaxTree",
    "TextRange",
    "UnsupportedLanguageError",
    "offset_to_line_column",
]
