"""TypeScript syntax tree providers using tree-sitter-typescript."""

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language

from doc_breadcrumbs.core import Language as CodeLanguage
from doc_breadcrumbs.parsers.tree_sitter_provider import TreeSitterTreeProvider


class TypeScriptTreeProvider(TreeSitterTreeProvider):
    """
    Provider for TypeScript source code.

    Covers interfaces, type aliases, enums and parameter properties in
    addition to the JavaScript declaration forms.
    """

    def __init__(self) -> None:
        super().__init__(
            Language(ts_typescript.language_typescript()),
            CodeLanguage.TYPESCRIPT,
            frozenset({".ts", ".mts", ".cts"}),
        )


class TsxTreeProvider(TreeSitterTreeProvider):
    """Provider for TypeScript with JSX (``.tsx``)."""

    def __init__(self) -> None:
        super().__init__(
            Language(ts_typescript.language_tsx()),
            CodeLanguage.TSX,
            frozenset({".tsx"}),
        )
