"""JavaScript syntax tree provider using tree-sitter-javascript."""

import tree_sitter_javascript as ts_javascript
from tree_sitter import Language

from doc_breadcrumbs.core import Language as CodeLanguage
from doc_breadcrumbs.parsers.tree_sitter_provider import TreeSitterTreeProvider


class JavaScriptTreeProvider(TreeSitterTreeProvider):
    """Provider for JavaScript source code, JSX included."""

    def __init__(self) -> None:
        super().__init__(
            Language(ts_javascript.language()),
            CodeLanguage.JAVASCRIPT,
            frozenset({".js", ".jsx", ".mjs", ".cjs"}),
        )
