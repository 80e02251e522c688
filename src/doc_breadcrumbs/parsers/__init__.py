"""Syntax tree providers using tree-sitter for AST construction."""

from doc_breadcrumbs.parsers.base import SyntaxTreeProvider
from doc_breadcrumbs.parsers.registry import ProviderRegistry, get_provider_registry

__all__ = [
    "ProviderRegistry",
    "SyntaxTreeProvider",
    "get_provider_registry",
]
