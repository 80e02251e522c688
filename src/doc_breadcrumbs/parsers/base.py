"""Base syntax tree provider abstraction for language-specific implementations."""

from abc import ABC, abstractmethod

from doc_breadcrumbs.core import Language, SyntaxTree


class SyntaxTreeProvider(ABC):
    """
    Abstract base class for language-specific syntax tree providers.

    Each implementation turns raw source text into a ``SyntaxTree`` of
    read-only ``SyntaxNode``s with doc comments already attached to the
    declarations they precede.
    """

    @property
    @abstractmethod
    def language(self) -> Language:
        """The language this provider handles."""
        ...

    @property
    @abstractmethod
    def file_extensions(self) -> frozenset[str]:
        """File extensions this provider can handle (e.g., {'.ts'})."""
        ...

    @abstractmethod
    def parse(self, source_code: str) -> SyntaxTree:
        """
        Parse source code into a syntax tree.

        Syntax errors do not raise; the provider returns whatever tree its
        parser recovered, with ``has_errors`` set.

        Args:
            source_code: The raw source code content.

        Returns:
            SyntaxTree rooted at the module node.
        """
        ...
