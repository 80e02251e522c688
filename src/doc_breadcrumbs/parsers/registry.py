"""Provider registry for managing language-specific syntax tree providers."""

from functools import lru_cache

from doc_breadcrumbs.core import Language, UnsupportedLanguageError
from doc_breadcrumbs.logging import get_logger
from doc_breadcrumbs.parsers.base import SyntaxTreeProvider
from doc_breadcrumbs.parsers.javascript_provider import JavaScriptTreeProvider
from doc_breadcrumbs.parsers.typescript_provider import TsxTreeProvider, TypeScriptTreeProvider

logger = get_logger(__name__)


class ProviderRegistry:
    """
    Registry of language-specific syntax tree providers.

    Provides lookup of the appropriate provider based on language or
    file extension.
    """

    def __init__(self) -> None:
        self._providers: dict[Language, SyntaxTreeProvider] = {}
        self._extension_map: dict[str, Language] = {}

    def register(self, provider: SyntaxTreeProvider) -> None:
        """Register a provider for its language."""
        self._providers[provider.language] = provider
        for ext in provider.file_extensions:
            self._extension_map[ext] = provider.language
        logger.debug(
            "provider_registered",
            language=provider.language.value,
            extensions=sorted(provider.file_extensions),
        )

    def get_provider(self, language: Language) -> SyntaxTreeProvider:
        """Get the provider for a language, raising if none is registered."""
        provider = self._providers.get(language)
        if provider is None:
            raise UnsupportedLanguageError(f"No syntax tree provider for language: {language}")
        return provider

    def get_provider_for_file(self, file_path: str) -> SyntaxTreeProvider | None:
        """Get provider based on file extension."""
        language = self.get_language_for_file(file_path)
        if language:
            return self._providers.get(language)
        return None

    def get_language_for_file(self, file_path: str) -> Language | None:
        """Get language based on file extension."""
        return self._extension_map.get(self._get_extension(file_path))

    def is_supported(self, file_path: str) -> bool:
        """Check if a file can be parsed."""
        return self.get_provider_for_file(file_path) is not None

    @property
    def supported_languages(self) -> list[Language]:
        """List of all supported languages."""
        return list(self._providers.keys())

    @property
    def supported_extensions(self) -> list[str]:
        """List of all supported file extensions."""
        return list(self._extension_map.keys())

    def _get_extension(self, file_path: str) -> str:
        """Extract the lowercased file extension from a path."""
        # Only the last suffix counts: "app.test.ts" -> ".ts"
        parts = file_path.replace("\\", "/").rsplit("/", 1)[-1].split(".")
        if len(parts) >= 2:
            return f".{parts[-1].lower()}"
        return ""


def _create_default_registry() -> ProviderRegistry:
    """Create and configure the default provider registry."""
    registry = ProviderRegistry()

    registry.register(TypeScriptTreeProvider())
    registry.register(TsxTreeProvider())
    registry.register(JavaScriptTreeProvider())

    logger.info(
        "provider_registry_initialized",
        languages=[lang.value for lang in registry.supported_languages],
    )

    return registry


@lru_cache
def get_provider_registry() -> ProviderRegistry:
    """Get the singleton provider registry instance."""
    return _create_default_registry()
