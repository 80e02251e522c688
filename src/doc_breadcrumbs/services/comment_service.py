"""Comment extraction and rewriting orchestration service."""

import re
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from pathlib import Path

from doc_breadcrumbs.config import get_settings
from doc_breadcrumbs.core import (
    CommentNotFoundError,
    CommentRecord,
    FileComments,
    InvalidCommentError,
    Language,
    LineIndex,
    UnsupportedLanguageError,
)
from doc_breadcrumbs.extraction import BreadcrumbExtractor
from doc_breadcrumbs.logging import get_logger
from doc_breadcrumbs.parsers import ProviderRegistry, get_provider_registry
from doc_breadcrumbs.parsers.grammar import is_doc_comment
from doc_breadcrumbs.services.file_discovery import (
    discover_files,
    read_file_content,
    read_file_exact,
    write_file_exact,
)

logger = get_logger(__name__)

# Lone surrogates left by surrogateescape decoding, one per undecodable byte
_ESCAPED_BYTES = re.compile("[\udc80-\udcff]")


def validate_doc_comment(comment: str) -> None:
    """
    Check that ``comment`` is a single well-formed doc comment.

    Raises:
        InvalidCommentError: if it does not open with ``/**``, close with
            ``*/``, closes early, or cannot be encoded as UTF-8.
    """
    if not is_doc_comment(comment):
        raise InvalidCommentError("Doc comment must start with '/**'")
    if len(comment) < 5 or not comment.endswith("*/"):
        raise InvalidCommentError("Doc comment must end with '*/'")
    if comment.find("*/", 3) != len(comment) - 2:
        raise InvalidCommentError("Doc comment must not contain '*/' before its end")
    try:
        comment.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidCommentError(f"Doc comment is not valid UTF-8 text: {e.reason}") from e


def _extract_file_in_process(
    absolute_path: str,
    relative_path: str,
    extractor: BreadcrumbExtractor,
) -> FileComments:
    """
    Extract a single file (runs in separate process).

    Uses the calling service's extractor and the default provider registry.

    Failures are reported on the returned ``FileComments`` rather than
    raised, so one bad file does not abort a directory run.
    """
    try:
        return CommentService(extractor=extractor).extract_file(absolute_path, relative_path)
    except Exception as e:
        return FileComments(
            relative_path=relative_path,
            language=get_provider_registry().get_language_for_file(relative_path),
            errors=(str(e),),
        )


def _parseable(content: str) -> str:
    """Swap escaped bytes for U+FFFD, one character each, so offsets still line up."""
    return _ESCAPED_BYTES.sub("\ufffd", content)


class CommentService:
    """
    Extracts doc comments from text, files and directories.

    Also rewrites a single comment in place and re-extracts the file.
    """

    def __init__(
        self,
        registry: ProviderRegistry | None = None,
        extractor: BreadcrumbExtractor | None = None,
    ) -> None:
        self._settings = get_settings()
        self._registry = registry or get_provider_registry()
        self._extractor = extractor or BreadcrumbExtractor(self._settings.classification)

    def extract_text(self, source_code: str, language: Language) -> list[CommentRecord]:
        """Extract comment records from source text in the given language."""
        tree = self._registry.get_provider(language).parse(source_code)
        return self._extractor.extract(tree)

    def extract_file(self, file_path: str | Path, relative_path: str | None = None) -> FileComments:
        """Extract comment records from one file on disk."""
        path = Path(file_path)
        display_path = relative_path or path.as_posix()
        provider = self._registry.get_provider_for_file(str(path))
        if provider is None:
            raise UnsupportedLanguageError(f"Unsupported file type: {path}")

        content = read_file_content(path)
        tree = provider.parse(content)
        comments = self._extractor.extract(tree)

        if tree.has_errors:
            logger.debug("syntax_errors_recovered", path=display_path)

        return FileComments(
            relative_path=display_path,
            language=provider.language,
            comments=tuple(comments),
            has_syntax_errors=tree.has_errors,
            metadata={"comment_count": len(comments)},
        )

    def collect_directory(
        self,
        root_path: str | Path,
        max_workers: int | None = None,
    ) -> dict[str, FileComments]:
        """
        Extract every supported file under ``root_path``.

        Files are independent, so they are spread over a process pool;
        ``max_workers=1`` runs in-process. Workers build their own default
        provider registry, so a service with an injected registry always
        runs in-process. Returns results keyed by relative path, in path
        order.
        """
        files = discover_files(root_path)
        workers = max_workers or self._settings.worker_count

        logger.info(
            "collection_started",
            root_path=str(root_path),
            file_count=len(files),
            total_bytes=sum(f.size_bytes for f in files),
        )

        in_process = (
            workers == 1
            or len(files) <= 1
            or self._registry is not get_provider_registry()
        )

        if in_process:
            results = [self._extract_or_report(f.absolute_path, f.relative_path) for f in files]
        else:
            with ProcessPoolExecutor(max_workers=workers) as executor:
                results = list(
                    executor.map(
                        _extract_file_in_process,
                        [f.absolute_path for f in files],
                        [f.relative_path for f in files],
                        repeat(self._extractor),
                    )
                )

        collected = {result.relative_path: result for result in results}
        failed = sum(1 for result in results if not result.ok)

        logger.info(
            "collection_completed",
            root_path=str(root_path),
            file_count=len(collected),
            comment_count=sum(len(result.comments) for result in results),
            failed_count=failed,
        )

        return collected

    def rewrite_comment(self, file_path: str | Path, index: int, new_comment: str) -> list[CommentRecord]:
        """
        Replace the ``index``-th doc comment of a file and re-extract it.

        The replacement is validated before the file is touched and the
        file is replaced atomically; on any error it is left unchanged.
        Bytes that are not valid UTF-8 are written back as they were.

        Returns:
            The file's comment records after the rewrite.

        Raises:
            InvalidCommentError: if ``new_comment`` is not a doc comment.
            CommentNotFoundError: if ``index`` is out of range.
            UnsupportedLanguageError: if no provider handles the file.
        """
        validate_doc_comment(new_comment)

        path = Path(file_path)
        provider = self._registry.get_provider_for_file(str(path))
        if provider is None:
            raise UnsupportedLanguageError(f"Unsupported file type: {path}")

        content = read_file_exact(path)
        comments = self._extractor.extract(provider.parse(_parseable(content)))
        if not 0 <= index < len(comments):
            raise CommentNotFoundError(
                f"Comment index {index} out of range for {path} ({len(comments)} comments)"
            )

        record = comments[index]
        lines = LineIndex(content)
        start = lines.line_start(record.range.start.line) + record.range.start.column
        end = lines.line_start(record.range.end.line) + record.range.end.column
        updated = content[:start] + new_comment + content[end:]

        write_file_exact(path, updated)

        refreshed = self._extractor.extract(provider.parse(_parseable(updated)))

        logger.info(
            "comment_rewritten",
            path=str(path),
            index=index,
            breadcrumbs=list(record.breadcrumbs),
            comment_count=len(refreshed),
        )

        return refreshed

    def _extract_or_report(self, absolute_path: str, relative_path: str) -> FileComments:
        try:
            return self.extract_file(absolute_path, relative_path)
        except (OSError, UnsupportedLanguageError) as e:
            logger.warning("file_extraction_failed", path=relative_path, error=str(e))
            return FileComments(
                relative_path=relative_path,
                language=self._registry.get_language_for_file(relative_path),
                errors=(str(e),),
            )
