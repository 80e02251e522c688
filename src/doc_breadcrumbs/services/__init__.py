"""Service layer - extraction orchestration over files and directories."""

from doc_breadcrumbs.services.comment_service import CommentService, validate_doc_comment
from doc_breadcrumbs.services.file_discovery import DiscoveredFile, discover_files

__all__ = [
    "CommentService",
    "DiscoveredFile",
    "discover_files",
    "validate_doc_comment",
]
