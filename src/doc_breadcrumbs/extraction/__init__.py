"""Breadcrumb extraction from syntax trees."""

from doc_breadcrumbs.extraction.extractor import CONSTRUCTOR_SEGMENT, BreadcrumbExtractor

__all__ = [
    "BreadcrumbExtractor",
    "CONSTRUCTOR_SEGMENT",
]
