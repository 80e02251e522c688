"""Locate doc comments in JavaScript/TypeScript sources and the declarations they document."""

__version__ = "0.1.0"
