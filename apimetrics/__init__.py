"""Vocabulary metrics, naming rules and linters for OpenAPI and Discovery API descriptions."""

__version__ = "0.1.0"

__all__ = ["document", "extract", "lint", "linters", "rules", "sourceinfo", "vocabulary"]