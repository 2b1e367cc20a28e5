"""Query preprocessing pipeline."""

from .query_preprocessor import QueryPreprocessor

__all__ = ["QueryPreprocessor"]
