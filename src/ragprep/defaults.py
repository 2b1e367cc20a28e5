"""Default models and dimensionality shared by components and settings.

Every index write and query must use the same embedding dimensionality.
"""

DEFAULT_OPTIMIZER_MODEL = "gpt-4o-mini"
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-large"
DEFAULT_EMBEDDING_DIMENSIONS = 1024
