"""Version 1 API routers."""

from . import health, standards, documents, compare, guidance

__all__ = ["health", "standards", "documents", "compare", "guidance"]
