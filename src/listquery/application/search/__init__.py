"""Application search – free-text search compilation."""
from listquery.application.search.compiler import SearchCompiler

__all__ = ["SearchCompiler"]
