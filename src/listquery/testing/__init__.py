"""Testing – fakes for exercising the engine without a database."""
from listquery.testing.fakes import InMemoryRowStore

__all__ = ["InMemoryRowStore"]
