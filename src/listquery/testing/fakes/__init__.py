"""Testing fakes – in-memory collaborators for unit tests."""
from listquery.testing.fakes.store import InMemoryRowStore

__all__ = ["InMemoryRowStore"]
