"""Application composition – merging scope, filter and search criteria."""
from listquery.application.composition.composer import CriteriaComposer, scope_equals

__all__ = ["CriteriaComposer", "scope_equals"]
