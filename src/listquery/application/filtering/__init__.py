"""Application filtering – RHS filter conditions and parser."""
from listquery.application.filtering.condition import Combinator, FilterCondition, split_tokens
from listquery.application.filtering.parser import FilterParser

__all__ = ["Combinator", "FilterCondition", "FilterParser", "split_tokens"]
