"""Application sorting – sort directives and parser."""
from listquery.application.sorting.directive import SortDirection, SortDirective, SortSpec
from listquery.application.sorting.parser import SortParser

__all__ = ["SortDirection", "SortDirective", "SortParser", "SortSpec"]
