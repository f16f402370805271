"""Kernel schema – field allow-lists, value kinds and coercion."""
from listquery.kernel.schema.kinds import FieldKind
from listquery.kernel.schema.schema import FieldSchema, FieldSpec

__all__ = ["FieldKind", "FieldSchema", "FieldSpec"]
