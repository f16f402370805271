"""Application pagination – opaque, signed keyset cursors.

Token layout::

    base64url(json payload) "." base64url(HMAC-SHA256(secret, payload text))

The payload binds the cursor to the entity and to the exact sort it was
produced under, and carries one type-tagged key value per sort directive.
Any change to the token invalidates the signature.
"""
from __future__ import annotations

import base64
import binascii
import dataclasses
import hashlib
import hmac
import json
import re
import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from listquery.application.sorting import SortSpec
from listquery.config.settings import QuerySettings
from listquery.kernel.criteria import read_field
from listquery.kernel.errors import InvalidCursor
from listquery.kernel.schema import FieldSchema
from listquery.observability.logging import get_logger

logger = get_logger(__name__)

CURSOR_VERSION = 1
DEFAULT_MAX_LENGTH = 2048
_TOKEN_RE = re.compile(r"[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+")


class CursorDirection(str, Enum):
    """Which side of the encoded row the next request reads."""

    AFTER = "after"
    BEFORE = "before"


@dataclasses.dataclass(frozen=True)
class CursorPosition:
    """Decoded cursor: the key values of one row under a sort."""

    values: tuple[Any, ...]
    direction: CursorDirection = CursorDirection.AFTER

    @property
    def sort_key_value(self) -> Any:
        return self.values[0]

    @property
    def tie_break_value(self) -> Any:
        return self.values[-1]


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(text: str) -> bytes:
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def _tag(value: Any) -> list[Any]:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return ["b", value]
    if isinstance(value, int):
        return ["i", value]
    if isinstance(value, float):
        return ["f", value]
    if isinstance(value, Decimal):
        return ["n", str(value)]
    if isinstance(value, datetime):
        return ["t", value.isoformat()]
    if isinstance(value, date):
        return ["d", value.isoformat()]
    if isinstance(value, uuid.UUID):
        return ["u", str(value)]
    if isinstance(value, str):
        return ["s", value]
    raise ValueError(f"Unsupported cursor value type: {type(value).__name__}")


def _untag(item: Any) -> Any:
    if not isinstance(item, list) or len(item) != 2:
        raise ValueError("malformed value")
    tag, raw = item
    match tag:
        case "b" if isinstance(raw, bool):
            return raw
        case "i" if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        case "f" if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return float(raw)
        case "n" if isinstance(raw, str):
            return Decimal(raw)
        case "t" if isinstance(raw, str):
            return datetime.fromisoformat(raw)
        case "d" if isinstance(raw, str):
            return date.fromisoformat(raw)
        case "u" if isinstance(raw, str):
            return uuid.UUID(raw)
        case "s" if isinstance(raw, str):
            return raw
    raise ValueError(f"unknown value tag {tag!r}")


class CursorCodec:
    """Encode and decode cursors for one entity's :class:`FieldSchema`."""

    def __init__(
        self,
        secret: str | bytes,
        schema: FieldSchema,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        if not secret:
            raise ValueError("A cursor secret is required")
        self._key = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
        self._schema = schema
        self._max_length = max_length

    @classmethod
    def from_settings(cls, settings: QuerySettings, schema: FieldSchema) -> "CursorCodec":
        return cls(settings.cursor_secret, schema, max_length=settings.max_cursor_length)

    def _sign(self, payload: str) -> str:
        digest = hmac.new(self._key, payload.encode("ascii"), hashlib.sha256).digest()
        return _b64encode(digest)

    def encode(
        self,
        row: Any,
        sort: SortSpec,
        direction: CursorDirection = CursorDirection.AFTER,
    ) -> str:
        """Encode the position of *row* under *sort*.

        Raises ``ValueError`` when the row lacks a sort field or holds
        ``None`` in one. Sortable fields are declared non-nullable, so either
        means the row does not match its schema.
        """
        values: list[Any] = []
        for directive in sort:
            try:
                value = read_field(row, directive.field)
            except KeyError as exc:
                raise ValueError(f"Row has no sort field '{directive.field}'") from exc
            if value is None:
                raise ValueError(f"Sort field '{directive.field}' is None; cursors need non-null keys")
            values.append(value)
        return self.encode_position(CursorPosition(tuple(values), direction), sort)

    def encode_position(self, position: CursorPosition, sort: SortSpec) -> str:
        if len(position.values) != len(sort):
            raise ValueError("Cursor position does not match the sort")
        body = {
            "v": CURSOR_VERSION,
            "e": self._schema.entity,
            "s": sort.signature,
            "d": position.direction.value,
            "k": [_tag(v) for v in position.values],
        }
        payload = _b64encode(json.dumps(body, separators=(",", ":"), ensure_ascii=True).encode("ascii"))
        return f"{payload}.{self._sign(payload)}"

    def decode(self, token: str, sort: SortSpec) -> CursorPosition:
        """Decode *token* for *sort*.

        Raises :class:`InvalidCursor` for malformed, tampered, or foreign
        tokens, including tokens produced under a different sort.
        """
        try:
            return self._decode(token, sort)
        except InvalidCursor as exc:
            logger.warning("cursor_rejected", entity=self._schema.entity, reason=exc.reason)
            raise

    def _decode(self, token: str, sort: SortSpec) -> CursorPosition:
        if not isinstance(token, str) or not token:
            raise InvalidCursor("empty")
        if len(token) > self._max_length:
            raise InvalidCursor("too long")
        if not _TOKEN_RE.fullmatch(token):
            raise InvalidCursor("malformed")
        payload, signature = token.split(".")
        if not hmac.compare_digest(signature, self._sign(payload)):
            raise InvalidCursor("bad signature")
        try:
            body = json.loads(_b64decode(payload))
        except (binascii.Error, ValueError) as exc:
            raise InvalidCursor("malformed payload") from exc
        if not isinstance(body, dict) or body.get("v") != CURSOR_VERSION:
            raise InvalidCursor("unsupported version")
        if body.get("e") != self._schema.entity:
            raise InvalidCursor("entity mismatch")
        if body.get("s") != sort.signature:
            raise InvalidCursor("sort mismatch")
        try:
            direction = CursorDirection(body.get("d"))
        except ValueError as exc:
            raise InvalidCursor("unknown direction") from exc
        keys = body.get("k")
        if not isinstance(keys, list) or len(keys) != len(sort):
            raise InvalidCursor("value count mismatch")
        values: list[Any] = []
        for directive, item in zip(sort, keys):
            try:
                value = _untag(item)
            except (ValueError, InvalidOperation) as exc:
                raise InvalidCursor(f"bad value for '{directive.field}'") from exc
            spec = self._schema.get(directive.field)
            if spec is None or not spec.accepts(value):
                raise InvalidCursor(f"type mismatch for '{directive.field}'")
            values.append(value)
        return CursorPosition(tuple(values), direction)


__all__ = ["CURSOR_VERSION", "CursorCodec", "CursorDirection", "CursorPosition"]
