"""Field codec: wire naming and omission rules for request/response models.

Models subclass :class:`WireModel`.  Python attribute names are snake_case;
their wire names are derived with pydantic's camelCase alias generator, and
any field whose wire name is not plain camelCase (``type``, ``from``,
``amountInUSD``) declares an explicit ``Field(alias=...)``.

Closed enumerations subclass :class:`WireEnum`, whose member *values* are the
exact wire strings.  Three conventions occur across the API surface:

* SCREAMING_SNAKE_CASE (``IN_PROGRESS``, ``FREEZE_WALLET``)
* SCREAMING-KEBAB-CASE (``ETH-SEPOLIA``, ``ARC-TESTNET``)
* one-off spellings (``circle_4337_v1``, ``FungibleAsset`` and the empty
  string used for a native asset with no token standard)
"""

from __future__ import annotations

import functools
import json
import uuid
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from circle_w3s.errors import DecodeError, InvalidEnumValue


def new_idempotency_key() -> str:
    """Return a fresh UUIDv4 idempotency key."""
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class WireEnum(str, Enum):
    """A closed set of wire strings.

    ``str()`` and f-string formatting yield the wire value, so members can be
    dropped straight into URL paths and messages.
    """

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    @classmethod
    def wire_values(cls) -> list[str]:
        """Return every wire string of this enum, in declaration order."""
        return [member.value for member in cls]

    @classmethod
    @functools.cache
    def _folded_table(cls) -> dict[str, "WireEnum"]:
        # Members are fixed once the class exists, so one table per class.
        return {member.value.casefold(): member for member in cls}

    @classmethod
    def parse(cls, text: str, *, ignore_case: bool = False):
        """Map a wire string to its member.

        Exact matches are looked up in the table the ``Enum`` machinery builds
        at class-definition time.  With *ignore_case*, a case-folded table is
        consulted as a fallback (``eth-sepolia`` -> ``ETH-SEPOLIA``).

        Raises
        ------
        InvalidEnumValue
            If *text* names no member.
        """
        member = cls._value2member_map_.get(text)
        if member is not None:
            return member
        if ignore_case:
            member = cls._folded_table().get(text.casefold())
            if member is not None:
                return member
        raise InvalidEnumValue(cls.__name__, text, cls.wire_values())


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class WireModel(BaseModel):
    """Base for every request and response type.

    Encoding drops unset optional fields entirely (never ``null``), and
    decoding treats a missing optional key as unset.  Unknown keys sent by
    the server are ignored so that additive API changes do not break
    decoding.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def encode(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def decode(cls, obj: Any):
        """Validate a decoded JSON value into this model.

        Raises
        ------
        DecodeError
            If a required key is missing or a value has the wrong JSON type.
            Validation is strict: ``"yes"`` is not a bool and ``"400"`` or
            ``400.0`` is not an int.
        """
        try:
            return cls.model_validate_json(json.dumps(obj), strict=True)
        except ValidationError as exc:
            raise DecodeError(f"{cls.__name__}: {exc}") from exc


class PageParams(WireModel):
    """Pagination cursor accepted by every list endpoint.

    Cursors are opaque: ``page_before`` / ``page_after`` are forwarded
    exactly as the server returned them.  ``page_size`` must lie in
    ``[1, 50]``; the server enforces the range.

    List parameter models inherit from this class so that the cursor fields
    sit at the top level of the query string.
    """

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    page_before: Optional[str] = None
    page_after: Optional[str] = None
    page_size: Optional[int] = None


class IdempotentRequest(WireModel):
    """Mixin for mutating requests that carry an idempotency key.

    A fresh key is generated per instance.  Pass ``idempotency_key=...``
    explicitly to replay the same logical operation after a transport
    failure.
    """

    idempotency_key: str = Field(default_factory=new_idempotency_key)


class ErrorEnvelope(WireModel):
    """Body returned by the Circle API on non-2xx responses."""

    code: int
    message: str
