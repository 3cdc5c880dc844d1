"""
Typed identifiers.

Each resource kind gets its own class so that, for example, a ``DocId`` can
never be passed where a ``RoleId`` is expected even though both wrap a u32.
Identifiers of different kinds never compare equal.
"""

from __future__ import annotations

import re
import uuid
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import IdentifierParseError

U32_MAX = 2**32 - 1

_U32_TEXT = re.compile(r"\+?[0-9]+")


class Identifier:
    __slots__ = ("_value",)

    kind: ClassVar[str] = "identifier"

    def __init__(self, value: Any):
        object.__setattr__(self, "_value", self._check(value))

    @classmethod
    def _check(cls, value: Any) -> Any:
        raise NotImplementedError

    @classmethod
    def _from_text(cls, text: str) -> Any:
        raise NotImplementedError

    @classmethod
    def _is_primitive(cls, other: object) -> bool:
        raise NotImplementedError

    @classmethod
    def _primitive_schema(cls) -> core_schema.CoreSchema:
        raise NotImplementedError

    @classmethod
    def parse(cls, text: str):
        if not isinstance(text, str):
            raise TypeError(f"{cls.__name__}.parse() expects str, got {type(text).__name__}")
        try:
            return cls(cls._from_text(text))
        except ValueError as exc:
            raise IdentifierParseError(cls.kind, text, str(exc)) from exc

    @property
    def value(self) -> Any:
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._value == other._value
        if isinstance(other, Identifier):
            return NotImplemented
        if isinstance(other, str):
            try:
                return self._value == self._from_text(other)
            except ValueError:
                return False
        if self._is_primitive(other):
            return self._value == other
        return NotImplemented

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        primitive = cls._primitive_schema()
        from_primitive = core_schema.no_info_after_validator_function(cls, primitive)
        return core_schema.json_or_python_schema(
            json_schema=from_primitive,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_primitive]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda ident: ident.value,
                return_schema=primitive,
            ),
        )


class UuidIdentifier(Identifier):
    __slots__ = ()

    @classmethod
    def _check(cls, value: Any) -> uuid.UUID:
        if not isinstance(value, uuid.UUID):
            raise TypeError(f"{cls.__name__} wraps uuid.UUID, got {type(value).__name__}")
        return value

    @classmethod
    def _from_text(cls, text: str) -> uuid.UUID:
        return uuid.UUID(text)

    @classmethod
    def _is_primitive(cls, other: object) -> bool:
        return isinstance(other, uuid.UUID)

    @classmethod
    def _primitive_schema(cls) -> core_schema.CoreSchema:
        return core_schema.uuid_schema()


class IntIdentifier(Identifier):
    """Identifier backed by an unsigned 32-bit integer."""

    __slots__ = ()

    @classmethod
    def _check(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{cls.__name__} wraps int, got {type(value).__name__}")
        if not (0 <= value <= U32_MAX):
            raise ValueError(f"{cls.__name__} must be between 0 and {U32_MAX}, got {value}")
        return value

    @classmethod
    def _from_text(cls, text: str) -> int:
        if not _U32_TEXT.fullmatch(text):
            raise ValueError("not an unsigned integer")
        value = int(text)
        if value > U32_MAX:
            raise ValueError("number too large for u32")
        return value

    @classmethod
    def _is_primitive(cls, other: object) -> bool:
        return isinstance(other, int) and not isinstance(other, bool)

    @classmethod
    def _primitive_schema(cls) -> core_schema.CoreSchema:
        return core_schema.int_schema(ge=0, le=U32_MAX, strict=True)


class StrIdentifier(Identifier):
    __slots__ = ()

    @classmethod
    def _check(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{cls.__name__} wraps str, got {type(value).__name__}")
        return value

    @classmethod
    def _from_text(cls, text: str) -> str:
        return text

    @classmethod
    def _is_primitive(cls, other: object) -> bool:
        return isinstance(other, str)

    @classmethod
    def _primitive_schema(cls) -> core_schema.CoreSchema:
        return core_schema.str_schema(strict=True)


class ChannelId(UuidIdentifier):
    __slots__ = ()
    kind = "channel id"


class MessageId(UuidIdentifier):
    __slots__ = ()
    kind = "message id"


class ListItemId(UuidIdentifier):
    __slots__ = ()
    kind = "list item id"


class CategoryId(IntIdentifier):
    __slots__ = ()
    kind = "category id"


class DocId(IntIdentifier):
    __slots__ = ()
    kind = "doc id"


class ForumThreadId(IntIdentifier):
    __slots__ = ()
    kind = "forum thread id"


class EmoteId(IntIdentifier):
    __slots__ = ()
    kind = "emote id"


class RoleId(IntIdentifier):
    __slots__ = ()
    kind = "role id"


class WebhookId(StrIdentifier):
    __slots__ = ()
    kind = "webhook id"


class UserId(StrIdentifier):
    __slots__ = ()
    kind = "user id"


class ServerId(StrIdentifier):
    __slots__ = ()
    kind = "server id"


class GroupId(StrIdentifier):
    __slots__ = ()
    kind = "group id"


ContentId = ChannelId | DocId | ForumThreadId | ListItemId | MessageId
"""Anything a reaction can be attached to."""
