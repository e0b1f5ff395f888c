"""Shared base for models that are serialized onto the wire.

The identity platform parsers reject ``null`` for optional properties, so a
field listed in ``omit_when_absent`` is dropped from the serialized output
whenever it holds no value. An empty or whitespace-only string counts as no
value, so a blank ``title`` never appears as ``""``. This is done here rather
than through ``exclude_none`` so that null-valued entries inside caller
mappings (``inputs``, ``attributes``) are left untouched.
"""
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer

from userflow.core.errors import InvalidArgumentError


def require_text(value: Any, argument: str) -> str:
    """Reject missing, non-string, empty or whitespace-only values.

    Raises InvalidArgumentError directly; pydantic only wraps ValueError and
    AssertionError, so this reaches the caller unchanged.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError("cannot be empty.", argument=argument)
    return value


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    omit_when_absent: ClassVar[frozenset[str]] = frozenset()

    def wire_overlay(self) -> dict[str, Any]:
        """Extra top-level properties merged after the declared fields."""
        return {}

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in self.omit_when_absent:
            if not _is_absent(getattr(self, name)):
                continue
            data.pop(name, None)
            alias = type(self).model_fields[name].alias
            if alias:
                data.pop(alias, None)
        data.update(self.wire_overlay())
        return data
