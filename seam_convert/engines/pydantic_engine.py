"""
Pydantic serialization engine

Maps JSON to arbitrary annotated types through pydantic.TypeAdapter, which covers
models, dataclasses, TypedDicts, primitives and parameterized generics such as
List[Item] or Dict[str, int].
"""

import functools
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .engine_interface import JsonEngine, JsonParseError, JsonSerializeError

logger = logging.getLogger(__name__)

_ANY_ADAPTER = TypeAdapter(Any)


@functools.lru_cache(maxsize=256)
def _cached_adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def adapter_for(type_: Any) -> TypeAdapter:
    """Get the TypeAdapter for a target type, cached when the descriptor is hashable"""
    try:
        hash(type_)
    except TypeError:
        return TypeAdapter(type_)
    return _cached_adapter(type_)


class PydanticEngine(JsonEngine):
    """JSON engine backed by pydantic v2"""

    def __init__(self, by_alias: bool = True, exclude_none: bool = False, strict: bool = False):
        """Initialize the engine

        Args:
            by_alias: Use field aliases as JSON keys when serializing, matching how
                fields are looked up when parsing
            exclude_none: Omit fields whose value is None when serializing
            strict: Disable type coercion when parsing
        """
        self.by_alias = by_alias
        self.exclude_none = exclude_none
        self.strict = strict

    def to_json(self, obj: Any) -> str:
        try:
            data = _ANY_ADAPTER.dump_json(obj, by_alias=self.by_alias, exclude_none=self.exclude_none)
        except PydanticSerializationError as e:
            raise JsonSerializeError(f"Cannot serialize {type(obj).__name__}: {e}") from e
        return data.decode("utf-8")

    def from_json(self, text: str, type_: Any) -> Any:
        adapter = adapter_for(type_)
        try:
            return adapter.validate_json(text, strict=True if self.strict else None)
        except ValidationError as e:
            logger.debug(f"Validation against {type_!r} failed with {e.error_count()} error(s)")
            raise JsonParseError(f"Cannot parse JSON as {type_!r}: {e}") from e

    def options(self) -> dict:
        return {
            "by_alias": self.by_alias,
            "exclude_none": self.exclude_none,
            "strict": self.strict,
        }
