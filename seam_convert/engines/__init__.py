"""
Serialization Engines

Structural mapping between JSON text and typed Python objects:
- pydantic: BaseModel, dataclasses, TypedDict, primitives and generic aliases
- protobuf: generated protobuf Message classes

Engines are stateless after construction and safe to share between threads.
"""

from .engine_interface import JsonEngine, EngineError, JsonParseError, JsonSerializeError
from .pydantic_engine import PydanticEngine
from .protobuf_engine import ProtobufEngine

__all__ = [
    "JsonEngine",
    "EngineError",
    "JsonParseError",
    "JsonSerializeError",
    "PydanticEngine",
    "ProtobufEngine",
]
