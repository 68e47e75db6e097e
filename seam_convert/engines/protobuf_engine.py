"""
Protobuf serialization engine

Provides conversion between Protobuf messages and JSON text through
google.protobuf.json_format, preserving proto field names.
"""

import json
import logging
from typing import Any, Dict, Type

from google.protobuf.json_format import MessageToDict, ParseDict, ParseError
from google.protobuf.message import Message

from .engine_interface import JsonEngine, JsonParseError, JsonSerializeError

logger = logging.getLogger(__name__)


def protobuf_to_dict(message: Message) -> Dict[str, Any]:
    """Convert Protobuf message to dictionary

    Args:
        message: Protobuf message object

    Returns:
        Dict: Dictionary containing message fields
    """
    if message is None:
        return {}

    return MessageToDict(message, preserving_proto_field_name=True)


def dict_to_protobuf(data: Dict[str, Any], message_type: Type[Message],
                     ignore_unknown_fields: bool = False) -> Message:
    """Convert dictionary to Protobuf message

    Args:
        data: Dictionary data
        message_type: Protobuf message type
        ignore_unknown_fields: Skip keys with no matching field instead of failing

    Returns:
        Message: Protobuf message object
    """
    message = message_type()
    if data:
        ParseDict(data, message, ignore_unknown_fields=ignore_unknown_fields)
    return message


class ProtobufEngine(JsonEngine):
    """JSON engine for generated protobuf Message classes"""

    def __init__(self, ignore_unknown_fields: bool = False):
        self.ignore_unknown_fields = ignore_unknown_fields

    def to_json(self, obj: Any) -> str:
        if obj is None:
            return "{}"
        if not isinstance(obj, Message):
            raise JsonSerializeError(f"ProtobufEngine cannot serialize {type(obj).__name__}")

        return json.dumps(protobuf_to_dict(obj), separators=(",", ":"), ensure_ascii=False)

    def from_json(self, text: str, type_: Any) -> Any:
        if not (isinstance(type_, type) and issubclass(type_, Message)):
            raise TypeError(f"ProtobufEngine target must be a Message class, got {type_!r}")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise JsonParseError(f"Malformed JSON: {e}") from e

        if not isinstance(data, dict):
            raise JsonParseError(f"Expected JSON object for {type_.__name__}, got {type(data).__name__}")

        try:
            return dict_to_protobuf(data, type_, self.ignore_unknown_fields)
        except ParseError as e:
            logger.debug(f"ParseDict into {type_.__name__} failed: {e}")
            raise JsonParseError(f"Cannot parse JSON as {type_.__name__}: {e}") from e

    def options(self) -> dict:
        return {"ignore_unknown_fields": self.ignore_unknown_fields}
