"""
Serialization engine interface

Defines the unified interface every engine (pydantic, protobuf) implements so the
converter does not depend on a particular mapping library.
"""

import abc
from typing import Any


class EngineError(Exception):
    """Base class for engine failures"""


class JsonParseError(EngineError):
    """Text is not well-formed JSON or does not match the target type"""


class JsonSerializeError(EngineError):
    """Object cannot be represented as JSON by the engine"""


class JsonEngine(abc.ABC):
    """Engine interface, defines the methods every serialization engine must implement"""

    @abc.abstractmethod
    def to_json(self, obj: Any) -> str:
        """Serialize an object to JSON text

        Args:
            obj: Object to serialize

        Returns:
            str: JSON text

        Raises:
            JsonSerializeError: Object is not serializable by this engine
        """
        pass

    @abc.abstractmethod
    def from_json(self, text: str, type_: Any) -> Any:
        """Parse JSON text into an instance of the target type

        Args:
            text: JSON text
            type_: Target type descriptor

        Returns:
            Any: Instance of type_

        Raises:
            JsonParseError: Malformed JSON or structural mismatch
        """
        pass

    def options(self) -> dict:
        """Engine options, used for logging and config export"""
        return {}
