"""
Converter factory

Creates JsonConverter instances for the serialization engine selected by
configuration, so the client can pick a wire mapping without importing engines.
"""

import logging
from typing import Any, Dict

from seam_convert.converter.config import APPLICATION_JSON_VALUE, DEFAULT_CHARSET
from seam_convert.converter.json_converter import JsonConverter
from seam_convert.engines import JsonEngine, ProtobufEngine, PydanticEngine

logger = logging.getLogger(__name__)


class EngineType:
    """Engine type constants"""
    PYDANTIC = "pydantic"
    PROTOBUF = "protobuf"


class ConverterFactory:
    """Converter factory, used to create converters and their engines"""

    @staticmethod
    def create_engine(engine_type: str, config: Dict[str, Any] = None) -> JsonEngine:
        """Create serialization engine

        Args:
            engine_type: Engine type, "pydantic" or "protobuf"
            config: Engine options

        Returns:
            JsonEngine: Engine instance

        Raises:
            ValueError: Invalid engine type
        """
        if config is None:
            config = {}

        if engine_type.lower() == EngineType.PYDANTIC:
            return PydanticEngine(
                by_alias=config.get("by_alias", True),
                exclude_none=config.get("exclude_none", False),
                strict=config.get("strict", False)
            )
        elif engine_type.lower() == EngineType.PROTOBUF:
            return ProtobufEngine(
                ignore_unknown_fields=config.get("ignore_unknown_fields", False)
            )
        else:
            raise ValueError(f"Invalid engine type: {engine_type}")

    @staticmethod
    def create(engine_type: str = EngineType.PYDANTIC, config: Dict[str, Any] = None) -> JsonConverter:
        """Create JSON converter

        Args:
            engine_type: Engine type, "pydantic" or "protobuf"
            config: Options; "mime" overrides the outgoing Content-Type base,
                "charset" overrides the encode/decode default, remaining keys
                are passed to the engine

        Returns:
            JsonConverter: Converter instance

        Raises:
            ValueError: Invalid engine type, empty mime or unknown charset
        """
        if config is None:
            config = {}

        engine = ConverterFactory.create_engine(engine_type, config)
        converter = JsonConverter(
            engine=engine,
            mime=config.get("mime", APPLICATION_JSON_VALUE),
            charset=config.get("charset", DEFAULT_CHARSET)
        )
        logger.info(f"Created {engine_type} JSON converter, content type: {converter.config.content_type}")
        return converter
