"""
Converter Module

Converters translate between typed bodies and Python objects:
- Converter: interface the call dispatcher depends on
- JsonConverter: JSON bodies, backed by a pluggable serialization engine
- ConverterFactory: builds converters from an engine type and an options dict
"""

from .converter_interface import Converter, ConversionError
from .config import APPLICATION_JSON_VALUE, TEXT_HTML_VALUE, DEFAULT_CHARSET, ConverterConfig
from .json_converter import JsonConverter, JsonTypedOutput
from .converter_factory import ConverterFactory, EngineType

__all__ = [
    "Converter",
    "ConversionError",
    "APPLICATION_JSON_VALUE",
    "TEXT_HTML_VALUE",
    "DEFAULT_CHARSET",
    "ConverterConfig",
    "JsonConverter",
    "JsonTypedOutput",
    "ConverterFactory",
    "EngineType",
]
