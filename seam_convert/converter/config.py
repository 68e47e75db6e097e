"""
Configuration for JSON converters
"""
import codecs
from dataclasses import dataclass, field
from typing import Any, Dict

from seam_convert.engines import JsonEngine, PydanticEngine

APPLICATION_JSON_VALUE = "application/json"
TEXT_HTML_VALUE = "text/html"
DEFAULT_CHARSET = "UTF-8"


def is_supported_charset(charset: str) -> bool:
    """Check whether Python has a codec for the charset name"""
    if not charset:
        return False
    try:
        codecs.lookup(charset)
    except LookupError:
        return False
    return True


@dataclass(frozen=True)
class ConverterConfig:
    """Immutable converter settings, fixed for the lifetime of the owning client"""
    engine: JsonEngine = field(default_factory=PydanticEngine)
    mime: str = APPLICATION_JSON_VALUE
    charset: str = DEFAULT_CHARSET

    def __post_init__(self):
        if self.engine is None:
            raise ValueError("engine must not be None")
        if not self.mime:
            raise ValueError("mime must be a non-empty string")
        if not is_supported_charset(self.charset):
            raise ValueError(f"Unsupported charset: {self.charset!r}")

    @property
    def content_type(self) -> str:
        """Outgoing Content-Type, mime plus charset parameter"""
        return f"{self.mime}; charset={self.charset}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging"""
        return {
            "engine": type(self.engine).__name__,
            "engine_options": self.engine.options(),
            "mime": self.mime,
            "charset": self.charset,
        }
