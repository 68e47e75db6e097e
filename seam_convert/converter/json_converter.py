"""
JSON converter

Implements the Converter interface for JSON bodies. Mapping between JSON text and
objects is delegated to a JsonEngine; this module owns charset handling, stream
lifecycle and error translation.
"""

import codecs
import logging
from typing import Any, BinaryIO, Optional

from seam_convert.converter.config import (
    APPLICATION_JSON_VALUE,
    DEFAULT_CHARSET,
    ConverterConfig,
    is_supported_charset,
)
from seam_convert.converter.converter_interface import Converter, ConversionError
from seam_convert.engines import JsonEngine, JsonParseError, JsonSerializeError
from seam_convert.mime.mime_util import parse_charset
from seam_convert.mime.typed import TypedByteArray, TypedInput, TypedOutput
from seam_convert.telemetry.metrics import increment_counter, record_size
from seam_convert.telemetry.tracer import create_span

logger = logging.getLogger(__name__)

JSON_ESCAPE_ERRORS = "seam_json_escape"


def _json_escape(error):
    """Codec error handler writing unencodable characters as JSON \\u escapes"""
    if not isinstance(error, UnicodeEncodeError):
        raise error

    escaped = []
    for char in error.object[error.start:error.end]:
        code = ord(char)
        if code > 0xFFFF:
            # Astral characters become a UTF-16 surrogate pair
            code -= 0x10000
            escaped.append(f"\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}")
        else:
            escaped.append(f"\\u{code:04x}")
    return "".join(escaped), error.end


codecs.register_error(JSON_ESCAPE_ERRORS, _json_escape)


class JsonTypedOutput(TypedOutput):
    """Encoded JSON request body"""

    def __init__(self, json_bytes: bytes, mime: str, charset: str):
        self._json_bytes = json_bytes
        self._mime_type = f"{mime}; charset={charset}"

    def file_name(self) -> Optional[str]:
        return None

    def mime_type(self) -> str:
        return self._mime_type

    def length(self) -> int:
        return len(self._json_bytes)

    def write_to(self, out: BinaryIO) -> None:
        out.write(self._json_bytes)

    def get_bytes(self) -> bytes:
        return self._json_bytes

    def as_input(self) -> TypedByteArray:
        """View this body as a response body with the same bytes and MIME type"""
        return TypedByteArray(self._mime_type, self._json_bytes)

    def __repr__(self):
        return f"JsonTypedOutput(mime_type={self._mime_type!r}, length={self.length()})"


class JsonConverter(Converter):
    """
    Converter for JSON bodies
    Decoding honours the charset declared by the response, encoding always uses the
    configured charset
    """

    def __init__(self,
                 engine: JsonEngine = None,
                 mime: str = APPLICATION_JSON_VALUE,
                 charset: str = DEFAULT_CHARSET):
        """Initialize the converter

        Args:
            engine: Serialization engine, PydanticEngine when omitted
            mime: Base MIME type of outgoing bodies
            charset: Charset for encoding, and for decoding bodies that declare none

        Raises:
            ValueError: Empty mime or unknown charset
        """
        if engine is None:
            self.config = ConverterConfig(mime=mime, charset=charset)
        else:
            self.config = ConverterConfig(engine=engine, mime=mime, charset=charset)
        logger.debug(f"JsonConverter created: {self.config.to_dict()}")

    @classmethod
    def from_config(cls, config: ConverterConfig) -> "JsonConverter":
        return cls(engine=config.engine, mime=config.mime, charset=config.charset)

    @property
    def engine(self) -> JsonEngine:
        return self.config.engine

    @property
    def mime(self) -> str:
        return self.config.mime

    @property
    def charset(self) -> str:
        return self.config.charset

    def resolve_charset(self, body: TypedInput) -> str:
        """Pick the charset used to decode a body

        Args:
            body: Response body

        Returns:
            str: Charset declared by the body's MIME type, else the configured default
        """
        mime_type = body.mime_type()
        if mime_type is None:
            return self.charset

        charset = parse_charset(mime_type, self.charset)
        if charset != self.charset and not is_supported_charset(charset):
            logger.warning(f"Unknown charset {charset!r} in {mime_type!r}, using {self.charset}")
            return self.charset
        return charset

    def from_body(self, body: TypedInput, type_: Any) -> Any:
        """Decode a response body into an instance of type_

        Args:
            body: Response body, its stream is closed before returning
            type_: Target type descriptor understood by the engine

        Returns:
            Any: Decoded object

        Raises:
            ConversionError: Body unreadable, undecodable, malformed or not matching type_
        """
        charset = self.resolve_charset(body)
        attributes = {"operation": "decode"}

        with create_span("seam_convert.decode", {"mime_type": body.mime_type() or "", "charset": charset}):
            try:
                result = self._decode(body, type_, charset)
            except ConversionError:
                increment_counter("converter.errors", 1, attributes)
                raise

        increment_counter("converter.conversions", 1, attributes)
        return result

    def _decode(self, body: TypedInput, type_: Any, charset: str) -> Any:
        stream = None
        try:
            stream = body.in_stream()
            # Single read to completion, the stream may close itself at end of body
            text = stream.read().decode(charset)
            return self.engine.from_json(text, type_)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read body as {charset}: {e}")
            raise ConversionError(f"Failed to read body: {e}") from e
        except JsonParseError as e:
            logger.error(f"Failed to convert body to {type_!r}: {e}")
            raise ConversionError(f"Failed to convert body to {type_!r}") from e
        finally:
            if stream is not None:
                _close_quietly(stream)

    def to_body(self, obj: Any) -> TypedOutput:
        """Encode an object as a JSON request body in the configured charset

        Args:
            obj: Object to serialize

        Returns:
            TypedOutput: JsonTypedOutput with "<mime>; charset=<charset>" content type

        Raises:
            ConversionError: Engine cannot serialize obj
        """
        attributes = {"operation": "encode"}

        with create_span("seam_convert.encode", {"mime_type": self.mime, "charset": self.charset}):
            try:
                text = self.engine.to_json(obj)
            except JsonSerializeError as e:
                logger.error(f"Failed to convert {type(obj).__name__} to JSON: {e}")
                increment_counter("converter.errors", 1, attributes)
                raise ConversionError(f"Failed to convert {type(obj).__name__} to JSON") from e

            json_bytes = text.encode(self.charset, errors=JSON_ESCAPE_ERRORS)

        increment_counter("converter.conversions", 1, attributes)
        record_size("converter.payload_size", len(json_bytes), attributes)
        logger.debug(f"Encoded {type(obj).__name__} into {len(json_bytes)} bytes")
        return JsonTypedOutput(json_bytes, self.mime, self.charset)


def _close_quietly(stream: BinaryIO) -> None:
    try:
        stream.close()
    except Exception as e:
        logger.debug(f"Ignoring error while closing body stream: {e}")
