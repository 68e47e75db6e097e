"""
Typed body interfaces

Defines the contracts the transport layer uses to hand bodies to converters
(TypedInput) and to receive bodies from them (TypedOutput).
"""

import abc
import io
from typing import BinaryIO, Optional


class TypedInput(abc.ABC):
    """Binary data with an associated MIME type, read from the wire"""

    @abc.abstractmethod
    def mime_type(self) -> Optional[str]:
        """Declared MIME type, or None when the transport reported none"""
        pass

    @abc.abstractmethod
    def in_stream(self) -> BinaryIO:
        """Open the body as a readable byte stream

        The caller owns the returned stream and must close it.
        """
        pass


class TypedOutput(abc.ABC):
    """Binary data with an associated MIME type, written to the wire"""

    @abc.abstractmethod
    def file_name(self) -> Optional[str]:
        """Original file name, None when not applicable"""
        pass

    @abc.abstractmethod
    def mime_type(self) -> str:
        pass

    @abc.abstractmethod
    def length(self) -> int:
        """Length in bytes, or -1 if unknown"""
        pass

    @abc.abstractmethod
    def write_to(self, out: BinaryIO) -> None:
        """Write the body bytes to the given sink"""
        pass


class TypedByteArray(TypedInput, TypedOutput):
    """In-memory body usable both as request and as response"""

    def __init__(self, mime_type: Optional[str], data: bytes):
        if mime_type is None:
            mime_type = "application/unknown"
        if data is None:
            raise ValueError("data must not be None")
        self._mime_type = mime_type
        self._data = bytes(data)

    def get_bytes(self) -> bytes:
        return self._data

    def file_name(self) -> Optional[str]:
        return None

    def mime_type(self) -> str:
        return self._mime_type

    def length(self) -> int:
        return len(self._data)

    def write_to(self, out: BinaryIO) -> None:
        out.write(self._data)

    def in_stream(self) -> BinaryIO:
        return io.BytesIO(self._data)

    def __eq__(self, other):
        if not isinstance(other, TypedByteArray):
            return NotImplemented
        return self._mime_type == other._mime_type and self._data == other._data

    def __hash__(self):
        return hash((self._mime_type, self._data))

    def __repr__(self):
        return f"{type(self).__name__}(mime_type={self._mime_type!r}, length={len(self._data)})"


class TypedString(TypedByteArray):
    """Plain text body encoded as UTF-8"""

    def __init__(self, string: str):
        super().__init__("text/plain; charset=UTF-8", string.encode("utf-8"))

    def __str__(self):
        return self._data.decode("utf-8")
