"""
Converter interface

Defines the unified interface every converter implements. The call dispatcher invokes
to_body before sending a request and from_body after a response body arrives, so
swapping the wire format never touches the dispatcher.
"""

import abc
from typing import Any

from seam_convert.mime.typed import TypedInput, TypedOutput


class ConversionError(Exception):
    """A body could not be converted to or from an object

    The underlying error is always available as __cause__.
    """


class Converter(abc.ABC):
    """Converter interface, defines the methods every converter must implement"""

    @abc.abstractmethod
    def from_body(self, body: TypedInput, type_: Any) -> Any:
        """Convert a response body to an object of the given type

        Args:
            body: Response body from the transport layer
            type_: Target type descriptor

        Returns:
            Any: Instance of type_

        Raises:
            ConversionError: Body unreadable, malformed, or not matching type_
        """
        pass

    @abc.abstractmethod
    def to_body(self, obj: Any) -> TypedOutput:
        """Convert an object to a request body

        Args:
            obj: Object to send

        Returns:
            TypedOutput: Body ready to be written to the wire
        """
        pass
