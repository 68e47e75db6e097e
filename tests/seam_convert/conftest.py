"""
Shared fixtures for converter tests
"""
import io
from typing import Optional

import pytest

from seam_convert.mime.typed import TypedInput

from sample_models import Item, Order


class TrackingStream(io.BytesIO):
    """BytesIO that counts close calls and can fail on read or close

    With auto_close it behaves like a transport response stream: it closes itself
    once the body is fully read, or when a read fails. Those closes are not counted.
    """

    def __init__(self, data: bytes, fail_read: bool = False, fail_close: bool = False,
                 auto_close: bool = False):
        super().__init__(data)
        self.close_count = 0
        self.fail_read = fail_read
        self.fail_close = fail_close
        self.auto_close = auto_close

    def read(self, *args):
        if self.fail_read:
            if self.auto_close:
                super().close()
            raise OSError("connection reset while reading body")
        data = super().read(*args)
        if self.auto_close and self.tell() >= len(self.getvalue()):
            super().close()
        return data

    def close(self):
        self.close_count += 1
        super().close()
        if self.fail_close and self.close_count == 1:
            raise OSError("close failed")


class StubInput(TypedInput):
    """Response body with a declared mime type (or None) over a TrackingStream"""

    def __init__(self, data: bytes, mime_type: Optional[str] = None, **stream_options):
        self._mime_type = mime_type
        self.stream = TrackingStream(data, **stream_options)

    def mime_type(self):
        return self._mime_type

    def in_stream(self):
        return self.stream


@pytest.fixture
def make_input():
    """Factory for StubInput bodies"""
    return StubInput


@pytest.fixture
def sample_order():
    return Order(
        order_id="order-123",
        items=[
            Item(name="widget", quantity=2, tags=["blue", "small"]),
            Item(name="gadget", quantity=1),
        ],
        note="leave at the door",
    )
