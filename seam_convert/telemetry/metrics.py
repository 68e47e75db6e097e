"""
OpenTelemetry Metrics Collection

Counters and histograms recorded by the converter. Instruments are created lazily and
cached per name.
"""

import logging
import threading
from typing import Any, Dict

from opentelemetry import metrics

logger = logging.getLogger(__name__)

METER_NAME = "seam_convert"

# Global instrument caches
_counters = {}
_histograms = {}
_lock = threading.Lock()


def get_counter(name: str, description: str, unit: str = "1"):
    """Get or create counter

    Args:
        name: Counter name
        description: Counter description
        unit: Counter unit (default "1", representing count)

    Returns:
        Counter: Counter object
    """
    with _lock:
        if name not in _counters:
            meter = metrics.get_meter(METER_NAME)
            _counters[name] = meter.create_counter(
                name=name,
                description=description,
                unit=unit
            )
        return _counters[name]


def get_histogram(name: str, description: str, unit: str = "By"):
    """Get or create histogram

    Args:
        name: Histogram name
        description: Histogram description
        unit: Histogram unit (default "By", bytes)

    Returns:
        Histogram: Histogram object
    """
    with _lock:
        if name not in _histograms:
            meter = metrics.get_meter(METER_NAME)
            _histograms[name] = meter.create_histogram(
                name=name,
                description=description,
                unit=unit
            )
        return _histograms[name]


def increment_counter(name: str, amount: int = 1, attributes: Dict[str, Any] = None):
    """Increment counter value

    Args:
        name: Counter name
        amount: Amount to increment
        attributes: Attribute labels
    """
    counter = get_counter(name, f"Counter for {name}")
    counter.add(amount, attributes or {})


def record_size(name: str, size_bytes: int, attributes: Dict[str, Any] = None):
    """Record payload size histogram

    Args:
        name: Histogram name
        size_bytes: Payload size in bytes
        attributes: Attribute labels
    """
    histogram = get_histogram(name, f"Size histogram for {name}")
    histogram.record(size_bytes, attributes or {})
