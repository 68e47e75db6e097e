"""
OpenTelemetry Integration Module

Provides tracing and metrics for conversions:
- tracer: internal spans around encode/decode
- metrics: conversion and error counters, payload size histogram

Only the OpenTelemetry API is used here; without a configured SDK every call is a no-op.
"""

from .tracer import create_span
from .metrics import get_counter, get_histogram, increment_counter, record_size

__all__ = [
    "create_span",
    "get_counter",
    "get_histogram",
    "increment_counter",
    "record_size",
]
