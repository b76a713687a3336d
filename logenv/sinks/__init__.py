"""Sink implementations."""

from .memory import InMemorySink
from .stdout import StdoutSink

__all__ = ["StdoutSink", "InMemorySink"]
