"""Presentation collaborators that render human-readable messages.

The circulation core only ever calls ``display(message)``; where the text
ends up (terminal, UI, captured list) is up to the implementation.
"""
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO


class Display(ABC):
    """Something that can show a message to a person."""

    @abstractmethod
    def display(self, message: str) -> None:
        """Render one message."""


class ConsoleDisplay(Display):
    """Writes each message as a line to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def display(self, message: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{message}\n")
        stream.flush()


class RecordingDisplay(Display):
    """Keeps messages in memory instead of rendering them."""

    def __init__(self):
        self.messages: List[str] = []

    def display(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


class NullDisplay(Display):
    """Discards every message."""

    def display(self, message: str) -> None:
        return None
