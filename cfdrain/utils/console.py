from __future__ import annotations

import sys
from typing import TextIO

from cfdrain.constants import Color


class Console:
    _instance: Console | None = None

    def __new__(cls) -> Console:
        if cls._instance is None:
            cls._instance = super(Console, cls).__new__(cls)
        return cls._instance

    def print(self, message: str, color: str = "", bold: bool = False) -> None:
        color = color + (Color.BOLD if bold else "")
        end = Color.RESET if color != "" or bold else ""
        sys.stdout.write(color + message + end + "\n")
        sys.stdout.flush()

    def failure(self, message: str, bold: bool = False) -> None:
        self.print(message=message, color=Color.RED, bold=bold)

    def warning(self, message: str, bold: bool = False) -> None:
        self.print(message=message, color=Color.YELLOW, bold=bold)

    def info(self, message: str, bold: bool = False) -> None:
        self.print(message=message, color="", bold=bold)

    def prompt(self, message: str) -> None:
        """Write a message without a trailing newline so the answer follows it."""
        sys.stdout.write(message)
        sys.stdout.flush()

    def read_line(self, stream: TextIO) -> str:
        # readline returns "" at end of stream, which reads as an empty answer
        return stream.readline().strip()

    def confirm(self, message: str, stream: TextIO) -> bool:
        self.prompt(f"{message} [y/N] ")
        response = self.read_line(stream).lower()
        return response in ("y", "yes")
