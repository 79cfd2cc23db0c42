# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class ScriptedConsole:
    """
    Deterministic console for unit tests.

    - Feeds queued lines to read_line (EOFError once exhausted)
    - Captures prompts and written output for assertions
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)
