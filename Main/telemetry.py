"""
Minimal in-memory recorder for builder advisories.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Advisory:
    source: str
    message: str


class AdvisoryLog:
    """
    Minimal in-memory recorder for soft business-rule warnings.

    Builders report advisories here instead of writing to the console
    themselves. An advisory never interrupts a build step. With `echo`
    enabled every advisory is also printed as it is recorded.
    """

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.entries: List[Advisory] = []

    def warn(self, source: str, message: str):
        self.entries.append(Advisory(source=source, message=message))
        if self.echo:
            print(f"Warning: {message}")

    def messages(self) -> List[str]:
        return [entry.message for entry in self.entries]

    def clear(self):
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)
