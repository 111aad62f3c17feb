"""Translator port."""

from typing import Protocol


class Translator(Protocol):
    """Resolves translation keys."""

    def trans(self, key: str, domain: str = "backend") -> str: ...
