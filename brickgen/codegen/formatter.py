"""Whitespace normalisation for generated source text."""

from __future__ import annotations

from typing import List


class SourceFormatter:
    """Normalises line endings, trailing spaces, and blank-line runs."""

    def __init__(self, max_blank_lines: int = 1) -> None:
        self.max_blank_lines = max_blank_lines

    def format(self, source: str) -> str:
        normalized = source.replace("\r\n", "\n").replace("\r", "\n")
        cleaned: List[str] = []
        blank_run = 0
        in_template_literal = False

        for line in normalized.split("\n"):
            stripped = line.rstrip()
            if line.count("`") % 2 == 1:
                in_template_literal = not in_template_literal

            if not stripped and not in_template_literal:
                blank_run += 1
                if blank_run > self.max_blank_lines or not cleaned:
                    continue
                cleaned.append("")
                continue

            cleaned.append(stripped)
            blank_run = 0

        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"


__all__ = ["SourceFormatter"]
