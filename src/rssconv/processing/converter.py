from __future__ import annotations

from typing import Protocol, Sequence

from rssconv.types import ReplacementRule


class Converter(Protocol):
    """Interface for element-wise document transforms."""

    def convert(self, documents: Sequence[str]) -> list[str]:
        """Return one converted document per input, in the same order."""


class ReplaceConverter(Converter):
    """Literal (non-regex) global search/replace applied to every document."""

    def __init__(self, rule: ReplacementRule):
        self.rule = rule

    @classmethod
    def from_words(cls, search: str = "", replace: str = "") -> "ReplaceConverter":
        return cls(ReplacementRule(search=search, replace=replace))

    def convert(self, documents: Sequence[str]) -> list[str]:
        return [replace_literal(document, self.rule) for document in documents]


def replace_literal(text: str, rule: ReplacementRule) -> str:
    """
    Replace every non-overlapping occurrence of ``rule.search`` in ``text``.

    An empty search literal matches before every character and at the end, so
    ``"abc"`` with ``("", "-")`` becomes ``"-a-b-c-"``.
    """

    return text.replace(rule.search, rule.replace)
