"""Heuristics over raw markup and page text rather than the element tree."""
import re
from typing import List
from a11yscan.checks.base import Check
from a11yscan.core.document import Document
from a11yscan.models.schemas import Issue

OUTLINE_REMOVED = re.compile(r"outline\s*:\s*(?:none|0)", re.IGNORECASE)
COLOR_WORDS = ["red", "green", "blue", "yellow", "orange", "purple", "pink"]
COLOR_INSTRUCTION = re.compile(
    r"\b(?:click|select|choose)\s+(?:the\s+)?(" + "|".join(COLOR_WORDS) + r")\b",
    re.IGNORECASE,
)

class FocusVisibleCheck(Check):
    key = "focus-visible"
    title = "Focus indicators are not removed"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        match = OUTLINE_REMOVED.search(doc.markup)
        if match:
            return [self.issue(
                "CSS may be removing focus indicators (outline: none found)",
                match.group(0),
            )]
        return []

class ColorAloneCheck(Check):
    key = "color-alone"
    title = "Instructions do not rely on color alone"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        match = COLOR_INSTRUCTION.search(doc.text)
        if match:
            return [self.issue(
                "Content may rely on color alone to convey information",
                match.group(0),
            )]
        return []
