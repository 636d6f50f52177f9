from typing import List
from a11yscan.checks.base import Check
from a11yscan.core.document import Document
from a11yscan.models.schemas import Issue

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

class HeadingH1Check(Check):
    key = "heading-h1"
    title = "Page has an H1"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        if not doc.find_all("h1"):
            return [self.issue("Page missing H1 heading")]
        return []

class HeadingH1MultipleCheck(Check):
    key = "heading-h1-multiple"
    title = "Page has a single H1"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        count = len(doc.find_all("h1"))
        if count > 1:
            return [self.issue(f"Multiple H1 headings found ({count})")]
        return []

class HeadingOrderCheck(Check):
    key = "heading-order"
    title = "Heading levels do not skip"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        prev_level = 0
        for heading in doc.find_all(HEADING_TAGS):
            level = int(heading.name[1])
            if prev_level and level > prev_level + 1:
                issues.append(self.issue(
                    f"Heading level skipped from H{prev_level} to H{level}",
                    f"<{heading.name}>{heading.text[:50]}",
                ))
            prev_level = level
        return issues

class HeadingEmptyCheck(Check):
    key = "heading-empty"
    title = "Headings have text"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        return [
            self.issue("Empty heading found", f"<{heading.name}>")
            for heading in doc.find_all(HEADING_TAGS)
            if not heading.text
        ]
