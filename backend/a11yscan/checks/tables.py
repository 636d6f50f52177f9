from typing import List
from a11yscan.checks.base import Check
from a11yscan.core.document import Document
from a11yscan.models.schemas import Issue

class TableHeadersCheck(Check):
    key = "table-headers"
    title = "Tables have header cells"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        return [
            self.issue("Table has no header cells", "<table>")
            for table in doc.find_all("table")
            if not table.find_all("th")
        ]

class TableCaptionCheck(Check):
    key = "table-caption"
    title = "Tables have a caption or label"
    severity = "info"

    def run(self, doc: Document) -> List[Issue]:
        return [
            self.issue("Table has no caption or aria-label", "<table>")
            for table in doc.find_all("table")
            if not table.find_all("caption") and not table.attr("aria-label").strip()
        ]
