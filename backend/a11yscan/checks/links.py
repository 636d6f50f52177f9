from typing import List
from a11yscan.checks.base import Check, preview
from a11yscan.core.document import Document
from a11yscan.models.schemas import Issue

GENERIC_LINK_TEXTS = {"click here", "read more", "learn more", "more", "here", "link"}
NEW_WINDOW_HINTS = ("new window", "new tab")

class LinkNameCheck(Check):
    key = "link-name"
    title = "Links have an accessible name"
    severity = "critical"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        for link in doc.find_all("a", with_attr="href"):
            if link.text or link.attr("aria-label").strip():
                continue
            # an image with alt (even empty) is counted as naming the link; img-link-alt covers the empty case
            if link.find_all("img", with_attr="alt"):
                continue
            issues.append(self.issue(
                "Link has no accessible name",
                f'<a href="{preview(link.attr("href"))}">',
            ))
        return issues

class LinkTextGenericCheck(Check):
    key = "link-text-generic"
    title = "Link text describes its purpose"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        for link in doc.find_all("a", with_attr="href"):
            text = " ".join(link.text.split())
            if text.lower() in GENERIC_LINK_TEXTS:
                issues.append(self.issue(f'Generic link text: "{text}"', f"<a>{text}</a>"))
        return issues

class LinkNewWindowCheck(Check):
    key = "link-new-window"
    title = "New-window links warn the user"
    severity = "info"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        for link in doc.find_all("a", with_attr="href"):
            if link.attr("target").strip().lower() != "_blank":
                continue
            label = " ".join([link.attr("aria-label"), link.attr("title"), link.text]).lower()
            if any(hint in label for hint in NEW_WINDOW_HINTS):
                continue
            issues.append(self.issue(
                "Link opens in new window without warning",
                f"<a>{link.text[:50]}</a>",
            ))
        return issues
