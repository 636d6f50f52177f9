"""Page-level structure: document language, landmarks, bypass blocks."""
from typing import List
from a11yscan.checks.base import Check
from a11yscan.core.document import Document, Element
from a11yscan.models.schemas import Issue

SKIP_TARGETS = ("#main", "#content")

def _is_main(el: Element) -> bool:
    return el.name == "main" or el.attr("role").strip().lower() == "main"

def _is_nav(el: Element) -> bool:
    return el.name == "nav" or el.attr("role").strip().lower() == "navigation"

class HtmlLangCheck(Check):
    key = "html-lang"
    title = "Page declares its language"
    severity = "critical"

    def run(self, doc: Document) -> List[Issue]:
        root = doc.root
        if root is None or not root.has_attr("lang"):
            return [self.issue("Page missing lang attribute on html element", "<html>")]
        return []

class HtmlLangValidCheck(Check):
    key = "html-lang-valid"
    title = "Language attribute is plausible"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        root = doc.root
        if root is None or not root.has_attr("lang"):
            return []
        lang = root.attr("lang").strip()
        if len(lang) < 2:
            return [self.issue(f'Invalid lang attribute value "{lang}"', f'<html lang="{lang}">')]
        return []

class LandmarkMainCheck(Check):
    key = "landmark-main"
    title = "Page has a main landmark"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        if doc.first(_is_main) is None:
            return [self.issue("Page missing main landmark")]
        return []

class LandmarkMainMultipleCheck(Check):
    key = "landmark-main-multiple"
    title = "Page has a single main landmark"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        count = len(doc.find_where(_is_main))
        if count > 1:
            return [self.issue(f"Page has multiple main landmarks ({count})")]
        return []

class LandmarkNavCheck(Check):
    key = "landmark-nav"
    title = "Page has a navigation landmark"
    severity = "info"

    def run(self, doc: Document) -> List[Issue]:
        if doc.first(_is_nav) is None:
            return [self.issue("Page has no navigation landmark")]
        return []

class SkipLinkCheck(Check):
    key = "skip-link"
    title = "Page offers a skip-to-content link"
    severity = "warning"

    def run(self, doc: Document) -> List[Issue]:
        for link in doc.find_all("a", with_attr="href"):
            if any(target in link.attr("href") for target in SKIP_TARGETS):
                return []
        return [self.issue("Page missing skip to content link")]
