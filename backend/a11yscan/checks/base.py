from typing import Dict, List, Optional
from a11yscan.core.document import Document
from a11yscan.models.schemas import Issue

ATTR_PREVIEW = 50      # chars of an attribute value kept in a snippet
SNIPPET_MAX = 120

WCAG_REFERENCES: Dict[str, str] = {
    "img-alt": "1.1.1 Non-text Content (A)",
    "img-alt-empty": "1.1.1 Non-text Content (A)",
    "img-link-alt": "2.4.4 Link Purpose (A)",
    "heading-h1": "1.3.1 Info and Relationships (A)",
    "heading-h1-multiple": "1.3.1 Info and Relationships (A)",
    "heading-order": "1.3.1 Info and Relationships (A)",
    "heading-empty": "1.3.1 Info and Relationships (A)",
    "link-name": "2.4.4 Link Purpose (A)",
    "link-text-generic": "2.4.4 Link Purpose (A)",
    "link-new-window": "3.2.5 Change on Request (AAA)",
    "form-label": "1.3.1 Info and Relationships (A)",
    "button-name": "4.1.2 Name, Role, Value (A)",
    "table-headers": "1.3.1 Info and Relationships (A)",
    "table-caption": "1.3.1 Info and Relationships (A)",
    "html-lang": "3.1.1 Language of Page (A)",
    "html-lang-valid": "3.1.1 Language of Page (A)",
    "landmark-main": "1.3.1 Info and Relationships (A)",
    "landmark-nav": "1.3.1 Info and Relationships (A)",
    "skip-link": "2.4.1 Bypass Blocks (A)",
    "focus-visible": "2.4.7 Focus Visible (AA)",
    "color-alone": "1.4.1 Use of Color (A)",
}

def wcag_reference(rule_id: str) -> str:
    return WCAG_REFERENCES.get(rule_id, "")

def preview(value: str, limit: int = ATTR_PREVIEW) -> str:
    return value[:limit]

def snippet(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    if len(text) > SNIPPET_MAX:
        return text[:SNIPPET_MAX - 3] + "..."
    return text

class Check:
    """
    One named rule. Subclasses set `key`, `title`, `severity` and implement
    `run(doc)`, returning their own issues. Checks hold no per-scan state.
    """
    key: str = ""
    title: str = ""
    severity: str = "info"

    @property
    def wcag_reference(self) -> str:
        return wcag_reference(self.key)

    def issue(self, description: str, element: Optional[str] = None) -> Issue:
        return Issue(
            rule_id=self.key,
            severity=self.severity,
            description=description,
            element_snippet=snippet(element),
            wcag_reference=self.wcag_reference,
        )

    def run(self, doc: Document) -> List[Issue]:
        raise NotImplementedError
