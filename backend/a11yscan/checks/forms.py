from typing import List
from a11yscan.checks.base import Check, preview
from a11yscan.core.document import Document, Element
from a11yscan.models.schemas import Issue

# input types that are labelled by their own value/alt, or not rendered at all
UNLABELLED_INPUT_TYPES = {"hidden", "submit", "button", "image", "reset"}
BUTTON_INPUT_TYPES = {"submit", "button"}

def _needs_label(el: Element) -> bool:
    if el.name in ("textarea", "select"):
        return True
    return el.name == "input" and el.attr("type").strip().lower() not in UNLABELLED_INPUT_TYPES

def _is_button(el: Element) -> bool:
    if el.name == "button":
        return True
    return el.name == "input" and el.attr("type").strip().lower() in BUTTON_INPUT_TYPES

class FormLabelCheck(Check):
    key = "form-label"
    title = "Form fields have labels"
    severity = "critical"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        label_targets = {label.attr("for") for label in doc.find_all("label", with_attr="for")}
        for field in doc.find_where(_needs_label):
            if field.attr("aria-label").strip() or field.attr("aria-labelledby").strip():
                continue
            field_id = field.attr("id")
            if not field_id:
                issues.append(self.issue("Form input has no label", f"<{field.name}>"))
            elif field_id not in label_targets:
                issues.append(self.issue(
                    "Form input has no associated label",
                    f'<{field.name} id="{preview(field_id)}">',
                ))
        return issues

class ButtonNameCheck(Check):
    key = "button-name"
    title = "Buttons have an accessible name"
    severity = "critical"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        for button in doc.find_where(_is_button):
            if button.text or button.attr("value").strip() or button.attr("aria-label").strip():
                continue
            issues.append(self.issue("Button has no accessible name", f"<{button.name}>"))
        return issues
