from typing import List
from a11yscan.checks.base import Check, preview
from a11yscan.core.document import Document
from a11yscan.models.schemas import ImageAltEntry, ImageAltReport, ImageAltSummary, Issue

PRESENTATION_ROLES = {"presentation", "none"}

class ImgAltCheck(Check):
    key = "img-alt"
    title = "Images have an alt attribute"
    severity = "critical"

    def run(self, doc: Document) -> List[Issue]:
        return [
            self.issue("Image missing alt attribute", f'<img src="{preview(img.attr("src"))}...">')
            for img in doc.find_all("img", without_attr="alt")
        ]

class ImgAltEmptyCheck(Check):
    key = "img-alt-empty"
    title = "Empty alt text is intentional"
    severity = "info"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        for img in doc.find_all("img", with_attr="alt"):
            if img.attr("alt").strip():
                continue
            # empty alt is fine on images explicitly marked decorative
            if img.attr("role").strip().lower() in PRESENTATION_ROLES:
                continue
            issues.append(self.issue(
                "Image has empty alt. Verify it is decorative.",
                f'<img src="{preview(img.attr("src"))}..." alt="">',
            ))
        return issues

class ImgLinkAltCheck(Check):
    key = "img-link-alt"
    title = "Linked images have a text alternative"
    severity = "critical"

    def run(self, doc: Document) -> List[Issue]:
        issues = []
        for img in doc.find_all("img"):
            if img.attr("alt").strip():
                continue
            link = img.closest(lambda el: el.name == "a")
            if link is None or link.text:
                continue
            issues.append(self.issue(
                "Linked image has no alt text and link has no text content",
                f'<a href="{preview(link.attr("href"))}"><img src="{preview(img.attr("src"))}"></a>',
            ))
        return issues


def alt_text_report(doc: Document, url: str) -> ImageAltReport:
    """Inventory every <img> on the page by alt-text status."""
    images: List[ImageAltEntry] = []
    for img in doc.find_all("img"):
        if not img.has_attr("alt"):
            entry = ImageAltEntry(src=preview(img.attr("src"), 200), alt=None, status="missing")
        elif not img.attr("alt").strip():
            entry = ImageAltEntry(src=preview(img.attr("src"), 200), alt="", status="empty")
        else:
            entry = ImageAltEntry(src=preview(img.attr("src"), 200), alt=img.attr("alt"), status="ok")
        images.append(entry)

    total = len(images)
    has_alt = sum(1 for i in images if i.status == "ok")
    summary = ImageAltSummary(
        total=total,
        has_alt=has_alt,
        missing=sum(1 for i in images if i.status == "missing"),
        empty=sum(1 for i in images if i.status == "empty"),
        compliance_rate=round(has_alt / total * 100, 1) if total else 100.0,
    )
    return ImageAltReport(url=url, images=images, summary=summary)
