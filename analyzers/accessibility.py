"""无障碍分析器"""

from annotations import build
from locator import locate
from models import Category, Finding, Severity
from utils import attr_value, has_accessible_name, has_discernible_text, require_document, text_content

FORM_CONTROLS = ["input", "select", "textarea"]


class AccessibilityAnalyzer:
    def __init__(self, doc):
        self.doc = require_document(doc)

    def analyze(self) -> list[Finding]:
        findings = []
        findings.extend(self._check_image_alt())
        findings.extend(self._check_buttons())
        findings.extend(self._check_form_labels())
        findings.extend(self._check_anchors())
        return findings

    def _check_image_alt(self) -> list[Finding]:
        return [
            build(Category.ACCESSIBILITY, "Missing alt text on image", locate(img), Severity.HIGH)
            for img in self.doc.find_all("img")
            if not img.has_attr("alt")
        ]

    def _check_buttons(self) -> list[Finding]:
        findings = []
        for button in self.doc.find_all("button"):
            if not has_accessible_name(button) and not text_content(button).strip():
                findings.append(build(
                    Category.ACCESSIBILITY, "Button missing accessible name",
                    locate(button), Severity.HIGH,
                ))
        return findings

    def _check_form_labels(self) -> list[Finding]:
        findings = []
        for control in self.doc.find_all(FORM_CONTROLS):
            if has_accessible_name(control):
                continue
            control_id = attr_value(control, "id")
            if control_id and self.doc.find("label", attrs={"for": control_id}):
                continue
            findings.append(build(
                Category.ACCESSIBILITY, "Form control missing label",
                locate(control), Severity.HIGH,
            ))
        return findings

    def _check_anchors(self) -> list[Finding]:
        return [
            build(Category.ACCESSIBILITY, "Anchor element missing discernible text",
                  locate(anchor), Severity.MEDIUM)
            for anchor in self.doc.find_all("a")
            if not has_discernible_text(anchor)
        ]
