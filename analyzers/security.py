"""安全分析器"""

from annotations import build
from locator import locate
from models import Category, Finding, Severity
from utils import attr_value, is_insecure_url, require_document

INLINE_EVENT_HANDLERS = ("onclick", "onmouseover", "onload")


class SecurityAnalyzer:
    def __init__(self, doc):
        self.doc = require_document(doc)

    def analyze(self) -> list[Finding]:
        findings = []
        findings.extend(self._check_mixed_content())
        findings.extend(self._check_inline_handlers())
        findings.extend(self._check_form_actions())
        return findings

    def _check_mixed_content(self) -> list[Finding]:
        findings = []
        for el in self.doc.find_all(lambda tag: tag.has_attr("src") or tag.has_attr("href")):
            # src 为空时才看 href
            url = attr_value(el, "src") or attr_value(el, "href")
            if url and is_insecure_url(url):
                findings.append(build(
                    Category.SECURITY, "Resource loaded over insecure HTTP", locate(el), Severity.HIGH,
                ))
        return findings

    def _check_inline_handlers(self) -> list[Finding]:
        return [
            build(Category.SECURITY, "Inline event handler detected which may pose security risks",
                  locate(el), Severity.MEDIUM)
            for el in self.doc.find_all(
                lambda tag: any(tag.has_attr(handler) for handler in INLINE_EVENT_HANDLERS)
            )
        ]

    def _check_form_actions(self) -> list[Finding]:
        findings = []
        for form in self.doc.find_all("form"):
            action = attr_value(form, "action")
            if action and is_insecure_url(action):
                findings.append(build(
                    Category.SECURITY, "Form action uses insecure HTTP", locate(form), Severity.HIGH,
                ))
        return findings
