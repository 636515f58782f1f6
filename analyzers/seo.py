"""SEO 分析器"""

from annotations import build
from locator import locate
from models import Category, Finding, Severity
from utils import has_discernible_text, require_document


class SEOAnalyzer:
    def __init__(self, doc):
        self.doc = require_document(doc)

    def analyze(self) -> list[Finding]:
        findings = []
        findings.extend(self._check_h_tags())
        findings.extend(self._check_images_alt())
        findings.extend(self._check_link_text())
        return findings

    def _check_h_tags(self) -> list[Finding]:
        # 页面级问题，没有具体元素位置
        h1_count = len(self.doc.find_all("h1"))
        if h1_count == 0:
            return [build(Category.SEO, "Missing H1 heading", None, Severity.HIGH)]
        elif h1_count > 1:
            return [build(Category.SEO, "Multiple H1 headings found", None, Severity.MEDIUM)]
        return []

    def _check_images_alt(self) -> list[Finding]:
        return [
            build(Category.SEO, "Image missing alt text (affects SEO)", locate(img), Severity.MEDIUM)
            for img in self.doc.find_all("img")
            if not img.has_attr("alt")
        ]

    def _check_link_text(self) -> list[Finding]:
        return [
            build(Category.SEO, "Empty link text (bad for SEO)", locate(link), Severity.MEDIUM)
            for link in self.doc.find_all("a")
            if not has_discernible_text(link)
        ]
