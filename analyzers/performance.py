"""性能分析器"""

from annotations import build
from locator import locate
from models import Category, Finding, Severity
from utils import require_document


class PerformanceAnalyzer:
    def __init__(self, doc):
        self.doc = require_document(doc)

    def analyze(self) -> list[Finding]:
        findings = []
        findings.extend(self._check_images())
        findings.extend(self._check_blocking_scripts())
        return findings

    def _check_images(self) -> list[Finding]:
        findings = []
        for img in self.doc.find_all("img"):
            location = locate(img)
            if not img.has_attr("loading"):
                findings.append(build(
                    Category.PERFORMANCE, "Image should use lazy loading", location, Severity.MEDIUM,
                ))
            if not img.has_attr("width") or not img.has_attr("height"):
                findings.append(build(
                    Category.PERFORMANCE, "Image missing dimensions", location, Severity.MEDIUM,
                ))
        return findings

    def _check_blocking_scripts(self) -> list[Finding]:
        findings = []
        for script in self.doc.find_all("script", src=True):
            if not script.has_attr("async") and not script.has_attr("defer"):
                findings.append(build(
                    Category.PERFORMANCE, "Script blocking page render", locate(script), Severity.HIGH,
                ))
        return findings
