"""响应式分析器"""

import re

from annotations import build
from locator import locate
from models import Category, Finding, Severity
from utils import attr_value, inline_font_size, require_document

RESPONSIVE_TABLE_CLASS = "table-responsive"
MIN_MOBILE_FONT_PX = 16


class ResponsiveAnalyzer:
    def __init__(self, doc):
        self.doc = require_document(doc)

    def analyze(self) -> list[Finding]:
        findings = []
        findings.extend(self._check_images())
        findings.extend(self._check_tables())
        findings.extend(self._check_font_sizes())
        return findings

    def _check_images(self) -> list[Finding]:
        findings = []
        for img in self.doc.find_all("img"):
            location = locate(img)
            if not img.has_attr("srcset") and not img.has_attr("sizes"):
                findings.append(build(
                    Category.RESPONSIVE, "Image lacks responsive attributes (srcset/sizes)",
                    location, Severity.MEDIUM,
                ))
            if not img.has_attr("width") or not img.has_attr("height"):
                findings.append(build(
                    Category.RESPONSIVE, "Image missing dimensions may cause layout shifts",
                    location, Severity.MEDIUM,
                ))
        return findings

    def _check_tables(self) -> list[Finding]:
        findings = []
        for table in self.doc.find_all("table"):
            # 父元素必须带 table-responsive 类
            parent = table.parent
            parent_classes = attr_value(parent, "class").split() if parent is not None else []
            if RESPONSIVE_TABLE_CLASS not in parent_classes:
                findings.append(build(
                    Category.RESPONSIVE, "Table may not be mobile-friendly", locate(table), Severity.MEDIUM,
                ))
        return findings

    def _check_font_sizes(self) -> list[Finding]:
        findings = []
        for el in self.doc.find_all(style=re.compile("font-size", re.IGNORECASE)):
            size = inline_font_size(attr_value(el, "style"))
            if size is not None and size < MIN_MOBILE_FONT_PX:
                findings.append(build(
                    Category.RESPONSIVE, "Font size too small for mobile devices", locate(el), Severity.MEDIUM,
                ))
        return findings
