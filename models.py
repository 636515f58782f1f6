"""数据结构定义"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Severity(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(Enum):
    ACCESSIBILITY = "accessibility"
    SEO = "seo"
    PERFORMANCE = "performance"
    RESPONSIVE = "responsive"
    SECURITY = "security"


class AnalysisError(ValueError):
    """分析失败（输入问题，而非内部错误）"""


class InvalidInputError(AnalysisError):
    """未提供文档，或文档类型不受支持"""


class ParseError(AnalysisError):
    """标记无法解析为可用的文档树"""


class LocatorError(ValueError):
    """尝试定位非元素节点"""


@dataclass(frozen=True)
class ElementLocator:
    """元素的稳定结构定位信息"""
    xpath: str
    tag: str
    classes: tuple[str, ...] = ()
    id: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    text_preview: str = ""

    def __post_init__(self):
        # 只读视图，创建后不可修改
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def to_dict(self) -> dict:
        return {
            "xpath": self.xpath,
            "tag": self.tag,
            "classes": list(self.classes),
            "id": self.id,
            "attributes": dict(self.attributes),
            "text_preview": self.text_preview,
        }


@dataclass(frozen=True)
class Impact:
    score: int  # 1-3
    areas_affected: tuple[str, ...]
    potential_loss: str

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "areas_affected": list(self.areas_affected),
            "potential_loss": self.potential_loss,
        }


@dataclass(frozen=True)
class Resources:
    documentation: tuple[str, ...]
    tools: tuple[str, ...]
    best_practices: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "documentation": list(self.documentation),
            "tools": list(self.tools),
            "best_practices": list(self.best_practices),
        }


@dataclass(frozen=True)
class Finding:
    """单条分析发现（创建后不可修改）"""
    category: Category
    issue: str
    severity: Severity
    suggestion: str
    impact: Impact
    resources: Resources
    location: Optional[ElementLocator] = None

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "issue": self.issue,
            "location": self.location.to_dict() if self.location else None,
            "severity": self.severity.value,
            "suggestion": self.suggestion,
            "impact": self.impact.to_dict(),
            "resources": self.resources.to_dict(),
        }


@dataclass(frozen=True)
class Summary:
    total_issues: int
    critical_issues: int
    by_category: Mapping[str, int] = field(default_factory=dict, hash=False)  # category value -> count
    by_severity: Mapping[str, int] = field(default_factory=dict, hash=False)  # severity value -> count

    def __post_init__(self):
        object.__setattr__(self, "by_category", MappingProxyType(dict(self.by_category)))
        object.__setattr__(self, "by_severity", MappingProxyType(dict(self.by_severity)))

    @classmethod
    def from_findings(cls, findings: list[Finding]) -> "Summary":
        by_category: dict[str, int] = {}
        by_severity: dict[str, int] = {}
        for f in findings:
            by_category[f.category.value] = by_category.get(f.category.value, 0) + 1
            by_severity[f.severity.value] = by_severity.get(f.severity.value, 0) + 1
        return cls(
            total_issues=len(findings),
            critical_issues=sum(1 for f in findings if f.severity == Severity.HIGH),
            by_category=by_category,
            by_severity=by_severity,
        )

    def to_dict(self) -> dict:
        return {
            "total_issues": self.total_issues,
            "critical_issues": self.critical_issues,
            "by_category": dict(self.by_category),
            "by_severity": dict(self.by_severity),
        }


@dataclass(frozen=True)
class Report:
    """完整分析报告"""
    annotations: tuple[Finding, ...]
    summary: Summary
    timestamp: str
    analyzed_element: str = ""
    source: str = ""  # URL 或文件路径（可选）

    @property
    def meta(self) -> dict:
        meta = {"timestamp": self.timestamp, "analyzed_element": self.analyzed_element}
        if self.source:
            meta["source"] = self.source
        return meta

    def to_dict(self) -> dict:
        return {
            "annotations": [f.to_dict() for f in self.annotations],
            "meta": self.meta,
            "summary": self.summary.to_dict(),
        }
