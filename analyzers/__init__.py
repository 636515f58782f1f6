from .accessibility import AccessibilityAnalyzer
from .seo import SEOAnalyzer
from .performance import PerformanceAnalyzer
from .responsive import ResponsiveAnalyzer
from .security import SecurityAnalyzer

# 与报告中 annotations 的顺序一致
ALL_ANALYZERS = (
    AccessibilityAnalyzer,
    SEOAnalyzer,
    PerformanceAnalyzer,
    ResponsiveAnalyzer,
    SecurityAnalyzer,
)

__all__ = [
    "AccessibilityAnalyzer", "SEOAnalyzer", "PerformanceAnalyzer",
    "ResponsiveAnalyzer", "SecurityAnalyzer", "ALL_ANALYZERS",
]
