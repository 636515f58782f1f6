"""分析引擎：解析文档、依次运行五个检查器、汇总报告"""

import logging
from concurrent.futures import ThreadPoolExecutor

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from analyzers import ALL_ANALYZERS
from models import Finding, InvalidInputError, ParseError, Report, Summary
from utils import is_element, iso_timestamp

logger = logging.getLogger(__name__)

PARSER = "html.parser"


def parse_document(source) -> Tag:
    """把标记文本（或已解析的文档）转换为待扫描的根元素"""
    if source is None:
        raise InvalidInputError("No HTML document supplied")

    if isinstance(source, Tag):
        soup = source
    elif isinstance(source, (str, bytes)):
        if not source.strip():
            raise InvalidInputError("No HTML document supplied (markup is empty)")
        try:
            soup = BeautifulSoup(source, PARSER)
        except ParserRejectedMarkup as exc:
            raise ParseError(f"Markup could not be parsed: {exc}") from exc
    else:
        raise InvalidInputError(f"Unsupported document type: {type(source).__name__}")

    if is_element(soup):
        return soup

    # 优先扫描 <html>，片段则扫描整个解析结果
    root = soup.find("html")
    if root is not None:
        return root
    if soup.find() is None:
        raise ParseError("Markup does not contain any HTML element")
    return soup


class WebAnalyzer:
    """页面质量分析引擎

    每次 analyze() 都重新创建检查器，调用之间不保留任何状态。
    workers > 1 时检查器在线程池中并行执行，结果仍按固定的类别顺序拼接。
    """

    def __init__(self, workers: int = 1):
        if workers < 1:
            raise ValueError("workers 必须 >= 1")
        self.workers = workers

    def analyze(self, source, *, source_name: str = "") -> Report:
        root = parse_document(source)
        checkers = [analyzer_cls(root) for analyzer_cls in ALL_ANALYZERS]

        if self.workers > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                # map 按提交顺序返回，与完成顺序无关
                results = list(pool.map(lambda checker: checker.analyze(), checkers))
        else:
            results = [checker.analyze() for checker in checkers]

        annotations: list[Finding] = []
        for checker, findings in zip(checkers, results):
            logger.debug("%s: %d findings", type(checker).__name__, len(findings))
            annotations.extend(findings)

        summary = Summary.from_findings(annotations)
        logger.info("Analysis finished: %d issues (%d critical)",
                    summary.total_issues, summary.critical_issues)

        return Report(
            annotations=tuple(annotations),
            summary=summary,
            timestamp=iso_timestamp(),
            analyzed_element=root.name if is_element(root) else "document",
            source=source_name,
        )


def analyze(source, *, source_name: str = "") -> Report:
    """用默认配置分析一个文档"""
    return WebAnalyzer().analyze(source, source_name=source_name)
