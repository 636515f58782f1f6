"""ResponsiBot - 页面质量分析 CLI 入口"""

import argparse
import logging
import os
import sys
import time
from urllib.parse import urlparse

from engine import WebAnalyzer
from fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, FetchError, fetch_html
from models import AnalysisError, Category, Severity
from report import filter_annotations, generate_report, report_to_json
from utils import format_duration, now_str


def is_url(target: str) -> bool:
    return urlparse(target).scheme in ("http", "https")


def load_source(target: str, timeout: float, user_agent: str) -> str:
    """target 可以是 URL、本地 HTML 文件，或 "-"（标准输入）"""
    if target == "-":
        return sys.stdin.read()
    if is_url(target):
        return fetch_html(target, timeout=timeout, user_agent=user_agent)
    with open(target, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def default_output_path(target: str, output_format: str) -> str:
    """默认输出到 reports/ 目录，时间戳命名；JSON 默认写标准输出"""
    if output_format == "json":
        return "-"
    reports_dir = os.path.join(os.getcwd(), "reports")
    os.makedirs(reports_dir, exist_ok=True)
    if is_url(target):
        name = urlparse(target).netloc.replace(".", "_")
    elif target == "-":
        name = "stdin"
    else:
        name = os.path.splitext(os.path.basename(target))[0]
    return os.path.join(reports_dir, f"{now_str()}_{name}.html")


def print_summary(report, stream):
    summary = report.summary
    print(f"🔍 {summary.total_issues} issues found ({summary.critical_issues} critical)", file=stream)
    for category in Category:
        count = summary.by_category.get(category.value, 0)
        print(f"  {category.value}: {count}", file=stream)


def run_analysis(target: str, output: str = "", output_format: str = "html",
                 category: str = "all", severity: str = "all",
                 timeout: float = DEFAULT_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT,
                 workers: int = 1) -> int:
    """执行完整分析流程，返回进程退出码"""
    # JSON 输出到 stdout 时，进度信息改写到 stderr
    to_stdout = output_format == "json" and output in ("", "-")
    progress = sys.stderr if to_stdout else sys.stdout

    start_time = time.time()
    try:
        source = load_source(target, timeout, user_agent)
        report = WebAnalyzer(workers=workers).analyze(source, source_name="" if target == "-" else target)
    except FetchError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except AnalysisError as e:
        print(f"❌ Invalid HTML input: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ Cannot read {target}: {e}", file=sys.stderr)
        return 1

    print_summary(report, progress)
    print(f"  took {format_duration(time.time() - start_time)}", file=progress)

    annotations = filter_annotations(report.annotations, category, severity)
    output = output or default_output_path(target, output_format)

    if output_format == "json":
        text = report_to_json(report, annotations)
        if output == "-":
            print(text)
        else:
            with open(output, "w", encoding="utf-8") as f:
                f.write(text)
            print(f"📄 Report written: {output}", file=progress)
    else:
        generate_report(report, output, annotations)

    return 0


def env_float(name: str, default: float) -> float:
    value = os.environ.get(name, "")
    try:
        return float(value) if value else default
    except ValueError:
        return default


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="ResponsiBot - page quality analysis (accessibility, SEO, performance, responsive, security)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  python main.py https://example.com
  python main.py page.html --format json -o report.json
  curl -s https://example.com | python main.py - --severity high --format json

Environment:
  RESPONSIBOT_TIMEOUT     request timeout in seconds
  RESPONSIBOT_USER_AGENT  User-Agent header for page fetches"""
    )
    parser.add_argument("target", help="URL, local HTML file, or - for stdin")
    parser.add_argument("-o", "--output", default="",
                        help="report path (default: reports/<timestamp>_<name>.html, JSON goes to stdout)")
    parser.add_argument("--format", dest="output_format", choices=["html", "json"], default="html",
                        help="report format (default: html)")
    parser.add_argument("--category", choices=["all"] + [c.value for c in Category], default="all",
                        help="only include findings of this category")
    parser.add_argument("--severity", choices=["all"] + [s.value for s in Severity], default="all",
                        help="only include findings of this severity")
    parser.add_argument("--timeout", type=float, default=None,
                        help=f"request timeout in seconds (default {DEFAULT_TIMEOUT:g})")
    parser.add_argument("--user-agent", default="", help="User-Agent header for URL targets")
    parser.add_argument("--workers", type=int, default=1, help="run checkers on N threads (default 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    args = parser.parse_args(argv)

    if args.workers < 1:
        parser.error("--workers must be >= 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # 环境变量兜底
    timeout = args.timeout if args.timeout is not None else env_float("RESPONSIBOT_TIMEOUT", DEFAULT_TIMEOUT)
    user_agent = args.user_agent or os.environ.get("RESPONSIBOT_USER_AGENT", "") or DEFAULT_USER_AGENT

    return run_analysis(
        args.target, args.output, args.output_format,
        args.category, args.severity, timeout, user_agent, args.workers,
    )


if __name__ == "__main__":
    sys.exit(main())
