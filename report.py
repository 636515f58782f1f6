"""报告输出：HTML（Jinja2 模板，内联 CSS，单文件）、JSON、过滤"""

import json

from jinja2 import Template

from models import Category, Finding, Report, Severity

TEMPLATE = Template('''<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>ResponsiBot - {{ report.source or "page" }} report</title>
<style>
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
    background: #f0f2f5;
    color: #333;
    line-height: 1.6;
}
.container { max-width: 1100px; margin: 0 auto; padding: 20px; }

.header {
    text-align: center;
    padding: 32px 20px;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    color: white;
    border-radius: 16px;
    margin-bottom: 24px;
}
.header h1 { font-size: 2em; margin-bottom: 8px; }
.header .meta { margin-top: 8px; font-size: 0.9em; opacity: 0.8; }

/* 汇总卡片 */
.summary-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(160px, 1fr));
    gap: 16px;
    margin-bottom: 24px;
}
.summary-item {
    background: white;
    border-radius: 12px;
    padding: 20px;
    text-align: center;
    box-shadow: 0 2px 12px rgba(0,0,0,0.08);
}
.summary-label { display: block; font-size: 0.9em; color: #666; }
.summary-value { display: block; font-size: 2em; font-weight: bold; }

.section {
    background: white;
    border-radius: 12px;
    margin-bottom: 24px;
    box-shadow: 0 2px 12px rgba(0,0,0,0.08);
    overflow: hidden;
}
.section-header {
    padding: 16px 24px;
    background: #fafbfc;
    border-bottom: 1px solid #eee;
    display: flex;
    justify-content: space-between;
    align-items: center;
}
.section-header h2 { font-size: 1.2em; text-transform: capitalize; }

.finding { padding: 16px 24px; border-bottom: 1px solid #f0f0f0; }
.finding:last-child { border-bottom: none; }
.finding-title { font-weight: 600; margin-bottom: 4px; }
.badge {
    display: inline-block;
    padding: 1px 10px;
    border-radius: 12px;
    font-size: 0.8em;
    font-weight: bold;
    margin-right: 8px;
    text-transform: uppercase;
}
.badge-high { background: #ffebee; color: #b71c1c; }
.badge-medium { background: #fff8e1; color: #f57f17; }
.badge-low { background: #e3f2fd; color: #1565c0; }
.finding-location { font-family: monospace; font-size: 0.8em; color: #999; word-break: break-all; }
.finding-rec {
    margin-top: 6px;
    padding: 6px 10px;
    background: #f8f9fa;
    border-left: 3px solid #667eea;
    font-size: 0.85em;
    color: #555;
    border-radius: 0 4px 4px 0;
}
.finding-impact, .finding-resources { font-size: 0.85em; color: #666; margin-top: 4px; }
.finding-resources a { color: #667eea; }

.footer { text-align: center; padding: 30px; color: #999; font-size: 0.85em; }

@media (max-width: 600px) {
    .summary-grid { grid-template-columns: repeat(2, 1fr); }
    .header h1 { font-size: 1.5em; }
}
</style>
</head>
<body>
<div class="container">

<div class="header">
    <h1>ResponsiBot</h1>
    <div class="subtitle">Page quality report{% if report.source %} for {{ report.source }}{% endif %}</div>
    <div class="meta">Scanned &lt;{{ report.analyzed_element }}&gt; · {{ report.timestamp }}</div>
</div>

<div class="summary-grid">
    <div class="summary-item">
        <span class="summary-label">Total Issues</span>
        <span class="summary-value">{{ report.summary.total_issues }}</span>
    </div>
    <div class="summary-item">
        <span class="summary-label">Critical Issues</span>
        <span class="summary-value">{{ report.summary.critical_issues }}</span>
    </div>
{% for category, count in report.summary.by_category.items() %}
    <div class="summary-item">
        <span class="summary-label">{{ category|capitalize }}</span>
        <span class="summary-value">{{ count }}</span>
    </div>
{% endfor %}
</div>

{% for category, findings in groups %}
<div class="section">
    <div class="section-header">
        <h2>{{ category.value }}</h2>
        <span>{{ findings|length }} issue{{ "s" if findings|length != 1 }}</span>
    </div>
    {% for f in findings %}
    <div class="finding">
        <div class="finding-title"><span class="badge badge-{{ f.severity.value }}">{{ f.severity.value }}</span>{{ f.issue }}</div>
        {% if f.location %}
        <div class="finding-location">{{ f.location.xpath }}</div>
        {% endif %}
        <div class="finding-rec">{{ f.suggestion }}</div>
        <div class="finding-impact">
            Impact {{ f.impact.score }}/3 · {{ f.impact.areas_affected|join(", ") }} · {{ f.impact.potential_loss }}
        </div>
        <div class="finding-resources">
            {% for url in f.resources.documentation %}<a href="{{ url }}">{{ url }}</a> {% endfor %}
            {% if f.resources.tools %}· Tools: {{ f.resources.tools|join(", ") }}{% endif %}
        </div>
    </div>
    {% endfor %}
</div>
{% endfor %}

<div class="footer">
    ResponsiBot v1.0<br>
    Report generated {{ report.timestamp }}
</div>

</div>
</body>
</html>''', autoescape=True)


def filter_annotations(annotations, category=None, severity=None) -> list[Finding]:
    """按类别 / 严重度过滤；None 或 "all" 表示不过滤"""
    if category in (None, "all"):
        category = None
    else:
        category = Category(category)
    if severity in (None, "all"):
        severity = None
    else:
        severity = Severity(severity)

    return [
        f for f in annotations
        if (category is None or f.category == category)
        and (severity is None or f.severity == severity)
    ]


def group_by_category(annotations) -> list[tuple[Category, list[Finding]]]:
    """按类别分组，保持发现的原始顺序"""
    groups: dict[Category, list[Finding]] = {}
    for f in annotations:
        groups.setdefault(f.category, []).append(f)
    return list(groups.items())


def report_to_json(report: Report, annotations=None, indent: int = 2) -> str:
    """序列化为 JSON；annotations 给出时替换发现列表（summary 仍是完整统计）"""
    payload = report.to_dict()
    if annotations is not None:
        payload["annotations"] = [f.to_dict() for f in annotations]
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def render_html(report: Report, annotations=None) -> str:
    """渲染 HTML；annotations 给出时只展示这些发现（汇总数字不变）"""
    if annotations is None:
        annotations = report.annotations
    return TEMPLATE.render(report=report, groups=group_by_category(annotations))


def generate_report(report: Report, output_path: str, annotations=None):
    """生成 HTML 报告文件"""
    html = render_html(report, annotations)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
    print(f"📄 Report written: {output_path}")
