"""发现构建器：统一补全 severity / suggestion / impact / resources

检查器只负责判断“哪里有问题”，具体的建议文本、影响评估和参考资料
全部在这里按类别查表生成，保证五个检查器输出一致。
"""

import re

from models import Category, ElementLocator, Finding, Impact, Resources, Severity

DEFAULT_SEVERITY = {
    Category.SECURITY: Severity.HIGH,
    Category.ACCESSIBILITY: Severity.MEDIUM,
    Category.PERFORMANCE: Severity.MEDIUM,
    Category.RESPONSIVE: Severity.MEDIUM,
    Category.SEO: Severity.HIGH,
}

IMPACT_SCORE = {
    Severity.HIGH: 3,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
}

GENERIC_SUGGESTION = "Review and address the identified issue according to web standards."

# (正则, 建议) 按顺序匹配，第一个命中的生效
SUGGESTION_RULES = {
    Category.ACCESSIBILITY: [
        (r"alt text", "Add descriptive alt text to images. Example: alt='Description'"),
        (r"aria-label", "Include aria-labels for context. Example: aria-label='Close'"),
        (r"button", "Give buttons visible text or an aria-label. Example: <button aria-label='Close'>"),
        (r"form control|label",
         "Associate every form control with a <label for='id'> or an aria-label/aria-labelledby attribute."),
        (r"anchor|discernible text", "Give links descriptive text or an aria-label that explains the destination."),
    ],
    Category.SEO: [
        (r"meta description", "Add a meta description tag with a summary of the page."),
        (r"title", "Add a descriptive title tag for the page."),
        (r"missing h1", "Add a single H1 heading that describes the main topic of the page."),
        (r"multiple h1", "Keep exactly one H1 per page and use H2-H6 for sub-sections."),
        (r"alt text", "Describe images with alt text so search engines can index them."),
        (r"link text", "Use descriptive anchor text instead of empty links."),
    ],
    Category.PERFORMANCE: [
        (r"lazy loading", "Add loading='lazy' to images to improve performance."),
        (r"script", "Use async or defer for non-critical scripts."),
        (r"dimensions", "Set explicit width and height attributes on images to avoid reflows."),
    ],
    Category.RESPONSIVE: [
        (r"viewport",
         "Include a proper viewport meta tag: <meta name='viewport' content='width=device-width, initial-scale=1'>"),
        (r"srcset|sizes", "Provide srcset and sizes so the browser can pick an image for the screen size."),
        (r"layout shift", "Set width and height on images so space is reserved before they load."),
        (r"table", "Wrap tables in a container with class 'table-responsive' that scrolls horizontally."),
        (r"font size", "Use a base font size of at least 16px (1rem) for body text on mobile."),
    ],
    Category.SECURITY: [
        (r"https", "Ensure all resources use HTTPS."),
        (r"csrf", "Implement CSRF tokens for forms."),
        (r"form action", "Submit forms to an HTTPS endpoint."),
        (r"insecure http", "Ensure all resources use HTTPS."),
        (r"event handler", "Move inline event handlers into external scripts and enforce a Content-Security-Policy."),
    ],
}

IMPACT_AREAS = {
    Category.ACCESSIBILITY: ("User Experience", "Legal Compliance", "Brand Reputation"),
    Category.PERFORMANCE: ("Page Load Time", "User Engagement", "Conversion Rate"),
    Category.SEO: ("Search Rankings", "Organic Traffic", "Brand Visibility"),
    Category.RESPONSIVE: ("Mobile Usability", "User Engagement", "Conversion Rate"),
    Category.SECURITY: ("Data Protection", "User Trust", "Legal Compliance"),
}
GENERIC_IMPACT_AREAS = ("General User Experience",)

HIGH_SEVERITY_LOSS = {
    Category.SECURITY: "Potential data breach or security vulnerability",
    Category.ACCESSIBILITY: "May prevent users from accessing content",
    Category.PERFORMANCE: "Significant impact on page load time",
    Category.RESPONSIVE: "Poor mobile experience may reduce engagement",
    Category.SEO: "Reduced search visibility and organic traffic",
}
GENERIC_LOSS = "Minor impact on user experience"

RESOURCES = {
    Category.ACCESSIBILITY: Resources(
        documentation=("https://www.w3.org/WAI/WCAG21/quickref/", "https://a11yproject.com/"),
        tools=("WAVE", "aXe", "NVDA"),
        best_practices=("Use semantic HTML", "Provide alt text", "Ensure keyboard navigation"),
    ),
    Category.SEO: Resources(
        documentation=("https://developers.google.com/search/docs/fundamentals/seo-starter-guide",),
        tools=("Google Search Console", "Screaming Frog", "Ahrefs"),
        best_practices=("Use descriptive titles", "Optimize meta descriptions"),
    ),
    Category.PERFORMANCE: Resources(
        documentation=("https://web.dev/performance-scoring/",
                       "https://developers.google.com/web/fundamentals/performance"),
        tools=("Lighthouse", "WebPageTest", "GTmetrix"),
        best_practices=("Optimize images", "Minimize render-blocking resources"),
    ),
    Category.RESPONSIVE: Resources(
        documentation=("https://web.dev/responsive-web-design-basics/",),
        tools=("Chrome DevTools (Device Mode)",),
        best_practices=("Use media queries", "Test on multiple devices"),
    ),
    Category.SECURITY: Resources(
        documentation=("https://owasp.org/Top10/",),
        tools=("OWASP ZAP", "Burp Suite"),
        best_practices=("Use HTTPS", "Implement proper authentication"),
    ),
}
GENERIC_RESOURCES = Resources(
    documentation=("https://web.dev/learn",),
    tools=("Browser DevTools",),
    best_practices=("Follow web standards",),
)


def resolve_severity(category: Category, priority: Severity | None = None) -> Severity:
    if priority is not None:
        return priority
    return DEFAULT_SEVERITY.get(category, Severity.LOW)


def resolve_suggestion(category: Category, issue: str) -> str:
    for pattern, text in SUGGESTION_RULES.get(category, []):
        if re.search(pattern, issue, re.IGNORECASE):
            return text
    return GENERIC_SUGGESTION


def resolve_impact(category: Category, severity: Severity) -> Impact:
    if severity == Severity.HIGH:
        potential_loss = HIGH_SEVERITY_LOSS.get(category, GENERIC_LOSS)
    else:
        potential_loss = GENERIC_LOSS
    return Impact(
        score=IMPACT_SCORE[severity],
        areas_affected=IMPACT_AREAS.get(category, GENERIC_IMPACT_AREAS),
        potential_loss=potential_loss,
    )


def resolve_resources(category: Category) -> Resources:
    return RESOURCES.get(category, GENERIC_RESOURCES)


def build(category: Category | str, issue: str,
          location: ElementLocator | None = None,
          priority: Severity | str | None = None) -> Finding:
    """生成一条完整的发现；priority 显式给出时优先于类别默认值"""
    category = Category(category)
    if priority is not None:
        priority = Severity(priority)
    if not issue:
        raise ValueError("issue 不能为空")

    severity = resolve_severity(category, priority)
    return Finding(
        category=category,
        issue=issue,
        location=location,
        severity=severity,
        suggestion=resolve_suggestion(category, issue),
        impact=resolve_impact(category, severity),
        resources=resolve_resources(category),
    )
