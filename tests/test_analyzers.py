import pytest

from analyzers import (
    AccessibilityAnalyzer,
    PerformanceAnalyzer,
    ResponsiveAnalyzer,
    SecurityAnalyzer,
    SEOAnalyzer,
)
from models import Category, InvalidInputError, Severity


def issues(findings):
    return [f.issue for f in findings]


@pytest.mark.parametrize("analyzer_cls", [
    AccessibilityAnalyzer, SEOAnalyzer, PerformanceAnalyzer, ResponsiveAnalyzer, SecurityAnalyzer,
])
def test_analyzers_require_parsed_document(analyzer_cls):
    with pytest.raises(InvalidInputError):
        analyzer_cls("<html></html>")


def test_analyze_twice_returns_same_findings(parse):
    analyzer = AccessibilityAnalyzer(parse("<img><img alt=''>"))
    assert analyzer.analyze() == analyzer.analyze()


# --- 无障碍 ---

def test_no_images_no_alt_findings(parse):
    findings = AccessibilityAnalyzer(parse("<html><body><p>hi</p></body></html>")).analyze()
    assert "Missing alt text on image" not in issues(findings)


def test_image_alt(parse):
    findings = AccessibilityAnalyzer(parse('<img src="a.png"><img src="b.png" alt="">')).analyze()
    assert issues(findings) == ["Missing alt text on image"]
    assert findings[0].severity == Severity.HIGH
    assert findings[0].location.attributes == {"src": "a.png"}


def test_buttons(parse):
    soup = parse(
        "<button></button>"
        "<button>  </button>"
        "<button>Save</button>"
        '<button aria-label="Close"></button>'
        '<button aria-labelledby="lbl"></button>'
    )
    findings = AccessibilityAnalyzer(soup).analyze()
    assert issues(findings) == ["Button missing accessible name"] * 2
    assert all(f.severity == Severity.HIGH for f in findings)


def test_form_labels(parse):
    soup = parse(
        '<label for="name">Name</label><input id="name">'
        '<input id="email">'
        '<input aria-label="Search">'
        '<select aria-labelledby="x"></select>'
        "<textarea></textarea>"
    )
    findings = AccessibilityAnalyzer(soup).analyze()
    assert issues(findings) == ["Form control missing label"] * 2
    assert [f.location.tag for f in findings] == ["input", "textarea"]


def test_anchors(parse):
    soup = parse('<a href="/a"></a><a href="/b">B</a><a href="/c" aria-label="C"></a>')
    findings = AccessibilityAnalyzer(soup).analyze()
    assert issues(findings) == ["Anchor element missing discernible text"]
    assert findings[0].severity == Severity.MEDIUM


# --- SEO ---

@pytest.mark.parametrize("markup, expected", [
    ("<h1>One</h1>", []),
    ("<p>none</p>", [("Missing H1 heading", Severity.HIGH)]),
    ("<h1>A</h1><h1>B</h1><h1>C</h1>", [("Multiple H1 headings found", Severity.MEDIUM)]),
])
def test_h1_rules(parse, markup, expected):
    findings = SEOAnalyzer(parse(markup)).analyze()
    assert [(f.issue, f.severity) for f in findings] == expected
    assert all(f.location is None for f in findings)


def test_seo_image_alt_and_links(parse):
    findings = SEOAnalyzer(parse('<h1>T</h1><img src="x.png"><a href="/"></a>')).analyze()
    assert [(f.issue, f.severity) for f in findings] == [
        ("Image missing alt text (affects SEO)", Severity.MEDIUM),
        ("Empty link text (bad for SEO)", Severity.MEDIUM),
    ]
    assert all(f.category == Category.SEO for f in findings)


def test_missing_alt_reported_by_both_categories(parse):
    soup = parse('<h1>T</h1><img src="1.png"><img src="2.png" alt="ok"><img src="3.png">')
    a11y = [f for f in AccessibilityAnalyzer(soup).analyze() if "alt text" in f.issue]
    seo = [f for f in SEOAnalyzer(soup).analyze() if "alt text" in f.issue]
    assert len(a11y) == len(seo) == 2
    assert {f.severity for f in a11y} == {Severity.HIGH}
    assert {f.severity for f in seo} == {Severity.MEDIUM}
    assert [f.location.xpath for f in a11y] == [f.location.xpath for f in seo]


# --- 性能 ---

def test_performance_images(parse):
    soup = parse(
        "<img>"
        '<img loading="lazy" width="10" height="10">'
        '<img loading="lazy" width="10">'
    )
    findings = PerformanceAnalyzer(soup).analyze()
    assert issues(findings) == [
        "Image should use lazy loading",
        "Image missing dimensions",
        "Image missing dimensions",
    ]


def test_blocking_script(parse):
    soup = parse(
        '<script src="x.js"></script>'
        '<script src="a.js" async></script>'
        '<script src="d.js" defer></script>'
        "<script>var inline = 1;</script>"
    )
    findings = PerformanceAnalyzer(soup).analyze()
    assert [(f.issue, f.severity) for f in findings] == [("Script blocking page render", Severity.HIGH)]
    assert findings[0].location.attributes == {"src": "x.js"}


# --- 响应式 ---

def test_responsive_images(parse):
    soup = parse('<img srcset="a.png 1x" width="1" height="1"><img sizes="100vw"><img>')
    findings = ResponsiveAnalyzer(soup).analyze()
    assert issues(findings) == [
        "Image missing dimensions may cause layout shifts",
        "Image lacks responsive attributes (srcset/sizes)",
        "Image missing dimensions may cause layout shifts",
    ]


def test_responsive_tables(parse):
    soup = parse(
        '<div class="card table-responsive"><table id="ok"></table></div>'
        '<div class="wrapper"><table id="bad"></table></div>'
        '<table id="bare"></table>'
    )
    findings = ResponsiveAnalyzer(soup).analyze()
    assert issues(findings) == ["Table may not be mobile-friendly"] * 2
    assert [f.location.id for f in findings] == ["bad", "bare"]


def test_small_inline_font(parse):
    soup = parse(
        '<p style="font-size: 12px">a</p>'
        '<p style="font-size:16px">b</p>'
        '<p style="color: red; font-size: 14.5px">c</p>'
        '<p style="font-size: 1.2em">d</p>'
    )
    findings = ResponsiveAnalyzer(soup).analyze()
    assert issues(findings) == ["Font size too small for mobile devices"] * 2
    assert [f.location.text_preview for f in findings] == ["a", "c"]


# --- 安全 ---

def test_insecure_resources(parse):
    soup = parse(
        '<img src="http://cdn.example.com/a.png" alt="a">'
        '<a href="http://example.com">link</a>'
        '<link rel="stylesheet" href="https://example.com/s.css">'
        '<a href="/relative">rel</a>'
    )
    findings = SecurityAnalyzer(soup).analyze()
    assert [(f.issue, f.severity) for f in findings] == [
        ("Resource loaded over insecure HTTP", Severity.HIGH),
        ("Resource loaded over insecure HTTP", Severity.HIGH),
    ]
    assert [f.location.tag for f in findings] == ["img", "a"]


def test_inline_handlers(parse):
    soup = parse('<div onclick="go()"></div><img alt="" onload="x()"><span onmouseover="y()"></span><p>x</p>')
    findings = SecurityAnalyzer(soup).analyze()
    assert issues(findings) == ["Inline event handler detected which may pose security risks"] * 3
    assert {f.severity for f in findings} == {Severity.MEDIUM}


def test_form_action(parse):
    soup = parse(
        '<form action="http://example.com/login"></form>'
        '<form action="https://example.com/login"></form>'
        "<form></form>"
    )
    findings = SecurityAnalyzer(soup).analyze()
    assert [(f.issue, f.severity) for f in findings] == [("Form action uses insecure HTTP", Severity.HIGH)]
