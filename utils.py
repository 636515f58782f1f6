"""工具函数"""

import re
from datetime import datetime, timezone

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, NavigableString, Script, Stylesheet, TemplateString

from models import InvalidInputError

FONT_SIZE_PX = re.compile(r"font-size:\s*(\d+(?:\.\d+)?)px", re.IGNORECASE)

# 可替代可见文本的无障碍名称属性
ACCESSIBLE_NAME_ATTRS = ("aria-label", "aria-labelledby")

# 与 DOM textContent 一致：包含 script / style 文本，不含注释
TEXT_CONTENT_TYPES = (NavigableString, CData, Script, Stylesheet, TemplateString)


def is_element(node) -> bool:
    """是否为元素节点（文档对象本身不算）"""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def require_document(doc) -> Tag:
    """检查器只接受已解析的文档或子树"""
    if not isinstance(doc, Tag):
        raise InvalidInputError(
            f"A parsed HTML document or element must be provided, got {type(doc).__name__}"
        )
    return doc


def text_content(element: Tag) -> str:
    return element.get_text(types=TEXT_CONTENT_TYPES)


def has_accessible_name(element: Tag) -> bool:
    return any(element.has_attr(attr) for attr in ACCESSIBLE_NAME_ATTRS)


def has_discernible_text(element: Tag) -> bool:
    """有可见文本，或有 aria-label / aria-labelledby"""
    return bool(text_content(element).strip()) or has_accessible_name(element)


def attr_value(element: Tag, name: str) -> str:
    """属性值统一为字符串（class 等多值属性会是 list）"""
    value = element.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def is_insecure_url(url: str) -> bool:
    return url.strip().lower().startswith("http://")


def inline_font_size(style: str) -> float | None:
    """从 style 属性中取出 px 字号，没有则返回 None"""
    match = FONT_SIZE_PX.search(style or "")
    if not match:
        return None
    return float(match.group(1))


def iso_timestamp() -> str:
    """当前 UTC 时间（ISO 8601）"""
    return datetime.now(timezone.utc).isoformat()


def format_duration(seconds: float) -> str:
    """秒数格式化"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def now_str() -> str:
    """当前时间字符串（用于文件名）"""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
