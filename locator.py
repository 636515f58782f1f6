"""元素定位：简化 XPath + 属性快照"""

from bs4 import Tag

from models import ElementLocator, LocatorError
from utils import attr_value, is_element, text_content

TEXT_PREVIEW_LENGTH = 100


def build_xpath(element) -> str:
    """有 id 时直接用 id，否则从根到元素逐级拼 tag[序号]"""
    if not is_element(element):
        raise LocatorError(f"不是元素节点: {type(element).__name__}")

    element_id = attr_value(element, "id")
    if element_id:
        return f'//*[@id="{element_id}"]'

    parts = []
    node = element
    while is_element(node):
        # 序号从 1 开始，只数同名的前置兄弟元素
        index = sum(
            1 for sibling in node.previous_siblings
            if isinstance(sibling, Tag) and sibling.name == node.name
        ) + 1
        parts.append(f"{node.name}[{index}]")
        node = node.parent
    return "/" + "/".join(reversed(parts))


def locate(element) -> ElementLocator | None:
    """计算元素定位信息；非元素节点返回 None"""
    try:
        xpath = build_xpath(element)
    except LocatorError:
        return None

    return ElementLocator(
        xpath=xpath,
        tag=element.name.lower(),
        classes=tuple(attr_value(element, "class").split()),
        id=attr_value(element, "id"),
        attributes={name: attr_value(element, name) for name in element.attrs},
        text_preview=text_content(element)[:TEXT_PREVIEW_LENGTH],
    )
