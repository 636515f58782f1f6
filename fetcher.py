"""单页抓取：只取一个页面的 HTML，不做链接发现"""

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "ResponsiBot/1.0"
DEFAULT_TIMEOUT = 15.0


class FetchError(RuntimeError):
    """页面无法获取"""


def build_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    session = requests.Session()
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
    })
    return session


def fetch_html(url: str, timeout: float = DEFAULT_TIMEOUT,
               user_agent: str = DEFAULT_USER_AGENT,
               session: requests.Session | None = None) -> str:
    """抓取页面并返回 HTML 文本"""
    session = session or build_session(user_agent)
    try:
        resp = session.get(url, timeout=timeout, allow_redirects=True)
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    if not resp.ok:
        raise FetchError(f"Failed to fetch {url}: HTTP {resp.status_code}")

    content_type = resp.headers.get("Content-Type", "")
    if "html" not in content_type.lower():
        raise FetchError(f"{url} is not an HTML page (Content-Type: {content_type or 'unknown'})")

    logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
    return resp.text
