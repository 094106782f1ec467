# nocr_etl/crawler.py
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from nocr_etl.config import (
    BASE_URL, CATEGORY_PATH, CHAPTER_LINK_SELECTOR, CONTENT_SELECTOR,
    REQUEST_TIMEOUT_SEC, USER_AGENT, RAW_HTML_DIR,
)
from nocr_etl.utils import ensure_dir

HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "ko-KR,ko;q=0.9,en-US;q=0.8,en;q=0.7",
    "Referer": BASE_URL,
}


def build_category_path(category_number: int) -> str:
    """책 목록(장 링크 목록) 페이지 경로"""
    return CATEGORY_PATH.format(category=category_number)


def build_url(route: str) -> str:
    # 게시판 링크가 절대 URL로 올 때도 있다
    if route.startswith(("http://", "https://")):
        return route
    return f"{BASE_URL}{route}"


def fetch_page(route: str, session: Optional[requests.Session] = None) -> str:
    http = session or requests
    try:
        r = http.get(build_url(route), headers=HEADERS, timeout=REQUEST_TIMEOUT_SEC)
        r.raise_for_status()
    except requests.RequestException as e:
        print(f"WARN fetch failed route={route} err={e}", flush=True)
        raise
    return r.text


def get_chapter_links(html: str) -> List[str]:
    soup = BeautifulSoup(html, "html.parser")
    return [
        a["href"]
        for a in soup.select(CHAPTER_LINK_SELECTOR)
        if a.get("href")
    ]


def extract_chapter_text(html: str) -> str:
    """
    본문 컨테이너(CONTENT_SELECTOR)의 텍스트를 그대로 이어 붙인다.
    컨테이너가 없으면 빈 문자열 → 절 분리 결과도 비게 된다.
    """
    soup = BeautifulSoup(html, "html.parser")
    return "".join(node.get_text() for node in soup.select(CONTENT_SELECTOR))


def get_chapter_text(
    link: str,
    session: Optional[requests.Session] = None,
    raw_name: Optional[str] = None,
) -> str:
    html = fetch_page(link, session=session)
    if raw_name:
        save_raw_html(raw_name, html)
    return extract_chapter_text(html)


def save_raw_html(name: str, html: str, raw_dir: str = RAW_HTML_DIR):
    if not raw_dir:
        return
    ensure_dir(raw_dir)
    path = f"{raw_dir}/{name}.html"
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
