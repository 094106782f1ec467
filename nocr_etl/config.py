# nocr_etl/config.py
import os

# 크롤링 대상 (nocr.net 성경 게시판)
BASE_URL = os.getenv("BIBLE_BASE_URL", "https://nocr.net")
CATEGORY_PATH = os.getenv("BIBLE_CATEGORY_PATH", "/korsms/category/{category}")

# 사이트 마크업이 바뀌면 여기만 고친다
CHAPTER_LINK_SELECTOR = os.getenv("BIBLE_CHAPTER_LINK_SELECTOR", "tbody .title a")
CONTENT_SELECTOR = os.getenv("BIBLE_CONTENT_SELECTOR", ".rhymix_content")

# 요청 간 딜레이 (초) — 순차 처리, 차단 방지
REQUEST_DELAY_SEC = float(os.getenv("BIBLE_REQUEST_DELAY_SEC", "1.0"))

# 장 단위 실패 후 쉬는 시간 (초)
ERROR_COOLDOWN_SEC = float(os.getenv("BIBLE_ERROR_COOLDOWN_SEC", "2.0"))

# 장 하나당 시도 횟수 (1 = 재시도 없음)
CHAPTER_ATTEMPTS = int(os.getenv("BIBLE_CHAPTER_ATTEMPTS", "1"))

REQUEST_TIMEOUT_SEC = float(os.getenv("BIBLE_REQUEST_TIMEOUT_SEC", "20"))

# 브라우저처럼 보이도록
USER_AGENT = os.getenv(
    "BIBLE_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)

OUTPUT_PATH = os.getenv("BIBLE_OUTPUT_PATH", "bible.json")

# (선택) 원본 HTML 저장 경로, 비어 있으면 저장 안 함
RAW_HTML_DIR = os.getenv("BIBLE_RAW_HTML_DIR", "")

# (선택) 일부 책만 크롤링: "창세기,출애굽기"
BOOK_FILTER = [
    name.strip()
    for name in os.getenv("BIBLE_BOOKS", "").split(",")
    if name.strip()
]
