# nocr_etl/run_etl.py
from typing import Iterable, List, Optional

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from nocr_etl.config import (
    REQUEST_DELAY_SEC, ERROR_COOLDOWN_SEC, CHAPTER_ATTEMPTS,
    RAW_HTML_DIR, BOOK_FILTER,
)
from nocr_etl.books import get_book, select_books
from nocr_etl.crawler import (
    build_category_path, fetch_page,
    get_chapter_links, get_chapter_text,
)
from nocr_etl.models import BookData, ChapterResult
from nocr_etl.segmenter import parse_verses
from nocr_etl.utils import sleep_delay
from nocr_etl.writer import write_bible_json

# 장 하나를 건너뛰게 만드는 실패
CHAPTER_ERRORS = (requests.RequestException, ValueError)


def _chapter_retrying() -> Retrying:
    # 고정 대기만 (지수 백오프 없음)
    return Retrying(
        stop=stop_after_attempt(max(1, CHAPTER_ATTEMPTS)),
        wait=wait_fixed(ERROR_COOLDOWN_SEC),
        retry=retry_if_exception_type(CHAPTER_ERRORS),
        sleep=sleep_delay,
        reraise=True,
    )


def get_chapter_data(
    link: str,
    session: Optional[requests.Session] = None,
    raw_name: Optional[str] = None,
) -> ChapterResult:
    chapter_text = get_chapter_text(link, session=session, raw_name=raw_name)
    return parse_verses(chapter_text)


def get_book_data(
    book_name: str,
    session: Optional[requests.Session] = None,
) -> List[ChapterResult]:
    """
    책 하나의 모든 장을 순차적으로 가져온다.

    - 목록 페이지 실패는 그대로 전파 (실행 중단)
    - 첫 요청을 제외하고 매 장 요청 전에 REQUEST_DELAY_SEC 대기
    - 장 실패: 로그 → ERROR_COOLDOWN_SEC 대기 → 다음 장 (부분 결과 허용)
    - 절이 하나도 없는 장은 결과에서 뺀다
    """
    book = get_book(book_name)
    print(f"START book={book_name} category={book.category_number}", flush=True)

    html = fetch_page(build_category_path(book.category_number), session=session)
    chapter_links = get_chapter_links(html)

    chapters = []
    for i, link in enumerate(chapter_links):
        ch = i + 1
        if i > 0:
            sleep_delay(REQUEST_DELAY_SEC)

        raw_name = f"cat{book.category_number}_ch{ch}" if RAW_HTML_DIR else None
        try:
            for attempt in _chapter_retrying():
                with attempt:
                    chapter = get_chapter_data(link, session=session, raw_name=raw_name)
        except CHAPTER_ERRORS as e:
            print(f"WARN chapter failed book={book_name} ch={ch} link={link} err={e}", flush=True)
            sleep_delay(ERROR_COOLDOWN_SEC)
            continue

        if not chapter.verses:
            print(f"WARN no verses book={book_name} ch={ch} link={link}", flush=True)
            continue

        chapters.append(chapter)
        print(f"OK book={book_name} ch={ch} verses={len(chapter.verses)}")

    return chapters


def get_bible_data(
    book_names: Iterable[str] = (),
    session: Optional[requests.Session] = None,
) -> List[BookData]:
    books = []
    for book_name in select_books(book_names):
        info = get_book(book_name)
        chapters = get_book_data(book_name, session=session)
        books.append(BookData(**info.model_dump(), chapters=chapters))
    return books


def main():
    session = requests.Session()

    try:
        books = get_bible_data(BOOK_FILTER, session=session)
        path = write_bible_json(books)
        print(f"DONE books={len(books)} out={path}", flush=True)
    except Exception as e:
        print(f"ERROR run failed err={e}", flush=True)
        raise
    finally:
        session.close()


if __name__ == "__main__":
    main()
