# nocr_etl/segmenter.py
import re
from typing import Iterator

from nocr_etl.models import ChapterResult, VerseRecord

# "장:절" 마커 (예: "1:1", "3:16")
VERSE_MARKER_RE = re.compile(r"(\d+):(\d+)")


def iter_markers(chapter_text: str) -> Iterator[re.Match]:
    return VERSE_MARKER_RE.finditer(chapter_text)


def parse_verses(chapter_text: str) -> ChapterResult:
    """
    장 본문 텍스트를 절 단위로 나눈다.

    원칙:
    - 왼쪽에서 오른쪽으로 "장:절" 마커를 한 번만 훑는다
    - 절 본문 = 이 마커 끝 ~ 다음 마커 시작 (마지막 절은 텍스트 끝까지)
    - 양끝 공백만 제거, 내부 줄바꿈/공백은 그대로
    - 정렬/단조 증가 검증 없음. 본문 속 "2:3" 같은 참조도 마커로 본다
    - 마커가 없으면 빈 결과 (예외 아님)
    """
    if not isinstance(chapter_text, str):
        raise TypeError(
            f"chapter_text must be str, got {type(chapter_text).__name__}"
        )

    matches = list(iter_markers(chapter_text))
    if not matches:
        return ChapterResult()

    verses = []
    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(chapter_text)
        verses.append(
            VerseRecord(
                chapter_number=m.group(1),
                verse_number=m.group(2),
                verse=chapter_text[m.end():end].strip(),
            )
        )

    return ChapterResult(chapter_number=matches[0].group(1), verses=verses)
