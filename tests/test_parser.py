from nocr_etl.crawler import extract_chapter_text, get_chapter_links
from nocr_etl.segmenter import parse_verses


def _load(name):
    with open(f"tests/fixtures/{name}", encoding="utf-8") as f:
        return f.read()


def test_get_chapter_links_from_category_page():
    links = get_chapter_links(_load("category.html"))

    # thead/본문 밖 .title 링크와 href 없는 a는 제외, 문서 순서 유지
    assert links == [
        "/korsms/2001",
        "/korsms/2002",
        "https://nocr.net/korsms/2003",
    ]


def test_get_chapter_links_empty_page():
    assert get_chapter_links("<html><body></body></html>") == []


def test_extract_chapter_text_only_content_container():
    text = extract_chapter_text(_load("chapter.html"))

    assert text.startswith("1:1 태초에")
    assert "1:99" not in text
    assert "빛이 있으라" in text


def test_extract_chapter_text_missing_container():
    assert extract_chapter_text("<div class='other'>1:1 x</div>") == ""


def test_parse_genesis_1_fixture():
    result = parse_verses(extract_chapter_text(_load("chapter.html")))

    assert result.chapter_number == "1"
    assert [v.verse_number for v in result.verses] == ["1", "2", "3"]
    assert result.verses[0].verse == "태초에 하나님이 천지를 창조하시니라"
    assert result.verses[2].verse == "하나님이 가라사대 빛이 있으라 하시매 빛이 있었고"
