import pytest

from nocr_etl.books import (
    BIBLE_BOOKS, NEW_TESTAMENT, OLD_TESTAMENT, get_book, select_books,
)


def test_registry_has_66_books_in_canonical_order():
    names = list(BIBLE_BOOKS)

    assert len(names) == 66
    assert names[0] == "창세기"
    assert names[38] == "말라기"
    assert names[39] == "마태복음"
    assert names[-1] == "요한계시록"


def test_registry_testament_split():
    testaments = [b.testament for b in BIBLE_BOOKS.values()]

    assert testaments.count(OLD_TESTAMENT) == 39
    assert testaments.count(NEW_TESTAMENT) == 27


def test_category_numbers_are_unique():
    numbers = [b.category_number for b in BIBLE_BOOKS.values()]

    assert len(set(numbers)) == len(numbers)


def test_get_book():
    book = get_book("요한복음")

    assert book.localized_name == "요한복음"
    assert book.english_name == "John"
    assert book.testament == NEW_TESTAMENT


def test_get_book_unknown():
    with pytest.raises(KeyError, match="unknown book"):
        get_book("없는책")


def test_select_books_default_is_all():
    assert select_books() == list(BIBLE_BOOKS)


def test_select_books_subset_keeps_given_order():
    assert select_books(["룻기", "창세기"]) == ["룻기", "창세기"]


def test_select_books_rejects_unknown():
    with pytest.raises(KeyError):
        select_books(["창세기", "없는책"])
