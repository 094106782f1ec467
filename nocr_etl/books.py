# nocr_etl/books.py
from typing import Dict, Iterable, List

from nocr_etl.models import BookInfo

OLD_TESTAMENT = "구약"
NEW_TESTAMENT = "신약"

# (한글 이름, 영문 이름, 게시판 카테고리 번호)
# 카테고리 번호 → /korsms/category/<번호>, 게시판이 개편되면 갱신
_OLD = [
    ("창세기", "Genesis", 1001),
    ("출애굽기", "Exodus", 1002),
    ("레위기", "Leviticus", 1003),
    ("민수기", "Numbers", 1004),
    ("신명기", "Deuteronomy", 1005),
    ("여호수아", "Joshua", 1006),
    ("사사기", "Judges", 1007),
    ("룻기", "Ruth", 1008),
    ("사무엘상", "1 Samuel", 1009),
    ("사무엘하", "2 Samuel", 1010),
    ("열왕기상", "1 Kings", 1011),
    ("열왕기하", "2 Kings", 1012),
    ("역대상", "1 Chronicles", 1013),
    ("역대하", "2 Chronicles", 1014),
    ("에스라", "Ezra", 1015),
    ("느헤미야", "Nehemiah", 1016),
    ("에스더", "Esther", 1017),
    ("욥기", "Job", 1018),
    ("시편", "Psalms", 1019),
    ("잠언", "Proverbs", 1020),
    ("전도서", "Ecclesiastes", 1021),
    ("아가", "Song of Solomon", 1022),
    ("이사야", "Isaiah", 1023),
    ("예레미야", "Jeremiah", 1024),
    ("예레미야애가", "Lamentations", 1025),
    ("에스겔", "Ezekiel", 1026),
    ("다니엘", "Daniel", 1027),
    ("호세아", "Hosea", 1028),
    ("요엘", "Joel", 1029),
    ("아모스", "Amos", 1030),
    ("오바댜", "Obadiah", 1031),
    ("요나", "Jonah", 1032),
    ("미가", "Micah", 1033),
    ("나훔", "Nahum", 1034),
    ("하박국", "Habakkuk", 1035),
    ("스바냐", "Zephaniah", 1036),
    ("학개", "Haggai", 1037),
    ("스가랴", "Zechariah", 1038),
    ("말라기", "Malachi", 1039),
]

_NEW = [
    ("마태복음", "Matthew", 1040),
    ("마가복음", "Mark", 1041),
    ("누가복음", "Luke", 1042),
    ("요한복음", "John", 1043),
    ("사도행전", "Acts", 1044),
    ("로마서", "Romans", 1045),
    ("고린도전서", "1 Corinthians", 1046),
    ("고린도후서", "2 Corinthians", 1047),
    ("갈라디아서", "Galatians", 1048),
    ("에베소서", "Ephesians", 1049),
    ("빌립보서", "Philippians", 1050),
    ("골로새서", "Colossians", 1051),
    ("데살로니가전서", "1 Thessalonians", 1052),
    ("데살로니가후서", "2 Thessalonians", 1053),
    ("디모데전서", "1 Timothy", 1054),
    ("디모데후서", "2 Timothy", 1055),
    ("디도서", "Titus", 1056),
    ("빌레몬서", "Philemon", 1057),
    ("히브리서", "Hebrews", 1058),
    ("야고보서", "James", 1059),
    ("베드로전서", "1 Peter", 1060),
    ("베드로후서", "2 Peter", 1061),
    ("요한일서", "1 John", 1062),
    ("요한이서", "2 John", 1063),
    ("요한삼서", "3 John", 1064),
    ("유다서", "Jude", 1065),
    ("요한계시록", "Revelation", 1066),
]


def _build(rows, testament) -> Dict[str, BookInfo]:
    return {
        ko: BookInfo(
            localized_name=ko,
            english_name=en,
            testament=testament,
            category_number=category,
        )
        for ko, en, category in rows
    }


# 창세기 → 요한계시록 순서 유지
BIBLE_BOOKS: Dict[str, BookInfo] = {
    **_build(_OLD, OLD_TESTAMENT),
    **_build(_NEW, NEW_TESTAMENT),
}


def get_book(name: str) -> BookInfo:
    try:
        return BIBLE_BOOKS[name]
    except KeyError:
        raise KeyError(f"unknown book: {name!r}") from None


def select_books(names: Iterable[str] = ()) -> List[str]:
    """비어 있으면 전체, 아니면 주어진 이름만 (이름 검증 포함)"""
    names = list(names)
    if not names:
        return list(BIBLE_BOOKS)
    for name in names:
        get_book(name)
    return names
