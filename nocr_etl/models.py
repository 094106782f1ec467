from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class VerseRecord(_Frozen):
    chapter_number: str = Field(alias="chapterNumber")
    verse_number: str = Field(alias="verseNumber")
    verse: str


class ChapterResult(_Frozen):
    # 마커가 하나도 없으면 None
    chapter_number: Optional[str] = Field(default=None, alias="chapterNumber")
    verses: List[VerseRecord] = Field(default_factory=list)


class BookInfo(_Frozen):
    localized_name: str = Field(alias="localizedName")
    english_name: str = Field(alias="englishName")
    testament: str
    category_number: int = Field(alias="categoryNumber")


class BookData(BookInfo):
    chapters: List[ChapterResult] = Field(default_factory=list)
