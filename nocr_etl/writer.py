# nocr_etl/writer.py
import json
import os
from typing import List

from nocr_etl.config import OUTPUT_PATH
from nocr_etl.models import BookData
from nocr_etl.utils import ensure_dir


def to_document(books: List[BookData]) -> list:
    return [book.model_dump(by_alias=True) for book in books]


def write_bible_json(books: List[BookData], path: str = OUTPUT_PATH) -> str:
    """전체 결과를 한 번에 쓴다 (기존 파일 덮어쓰기, 들여쓰기 2칸)"""
    ensure_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as f:
        json.dump(to_document(books), f, ensure_ascii=False, indent=2)
    return path
