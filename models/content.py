# models/content.py
import json
from typing import List, Optional

from pydantic import BaseModel, field_validator


class QnaCreate(BaseModel):
    question: str
    answer: str


class Qna(QnaCreate):
    id: int
    created_at: Optional[str] = None


class AwardCreate(BaseModel):
    image_url: str


class Award(AwardCreate):
    id: int
    created_at: Optional[str] = None


class MediaItemCreate(BaseModel):
    url: str


class MediaItem(MediaItemCreate):
    id: int
    created_at: Optional[str] = None


class Blog(BaseModel):
    id: int
    title: str
    slug: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    publication_date: Optional[str] = None
    reading_time: Optional[str] = None
    tags: List[str] = []
    created_at: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def decode_tags(cls, v):
        if isinstance(v, str):
            try:
                v = json.loads(v) if v else []
            except ValueError:
                return []
        if not isinstance(v, list):
            return []
        return [str(t) for t in v]
