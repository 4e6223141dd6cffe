from pydantic import BaseModel, ConfigDict, Field

from bookmark_manager.models.bookmark import Bookmark


class BookmarkRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(...)
    url: str = Field(...)
    title: str = Field(...)


def to_bookmark_record(row: Bookmark) -> BookmarkRecord:
    return BookmarkRecord(id=row.id, url=row.url, title=row.title)
