from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_manager.models.bookmark import Bookmark
from bookmark_manager.schemas.bookmark import BookmarkRecord, to_bookmark_record


class BookmarkService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def all(self) -> List[BookmarkRecord]:
        result = await self.db.execute(select(Bookmark).order_by(Bookmark.id))
        return [to_bookmark_record(row) for row in result.scalars().all()]

    async def create(self, url: str, title: str) -> BookmarkRecord:
        bookmark = Bookmark(url=url, title=title)
        self.db.add(bookmark)
        await self.db.flush()
        await self.db.commit()
        return to_bookmark_record(bookmark)
