from sqlalchemy import Column, Integer, String

from bookmark_manager.core.db import Base


class Bookmark(Base):
    __tablename__ = "bookmarks"
    id = Column(Integer, primary_key=True, autoincrement=True)
    url = Column(String(60))
    title = Column(String(60))
