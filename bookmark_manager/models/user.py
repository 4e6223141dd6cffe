from sqlalchemy import Column, Integer, String

from bookmark_manager.core.db import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(60))
    password = Column(String(140))  # bcrypt hash, never plaintext
