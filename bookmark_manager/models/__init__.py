# create_tables() imports this package so every table is registered
from .user import User
from .bookmark import Bookmark
