from pydantic import BaseModel, ConfigDict, Field

from bookmark_manager.models.user import User


class UserRecord(BaseModel):
    """In-memory user; the password hash never leaves the storage layer."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(...)
    email: str = Field(...)


def to_user_record(row: User) -> UserRecord:
    return UserRecord(id=row.id, email=row.email)
