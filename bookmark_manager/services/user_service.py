import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_manager.auth.passwords_handler import hash_password_async, verify_password_async
from bookmark_manager.models.user import User
from bookmark_manager.schemas.user import UserRecord, to_user_record

logger = logging.getLogger(__name__)


class UserService:
    """
    Registration and lookup of users.

    Works on a request-scoped AsyncSession and hands back `UserRecord`
    instances only, so the stored password hash never reaches the route
    layer or the templates.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, email: str, password: str) -> UserRecord:
        """
        Persists a new user with a bcrypt-hashed password.

        Args:
            email (str): Address the user signs in with. Not validated.
            password (str): Plaintext password. Only its hash is stored.

        Returns:
            UserRecord: The generated id and the email.

        Raises:
            sqlalchemy.exc.IntegrityError: If the database rejects the row.
        """
        hashed_password = await hash_password_async(password)

        user = User(email=email, password=hashed_password)
        self.db.add(user)
        await self.db.flush()  # populate the generated id
        await self.db.commit()

        logger.info("User registered", extra={"user_id": user.id})
        return to_user_record(user)

    async def find(self, user_id: Optional[int]) -> Optional[UserRecord]:
        """
        Looks a user up by id.

        An absent id short-circuits to None without querying storage, which
        is what a visitor with an empty session produces. An id with no
        matching row also yields None.
        """
        if user_id is None:
            return None

        user = await self.db.get(User, user_id)
        if user is None:
            logger.info("No user for session id", extra={"user_id": user_id})
            return None
        return to_user_record(user)

    async def authenticate(self, email: str, password: str) -> Optional[UserRecord]:
        """Returns the matching user when the password checks out, else None."""
        stmt = select(User).where(User.email == email).order_by(User.id)
        user = (await self.db.execute(stmt)).scalars().first()
        if user is None:
            return None

        if not await verify_password_async(password, user.password):
            return None
        return to_user_record(user)
