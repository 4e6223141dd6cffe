import asyncio
import base64
import hashlib
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import bcrypt

from bookmark_manager.core.environment import get_bcrypt_rounds

# bcrypt is CPU bound; keep it off the event loop
executor = ThreadPoolExecutor(thread_name_prefix="bcrypt")


def _bcrypt_input(password: str) -> bytes:
    # bcrypt rejects input over 72 bytes; a base64 SHA-256 digest is 44 bytes with no NULs
    digest = hashlib.sha256(password.encode('utf-8')).digest()
    return base64.b64encode(digest)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    # Salt is generated by bcrypt and embedded in the resulting hash
    salt = bcrypt.gensalt(rounds or get_bcrypt_rounds())
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode('utf-8')


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(_bcrypt_input(password), hashed_password.encode('utf-8'))


async def hash_password_async(password: str, rounds: Optional[int] = None) -> str:
    return await asyncio.get_running_loop().run_in_executor(
        executor, hash_password, password, rounds
    )


async def verify_password_async(password: str, hashed_password: str) -> bool:
    return await asyncio.get_running_loop().run_in_executor(
        executor, verify_password, password, hashed_password
    )
