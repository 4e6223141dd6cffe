from dataclasses import dataclass
from typing import MutableMapping, Optional, Any

from fastapi import Request

USER_ID_KEY = "user_id"
NOTICE_KEY = "notice"


@dataclass
class SessionContext:
    """
    Per-request view over the signed-cookie session.

    Handlers receive it through `Depends(get_session_context)` instead of
    reaching for framework globals. Writes go straight into the underlying
    mapping, which SessionMiddleware serializes into the response cookie.
    """
    data: MutableMapping[str, Any]

    @property
    def user_id(self) -> Optional[int]:
        return self.data.get(USER_ID_KEY)

    def sign_in(self, user_id: int) -> None:
        self.data[USER_ID_KEY] = user_id

    def sign_out(self) -> None:
        self.data.clear()

    def flash(self, message: str) -> None:
        self.data[NOTICE_KEY] = message

    def pop_notice(self) -> Optional[str]:
        return self.data.pop(NOTICE_KEY, None)


def get_session_context(request: Request) -> SessionContext:
    return SessionContext(data=request.session)
