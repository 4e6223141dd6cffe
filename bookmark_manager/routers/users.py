from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_manager.auth.session_context import SessionContext, get_session_context
from bookmark_manager.core.db import get_db
from bookmark_manager.core.prometheus_metrics import prometheus_collector
from bookmark_manager.core.templates import templates
from bookmark_manager.exceptions import EmailAlreadyRegisteredError
from bookmark_manager.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/new")
async def new_user(request: Request):
    return templates.TemplateResponse(request, "users/new.html", {})


@router.post("")
async def create_user(
    email: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = Depends(get_db),
    session: SessionContext = Depends(get_session_context),
):
    try:
        user = await UserService(db).create(email=email, password=password)
    except IntegrityError:
        # the database enforces uniqueness if the schema declares it
        await db.rollback()
        raise EmailAlreadyRegisteredError(email)

    session.sign_in(user.id)
    prometheus_collector.record_registration()
    return RedirectResponse("/bookmarks", status_code=status.HTTP_303_SEE_OTHER)
