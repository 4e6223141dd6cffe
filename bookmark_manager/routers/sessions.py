import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_manager.auth.session_context import SessionContext, get_session_context
from bookmark_manager.core.db import get_db
from bookmark_manager.core.prometheus_metrics import prometheus_collector
from bookmark_manager.core.templates import templates
from bookmark_manager.services.user_service import UserService

router = APIRouter(prefix="/sessions", tags=["sessions"])

logger = logging.getLogger(__name__)


@router.get("/new")
async def new_session(
    request: Request,
    session: SessionContext = Depends(get_session_context),
):
    return templates.TemplateResponse(
        request, "sessions/new.html", {"notice": session.pop_notice()}
    )


@router.post("")
async def create_session(
    email: str = Form(""),
    password: str = Form(""),
    db: AsyncSession = Depends(get_db),
    session: SessionContext = Depends(get_session_context),
):
    user = await UserService(db).authenticate(email=email, password=password)
    prometheus_collector.record_sign_in(success=user is not None)

    if user is None:
        logger.info("Sign-in rejected")
        session.flash("Please check your email or password.")
        return RedirectResponse("/sessions/new", status_code=status.HTTP_303_SEE_OTHER)

    logger.info("User signed in", extra={"user_id": user.id})
    session.sign_in(user.id)
    return RedirectResponse("/bookmarks", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/destroy")
async def destroy_session(session: SessionContext = Depends(get_session_context)):
    logger.info("User signed out", extra={"user_id": session.user_id})
    session.sign_out()
    session.flash("You have signed out.")
    return RedirectResponse("/bookmarks", status_code=status.HTTP_303_SEE_OTHER)
