from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from bookmark_manager.auth.session_context import SessionContext, get_session_context
from bookmark_manager.core.db import get_db
from bookmark_manager.core.prometheus_metrics import prometheus_collector
from bookmark_manager.core.templates import templates
from bookmark_manager.services.bookmark_service import BookmarkService
from bookmark_manager.services.user_service import UserService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("")
async def list_bookmarks(
    request: Request,
    db: AsyncSession = Depends(get_db),
    session: SessionContext = Depends(get_session_context),
):
    """Bookmark listing; greets the visitor when the session holds a known user."""
    user = await UserService(db).find(session.user_id)
    bookmarks = await BookmarkService(db).all()
    return templates.TemplateResponse(
        request,
        "bookmarks/index.html",
        {"user": user, "bookmarks": bookmarks, "notice": session.pop_notice()},
    )


@router.get("/new")
async def new_bookmark(request: Request):
    return templates.TemplateResponse(request, "bookmarks/new.html", {})


@router.post("")
async def create_bookmark(
    url: str = Form(""),
    title: str = Form(""),
    db: AsyncSession = Depends(get_db),
):
    await BookmarkService(db).create(url=url, title=title)
    prometheus_collector.record_bookmark_created()
    return RedirectResponse("/bookmarks", status_code=status.HTTP_303_SEE_OTHER)
