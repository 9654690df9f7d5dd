"""Server-rendered article pages: list, add, edit and delete."""

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from app.application.schemas import ArticleCreate, ArticleUpdate
from app.application.services import ArticleService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_article_service
from app.presentation.web.templating import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"], default_response_class=HTMLResponse)


def _parse_article_id(raw: str) -> int | None:
    """Only plain ASCII digit runs are ids; anything else matches no article."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


def _not_found(request: Request, error: EntityNotFoundError) -> HTMLResponse:
    logger.info("404 for %s: %s", request.url.path, error)
    return render_page(
        request,
        "not_found.html",
        status_code=status.HTTP_404_NOT_FOUND,
        entity_type=error.entity_type,
    )


@router.get("/")
async def list_articles(
    request: Request,
    service: ArticleService = Depends(get_article_service),
) -> HTMLResponse:
    """Home page with every article and its edit/delete controls."""
    articles = await service.list_articles()
    return render_page(request, "article_list.html", articles=articles)


@router.get("/add")
async def show_create_form(request: Request) -> HTMLResponse:
    """Empty article form with the rich-text editor attached."""
    return render_page(request, "article_form.html", article=None)


@router.post("/add")
async def create_article(
    title: str = Form(""),
    content: str = Form(""),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    await service.create_article(ArticleCreate(title=title, content=content))
    return _redirect_home()


@router.get("/edit/{article_id}")
async def show_edit_form(
    request: Request,
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> HTMLResponse:
    """Article form pre-filled with the current values, or a 404 page."""
    parsed_id = _parse_article_id(article_id)
    try:
        if parsed_id is None:
            raise EntityNotFoundError("Article", article_id)
        article = await service.get_article(parsed_id)
    except EntityNotFoundError as e:
        return _not_found(request, e)
    return render_page(request, "article_form.html", article=article)


@router.post("/edit/{article_id}")
async def update_article(
    request: Request,
    article_id: str,
    title: str = Form(""),
    content: str = Form(""),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    parsed_id = _parse_article_id(article_id)
    try:
        if parsed_id is None:
            raise EntityNotFoundError("Article", article_id)
        await service.update_article(parsed_id, ArticleUpdate(title=title, content=content))
    except EntityNotFoundError as e:
        return _not_found(request, e)
    return _redirect_home()


@router.post("/delete/{article_id}")
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete is idempotent: unknown or malformed ids still redirect home."""
    parsed_id = _parse_article_id(article_id)
    if parsed_id is not None:
        await service.delete_article(parsed_id)
    return _redirect_home()
