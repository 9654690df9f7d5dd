"""Top-level router for the server-rendered HTML pages."""

from fastapi import APIRouter

from app.presentation.web.articles_controller import router as articles_router

router = APIRouter()
router.include_router(articles_router)
