"""게시글 라우터 — 목록 페이지 및 작성."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import HTMLResponse

from models.schemas import PostRead
from repositories.post_repo import PostRepo
from utils.logger import get_logger

logger = get_logger("posts_router")

router = APIRouter(tags=["Posts"])


def get_post_repo(request: Request) -> PostRepo:
    return request.app.state.post_repo


def _render_posts(request: Request, posts: List[PostRead]):
    templates = request.app.state.templates
    return templates.TemplateResponse(request, "index.html", {"posts": posts})


@router.get("/", response_class=HTMLResponse)
def home(request: Request, repo: PostRepo = Depends(get_post_repo)):
    """게시글 목록 페이지."""
    try:
        return _render_posts(request, repo.list_posts())
    except Exception as e:
        logger.error(f"❌ Failed to list posts: {e}", exc_info=True)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/create_post", response_class=HTMLResponse)
def create_post(
    request: Request,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    repo: PostRepo = Depends(get_post_repo),
):
    """게시글 작성 후 갱신된 전체 목록 페이지를 그대로 반환 (redirect 아님)."""
    try:
        repo.create_post(title, content)
        return _render_posts(request, repo.list_posts())
    except Exception as e:
        logger.error(f"❌ Failed to create post: {e}", exc_info=True)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
