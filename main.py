import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from config import Config
from repositories.database import Database
from repositories.post_repo import PostRepo
from routers import health, posts
from services.keepalive_service import KeepAliveService
from utils.logger import get_logger

logger = get_logger("main")

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _resolve_dir(path: str) -> str:
    return path if os.path.isabs(path) else os.path.join(BASE_DIR, path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 앱 시작: DB 연결 → 테이블 보장 → keep-alive 시작
    db = Database(app.state.database_url or Config.database_url())
    db.init()
    try:
        repo = PostRepo(db)
        repo.ensure_schema()
    except Exception as e:
        logger.error(f"❌ Failed to create posts table: {e}")
        db.dispose()
        raise

    keepalive = KeepAliveService(db, app.state.keepalive_interval)
    keepalive.start()

    app.state.db = db
    app.state.post_repo = repo
    app.state.keepalive = keepalive
    logger.info(f"🚀 Blog ready on http://{Config.HOST}:{Config.PORT}")
    try:
        yield
    finally:
        # 앱 종료 시 정리
        keepalive.shutdown()
        db.dispose()


def create_app(
    database_url: str = None,
    keepalive_interval: int = None,
    templates_dir: str = None,
    static_dir: str = None,
) -> FastAPI:
    app = FastAPI(
        title="htmx Blog",
        description="FastAPI + Jinja2 + libSQL 기반 htmx 블로그 템플릿",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.database_url = database_url
    app.state.keepalive_interval = keepalive_interval or Config.KEEPALIVE_INTERVAL_SECONDS
    app.state.templates = Jinja2Templates(directory=_resolve_dir(templates_dir or Config.TEMPLATES_DIR))

    static_path = _resolve_dir(static_dir or Config.STATIC_DIR)
    app.mount("/static", StaticFiles(directory=static_path), name="static")
    app.mount("/css", StaticFiles(directory=os.path.join(static_path, "css")), name="css")

    app.include_router(posts.router)
    app.include_router(health.router)
    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    run()
