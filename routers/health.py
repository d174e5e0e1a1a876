"""헬스 체크 라우터 — DB 연결 및 keep-alive 상태."""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from models.schemas import HealthResponse
from utils.logger import get_logger

logger = get_logger("health_router")

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request):
    """DB 에 직접 ping 하고 keep-alive 상태와 함께 반환. 비정상이면 503."""
    db = request.app.state.db
    keepalive = request.app.state.keepalive

    try:
        db.ping()
        db_ok = True
    except Exception as e:
        logger.warning(f"⚠️ Health check ping failed: {e}")
        db_ok = False

    ka_status = keepalive.status()
    healthy = db_ok and ka_status.consecutive_failures == 0
    body = HealthResponse(
        status="ok" if healthy else "degraded",
        database=db_ok,
        keepalive=ka_status,
    )
    return JSONResponse(
        status_code=200 if healthy else 503,
        content=body.model_dump(mode="json"),
    )
