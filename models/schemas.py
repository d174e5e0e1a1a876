from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional


class PostRead(BaseModel):
    """게시글 조회 DTO. 세션이 닫힌 뒤에도 템플릿에서 안전하게 사용."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _null_content_as_empty(cls, v):
        # 외부에서 NULL 로 들어간 행도 빈 문자열로 표시
        return "" if v is None else v


class KeepAliveStatus(BaseModel):
    """연결 유지 ping 상태 스냅샷."""
    running: bool = False
    interval_seconds: int = 0
    last_success_at: Optional[datetime] = None
    last_failure_at: Optional[datetime] = None
    consecutive_failures: int = 0
    last_error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    database: bool
    keepalive: KeepAliveStatus
