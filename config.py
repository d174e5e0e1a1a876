import os
from urllib.parse import urlencode, urlsplit
from dotenv import load_dotenv

# .env 로드 (루트 경로 기준)
load_dotenv()


class ConfigError(RuntimeError):
    """필수 환경 변수 누락/오류."""


# 원격 libSQL 스킴 → TLS 사용 여부
_REMOTE_SCHEMES = {
    "libsql": True,
    "https": True,
    "wss": True,
    "http": False,
    "ws": False,
}


class Config:
    # libSQL (Turso) 접속 정보
    LIBSQL_URL = os.getenv("LIBSQL_URL")
    LIBSQL_AUTH_TOKEN = os.getenv("LIBSQL_AUTH_TOKEN", "")

    # 서버 설정
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))

    # 로깅
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    # 연결 유지 ping 주기 (초)
    KEEPALIVE_INTERVAL_SECONDS = int(os.getenv("KEEPALIVE_INTERVAL_SECONDS", "300"))

    # 템플릿/정적 파일 경로
    TEMPLATES_DIR = os.getenv("TEMPLATES_DIR", "templates")
    STATIC_DIR = os.getenv("STATIC_DIR", "static")

    @classmethod
    def database_url(cls, url: str = None, auth_token: str = None) -> str:
        """LIBSQL_URL + 토큰을 SQLAlchemy URL 로 변환.

        - libsql://, https://, wss:// → sqlite+libsql://host?authToken=...&secure=true
        - http://, ws:// → secure=false (로컬 sqld 등)
        - sqlite:// 로 시작하면 그대로 사용 (개발/테스트용)
        """
        url = url if url is not None else cls.LIBSQL_URL
        token = auth_token if auth_token is not None else cls.LIBSQL_AUTH_TOKEN

        if not url:
            raise ConfigError("LIBSQL_URL is not set")
        if url.startswith("sqlite"):
            return url

        parts = urlsplit(url)
        if parts.scheme not in _REMOTE_SCHEMES:
            raise ConfigError(f"Unsupported LIBSQL_URL scheme: {parts.scheme or url}")
        if not parts.netloc:
            raise ConfigError(f"LIBSQL_URL has no host: {url}")
        if not token:
            raise ConfigError("LIBSQL_AUTH_TOKEN is not set")

        query = urlencode({
            "authToken": token,
            "secure": "true" if _REMOTE_SCHEMES[parts.scheme] else "false",
        })
        return f"sqlite+libsql://{parts.netloc}{parts.path}?{query}"
