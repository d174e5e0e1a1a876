"""중앙 DB 리소스 — 엔진/세션 관리.

앱 시작 시 Database 하나를 만들어 init() 하고 종료 시 dispose() 합니다.
Repository / Service 는 주입받은 Database 의 session_scope(),
session_ro(), ping() 을 통해서만 DB 에 접근합니다.
"""
from contextlib import contextmanager
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from utils.logger import get_logger

logger = get_logger("database")


class Database:
    def __init__(self, url: str):
        self.url = url
        self._engine = None
        self._Session = None

    def _engine_kwargs(self) -> dict:
        kwargs = {"echo": False, "pool_pre_ping": True, "pool_recycle": 3600}
        url = make_url(self.url)
        # 로컬 sqlite(pysqlite) 만 스레드 체크 해제, 인메모리는 단일 연결 공유
        if url.drivername in ("sqlite", "sqlite+pysqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if not url.database or url.database == ":memory:":
                kwargs["poolclass"] = StaticPool
        return kwargs

    def init(self):
        """엔진/세션 팩토리 생성 (멱등)."""
        if self._engine is not None:
            return
        self._engine = create_engine(self.url, **self._engine_kwargs())
        self._Session = sessionmaker(bind=self._engine, expire_on_commit=False)
        # authToken 이 쿼리스트링에 있으므로 호스트/DB 이름만 기록
        url = self._engine.url
        logger.info(f"📁 Database engine created: {url.drivername}://{url.host or ''}/{url.database or ''}")

    def dispose(self):
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._Session = None
        logger.info("🔌 Database engine disposed")

    @property
    def engine(self):
        # init() 이전, dispose() 이후에는 사용 불가
        if self._engine is None:
            raise RuntimeError("Database is not initialized")
        return self._engine

    def get_session(self):
        if self._Session is None:
            raise RuntimeError("Database is not initialized")
        return self._Session()

    @contextmanager
    def session_scope(self):
        """쓰기 세션 — commit / rollback / close 자동 관리."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    @contextmanager
    def session_ro(self):
        """읽기 전용 세션 — close 자동 관리."""
        session = self.get_session()
        try:
            yield session
        finally:
            session.close()

    def ping(self):
        """연결 확인용 no-op 쿼리. 실패 시 예외 전파."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
