import threading
from datetime import datetime
from apscheduler.schedulers.background import BackgroundScheduler

from models.schemas import KeepAliveStatus
from repositories.database import Database
from utils.logger import get_logger

logger = get_logger("keepalive")

# 원격 DB 유휴 연결 종료 방지용 기본 ping 주기 (5분)
DEFAULT_INTERVAL_SECONDS = 300


class KeepAliveService:
    """원격 DB 연결 유지를 위한 주기적 SELECT 1.

    ping 이 실패해도 잡은 멈추지 않고 다음 주기에 다시 시도하며,
    실패 상태는 status() 로 노출되어 /health 에서 확인할 수 있습니다.
    """

    def __init__(self, db: Database, interval_seconds: int = DEFAULT_INTERVAL_SECONDS):
        self.db = db
        self.interval_seconds = interval_seconds
        self._scheduler = None
        self._lock = threading.Lock()
        self._last_success_at = None
        self._last_failure_at = None
        self._consecutive_failures = 0
        self._last_error = None

    def start(self, run_now: bool = True):
        if self._scheduler is not None:
            return
        # next_run_time=None 은 일시정지 상태로 등록되므로 즉시 실행할 때만 지정
        extra = {'next_run_time': datetime.now()} if run_now else {}
        self._scheduler = BackgroundScheduler()
        self._scheduler.add_job(
            self.ping, 'interval',
            seconds=self.interval_seconds,
            id='db_keepalive',
            max_instances=1,
            coalesce=True,
            **extra,
        )
        self._scheduler.start()
        logger.info(f"📅 Keep-alive scheduler started (every {self.interval_seconds}s)")

    def shutdown(self):
        if self._scheduler is None:
            return
        self._scheduler.shutdown(wait=True)
        self._scheduler = None
        logger.info("🛑 Keep-alive scheduler stopped")

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def ping(self) -> bool:
        """DB 에 no-op 쿼리. 성공 여부 반환, 예외는 기록만 하고 삼킴."""
        try:
            self.db.ping()
        except Exception as e:
            with self._lock:
                self._last_failure_at = datetime.now()
                self._consecutive_failures += 1
                self._last_error = str(e)
                failures = self._consecutive_failures
            logger.error(f"❌ Failed to keep connection alive ({failures} in a row): {e}")
            return False

        with self._lock:
            self._last_success_at = datetime.now()
            self._consecutive_failures = 0
            self._last_error = None
        logger.debug("💓 Keep-alive ping ok")
        return True

    def status(self) -> KeepAliveStatus:
        with self._lock:
            return KeepAliveStatus(
                running=self.running,
                interval_seconds=self.interval_seconds,
                last_success_at=self._last_success_at,
                last_failure_at=self._last_failure_at,
                consecutive_failures=self._consecutive_failures,
                last_error=self._last_error,
            )
