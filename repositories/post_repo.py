"""게시글 Repository."""
from typing import List, Optional

from models.post import Base, Post
from models.schemas import PostRead
from repositories.database import Database
from utils.logger import get_logger

logger = get_logger("post_repo")


class PostValidationError(ValueError):
    """제목 누락 등 입력 검증 실패."""


class PostRepo:
    """posts 테이블 CRUD."""

    def __init__(self, db: Database):
        self.db = db

    def ensure_schema(self) -> None:
        """posts 테이블이 없으면 생성 (멱등). 실패는 그대로 전파."""
        Base.metadata.create_all(self.db.engine, tables=[Post.__table__])
        logger.info("🗂️ posts table ready")

    def list_posts(self) -> List[PostRead]:
        """전체 게시글 조회. 없으면 빈 리스트."""
        with self.db.session_ro() as session:
            rows = session.query(Post).order_by(Post.id).all()
            return [PostRead.model_validate(r) for r in rows]

    def count_posts(self) -> int:
        with self.db.session_ro() as session:
            return session.query(Post).count()

    def create_post(self, title: Optional[str], content: Optional[str] = None) -> PostRead:
        """게시글 삽입 후 id 가 채워진 행 반환. 제목이 비어 있으면 PostValidationError."""
        if title is None or not title.strip():
            raise PostValidationError("title is required")

        with self.db.session_scope() as session:
            row = Post(title=title, content=content or "")
            session.add(row)
            session.flush()
            created = PostRead.model_validate(row)

        logger.info(f"📝 Post created: id={created.id}")
        return created
