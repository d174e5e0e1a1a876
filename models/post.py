from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Post(Base):
    """
    블로그 게시글 모델
    """
    __tablename__ = 'posts'
    # AUTOINCREMENT: 삭제된 id 도 재사용하지 않음
    __table_args__ = {'sqlite_autoincrement': True}

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    content = Column(Text, default="")

    def __repr__(self):
        return f"<Post(id={self.id}, title='{self.title}')>"
