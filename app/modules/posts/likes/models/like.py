from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint

from app.db.session import Base

class Like(Base):
    __tablename__ = "likes"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    post_id = Column(Integer, ForeignKey("posts.id"), primary_key=True, index=True)

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="unique_like"),
    )
