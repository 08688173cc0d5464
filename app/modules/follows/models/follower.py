from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint

from app.db.session import Base

# Directed edge: follower_id follows following_id.
# Self-follows are not rejected.
class Follower(Base):
    __tablename__ = "followers"

    follower_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    following_id = Column(Integer, ForeignKey("users.id"), primary_key=True, index=True)

    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="unique_follow"),
    )
