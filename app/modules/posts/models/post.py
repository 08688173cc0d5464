from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, String
from sqlalchemy.sql import func

from app.db.session import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=func.now(), nullable=False)

    # Likes and comments are counted on read, never stored on the row
