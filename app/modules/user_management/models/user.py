from sqlalchemy import Column, Date, Integer, String

from app.db.session import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    location = Column(String, nullable=True)
    birthdate = Column(Date, nullable=True)
    avatar_url = Column(String, nullable=True)
