from sqlalchemy import Column, ForeignKey, Integer, Numeric, String

from app.db.session import Base

class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    plan = Column(String)
    price = Column(Numeric(10, 2))
    period = Column(String)
