from sqlalchemy import Column, String, DateTime, Integer, UniqueConstraint, func
from app.database.base_class import Base


class Badge(Base):
    __tablename__ = "badges"

    badge_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    awarded_at = Column(DateTime, server_default=func.now(), nullable=False)

    # one row per (user, milestone); the awarder relies on this for insert-if-absent
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_badges_user_id_name"),
    )
