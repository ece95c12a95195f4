from sqlalchemy import Column, String, DateTime, Integer, UniqueConstraint, func
from app.database.base_class import Base


class Completion(Base):
    __tablename__ = "completions"

    completion_id = Column(Integer, primary_key=True, autoincrement=True)

    # attributes
    user_id = Column(String(64), nullable=False, index=True)
    location_id = Column(String(64), nullable=False)
    completed_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "location_id", name="uq_completions_user_id_location_id"),
    )
