from app.database.db import get_db, get_ctx_db, SessionLocal
from app.database.base_class import Base

__all__ = ["get_db", "get_ctx_db", "SessionLocal", "Base"]
