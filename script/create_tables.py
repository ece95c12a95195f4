# create_tables.py
from sqlalchemy import inspect

from app.database.base_class import Base
from app.database.session import SQLALCHEMY_DATABASE_URL, get_engine
from app.model import badges, completions  # noqa: F401  registers the tables on Base


def main():
    engine = get_engine(SQLALCHEMY_DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    print("✅ Tables created.")

    inspector = inspect(engine)
    print("📋 Existing tables:", inspector.get_table_names())


if __name__ == "__main__":
    main()
