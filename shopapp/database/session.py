# shopapp/database/session.py
import logging
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

load_dotenv()

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    url = os.getenv("DATABASE_URL", "").strip()
    if url:
        return url

    db_host = os.getenv("DB_HOST", "").strip()
    db_name = os.getenv("DB_NAME", "").strip()
    db_user = os.getenv("DB_USER", "").strip()
    db_password = os.getenv("DB_PASSWORD", "").strip()
    db_port = os.getenv("DB_PORT", "1433").strip()

    if not all([db_host, db_name, db_user, db_password]):
        return "sqlite:///./shopapp.db"

    odbc_str = (
        "DRIVER=ODBC Driver 17 for SQL Server;"
        f"SERVER={db_host},{db_port};"
        f"DATABASE={db_name};"
        f"UID={db_user};"
        f"PWD={db_password};"
        "Encrypt=yes;"
        "TrustServerCertificate=yes;"
        "Connection Timeout=30;"
    )
    return "mssql+pyodbc:///?odbc_connect=" + quote_plus(odbc_str)


DATABASE_URL = get_database_url()

# SQLite connections are shared between the request gate and the route handlers
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create missing tables and seed the reference roles."""
    from shopapp import models  # noqa: F401  registers every table on Base
    from shopapp.models.role_model import Role

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        existing = {r.id for r in db.query(Role.id)}
        to_add = [Role(id=rid, name=name) for rid, name in Role.SEED.items() if rid not in existing]
        if to_add:
            db.add_all(to_add)
            db.commit()
            logger.info("Seeded roles: %s", ", ".join(r.name for r in to_add))
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
