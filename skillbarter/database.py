# skillbarter/database.py - Hosted database connection
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from skillbarter.config import settings

# Database URL loaded from .env via skillbarter/config.py
DATABASE_URL = settings.DATABASE_URL


def _create_engine(url: str):
    if str(url).startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = _create_engine(DATABASE_URL)

# Session maker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models. Tables are owned by the hosted service,
# so nothing here creates or migrates them.
Base = declarative_base()


# Dependency to get database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
