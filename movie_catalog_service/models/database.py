"""Engine and session factory for the catalog database."""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from movie_catalog_service.config import get_database_url

DATABASE_URL = get_database_url()

if DATABASE_URL is None:
    raise ValueError("DATABASE_URL is not configured. Set the DATABASE_URL environment variable.")

engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
    pool_recycle=3600,
    echo=False  # Set to True for SQL debugging
)

# Default session factory for CatalogService
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
