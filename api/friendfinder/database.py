import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

DATABASE_URL = os.getenv("DATABASE_URL", "postgresql+psycopg2://postgres:postgres@db:5432/friendfinder")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))

# pooled connections are pinged before reuse
engine = create_engine(DATABASE_URL, future=True, pool_size=DB_POOL_SIZE, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
