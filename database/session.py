from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import core.config as config
import database.base as base

engine = create_engine(base.DATABASE_URL, echo=config.DB_ECHO, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
