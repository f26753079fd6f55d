from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from venue_booking.core.config import DATABASE_URL, FALLBACK_DATABASE_URL

Base = declarative_base()


def make_engine(url: str, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


def make_session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


# Primary store (privileged connection)
engine = make_engine(DATABASE_URL)
SessionLocal = make_session_factory(engine)

# Fallback store, used only when a primary write fails
fallback_engine = engine if FALLBACK_DATABASE_URL == DATABASE_URL else make_engine(FALLBACK_DATABASE_URL)
FallbackSessionLocal = make_session_factory(fallback_engine)
