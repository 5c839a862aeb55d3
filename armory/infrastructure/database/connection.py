"""Database engines: one world database plus one characters database per realm.

All databases are read-only from the armory's point of view. Engines are
created once at startup; repositories receive a sessionmaker.
"""
import logging
import re
from typing import Dict

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

log = logging.getLogger("armory.database")

# Matches a database URL anywhere inside a string.
_DB_URL_RE = re.compile(r"([a-z0-9+]+://\S+)")


def resolve_database_url(raw: str) -> str:
    """Return a clean SQLAlchemy URL.

    Handles whitespace and surrounding quotes from copy-paste, and the
    ``postgres://`` scheme that SQLAlchemy rejects.
    """
    raw = (raw or "").strip()

    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ('"', "'"):
        raw = raw[1:-1].strip()

    match = _DB_URL_RE.search(raw)
    url = match.group(1) if match else raw
    url = url.rstrip("'\"").strip()

    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def build_engine(url: str, label: str):
    """Create a SQLAlchemy engine for the given URL, logging masked host."""
    masked = url.split("@")[-1].split("?")[0] if "@" in url else url.split("://")[0]
    log.info("Initialising %s engine -> %s", label, masked)
    if url.startswith("sqlite"):
        return create_engine(url, echo=False)
    return create_engine(
        url,
        pool_size=3,
        max_overflow=5,
        pool_timeout=15,
        pool_recycle=1800,
        pool_pre_ping=True,
        echo=False,
    )


def check_engine_health(engine) -> bool:
    """Lightweight connectivity probe for an engine."""
    if engine is None:
        return False
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


class DatabaseRegistry:
    """Holds the world engine and the per-realm characters engines."""

    def __init__(self):
        self._world_engine = None
        self._realm_engines: Dict[str, object] = {}

    def connect_world(self, url: str) -> sessionmaker:
        self._world_engine = build_engine(resolve_database_url(url), "WORLD")
        return sessionmaker(bind=self._world_engine, expire_on_commit=False)

    def connect_realm(self, name: str, url: str) -> sessionmaker:
        engine = build_engine(resolve_database_url(url), f"REALM {name}")
        self._realm_engines[name.lower()] = engine
        return sessionmaker(bind=engine, expire_on_commit=False)

    def status(self) -> dict:
        """Health of every engine, for the /health endpoint."""
        result = {"world": check_engine_health(self._world_engine)}
        for name, engine in self._realm_engines.items():
            result[name] = check_engine_health(engine)
        return result
