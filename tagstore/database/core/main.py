# tagstore/database/core/main.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import Column, MetaData, Table, create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from tagstore.common.logging import get_logger
from tagstore.common.settings import Settings, get_settings

logger = get_logger(__name__)

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created")


def _metadata_schema(schema: Optional[str]) -> Optional[str]:
    return schema if schema and schema.lower() != "public" else None


class Base(DeclarativeBase):
    # Default schema keeps DDL explicit; None means the connection's default
    metadata = MetaData(
        schema=_metadata_schema(_settings.db_schema),
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return Table(*args, **kw)

        # Positional args are (name, metadata, *columns_and_constraints)
        name, metadata, *rest = args

        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}

        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def create_db_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Build the pooled engine. Lifecycle (dispose at shutdown) belongs to whoever
    calls this; nothing here keeps a process-wide engine.
    """
    cfg = settings or get_settings()
    url = make_url(cfg.database_url)
    kwargs: Dict[str, Any] = {"echo": cfg.db.echo, "future": True}

    if url.get_backend_name() == "sqlite":
        # Worker threads share the pool; sqlite3 must not pin connections to a thread
        kwargs["connect_args"] = {"check_same_thread": False}
    if not (url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")):
        kwargs.update(
            pool_size=cfg.db_pool_size,
            max_overflow=cfg.db.max_overflow,
            pool_timeout=cfg.db.pool_timeout,
            pool_pre_ping=cfg.db.pool_pre_ping,
            pool_recycle=cfg.db.pool_recycle,
        )

    engine = create_engine(url, **kwargs)

    if url.get_backend_name() == "sqlite":
        @event.listens_for(engine, "connect")
        def _sqlite_on_connect(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()
            # built-in lower() folds ASCII only
            dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)
            # SQLAlchemy emits BEGIN itself (see _sqlite_begin)
            dbapi_conn.isolation_level = None

        @event.listens_for(engine, "begin")
        def _sqlite_begin(conn):
            # writer lock taken at BEGIN, so concurrent writers queue on the busy timeout
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    schema = _metadata_schema(cfg.db_schema)
    if schema and url.get_backend_name() == "postgresql":
        # App schema first, then public (so extensions remain visible)
        @event.listens_for(engine, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    logger.info("database engine ready (backend=%s, pool_size=%s)", url.get_backend_name(), kwargs.get("pool_size"))
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)