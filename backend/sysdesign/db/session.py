import json
import time
from typing import Callable, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from sysdesign.config import DATABASE_URL
from sysdesign.db.models import Base, GenerationLog


def make_engine(url: str):
    if not url:
        return None
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine) if engine is not None else None


def init_db(retries: int = 5, delay: float = 2) -> bool:
    """Create tables, waiting for the database to come up."""
    if engine is None:
        print("[DB] DATABASE_URL not set, running without persistence")
        return False

    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=engine)
            print("[DB] Database connected")
            return True
        except OperationalError:
            print(f"[DB] Waiting for database... ({attempt + 1}/{retries})")
            time.sleep(delay)

    # Do not crash the app
    print("[DB] Database not ready, running without persistence")
    return False


def log_generation(
    mode: str,
    prompt: str,
    result,
    session_factory: Optional[Callable[[], Session]] = None,
) -> Optional[int]:
    """
    Best-effort record of one synthesis. Returns the row id, or None when
    persistence is disabled or the write failed.
    """
    factory = session_factory or SessionLocal
    if factory is None:
        return None

    diagram = result.diagram
    row = GenerationLog(
        mode=mode,
        prompt=prompt,
        status=result.status,
        message=result.message,
        output=json.dumps(diagram.to_dict()),
        node_count=len(diagram.nodes),
        edge_count=len(diagram.edges),
    )

    session = factory()
    try:
        session.add(row)
        session.commit()
        return row.id
    except SQLAlchemyError as e:
        session.rollback()
        print(f"[DB] Failed to log generation: {e}")
        return None
    finally:
        session.close()
