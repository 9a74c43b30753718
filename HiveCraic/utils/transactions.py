# utils/transactions.py
"""
Sessions for the command line scripts, outside of any request.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

import models  # noqa: F401  (registers every table on Base.metadata)
from utils.db import Base, SessionLocal, engine

logger = logging.getLogger(__name__)


@contextmanager
def uow(create_tables: bool = False) -> Iterator[Session]:
    """
    One transaction for a maintenance script:

        with uow(create_tables=True) as db:
            seed(db)

    Commits when the block ends; any error rolls back and is re-raised.
    With create_tables, missing tables are created first.
    """
    if create_tables:
        Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Script transaction rolled back")
        raise
    finally:
        db.close()
