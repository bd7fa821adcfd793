from database import engine, Base
import models  # noqa: F401  registers the mapped tables on Base.metadata
import logging

logger = logging.getLogger(__name__)


def init_database(bind=None):
    """
    Create any missing tables for the mapped entities.

    Args:
        bind: Engine or connection to use (defaults to the configured engine)
    """
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database schema ready: {', '.join(sorted(Base.metadata.tables))}")
