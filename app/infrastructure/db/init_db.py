from __future__ import annotations

import logging

from app.infrastructure.db.engine import Base

# imported for their side effect of registering tables on Base.metadata
from app.infrastructure.db.models import accounts  # noqa: F401


logger = logging.getLogger(__name__)


def init_db(engine) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    from app.core.logging import configure_logging
    from app.infrastructure.db.engine import get_engine
    from app.shared.config import get_settings

    settings = get_settings()
    configure_logging(settings)
    if not settings.postgres_dsn:
        raise SystemExit("POSTGRES_DSN is required.")
    init_db(get_engine(settings.postgres_dsn))
