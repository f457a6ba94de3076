import logging

from app.db.postgres.base import dispose_engine, init_db
from app.settings import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        settings.validate_required()
        init_db()
        logger.info("Schema migration completed successfully.")
    except Exception as e:
        logger.error(f"Schema migration failed: {e}", exc_info=True)
        raise SystemExit(1)
    finally:
        dispose_engine()
