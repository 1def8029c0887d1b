# storefront/main.py
import uvicorn

from storefront.api import create_app
from storefront.data.database import Base, SessionLocal, engine
from storefront.data.seed import seed
from storefront.utils.logging import configure_logging, get_logger

# import wszystkich modeli przed create_all
import storefront.data.models  # noqa: F401

configure_logging()
logger = get_logger(__name__)

logger.info("Initializing database", tables=list(Base.metadata.tables.keys()))

try:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
except Exception as e:
    logger.error(f"Failed to create tables: {e}")
    raise

with SessionLocal() as db:
    seed(db)

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
