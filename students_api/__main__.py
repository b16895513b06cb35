import structlog
import uvicorn

from .config import settings
from .main import app

logger = structlog.get_logger()


def main() -> None:
    logger.info("Students service listening", url=f"http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
