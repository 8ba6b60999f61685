import uvicorn

from app.config import settings
from app.utils.logging import logger

def main() -> None:
    logger.info("Server is running on %s:%s (env=%s)", settings.HOST, settings.PORT, settings.ENV)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
