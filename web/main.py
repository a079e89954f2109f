"""Web application entry point"""

import uvicorn

from config import settings
from utils.logging import setup_logging


def serve(host: str = None, port: int = None, reload: bool = False):
    setup_logging()
    uvicorn.run(
        "web.api:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    serve(reload=True)
