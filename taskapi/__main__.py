"""
Run the API server:

  python -m taskapi

Listens on HOST:PORT from the environment (or .env).
"""

import uvicorn
from dotenv import load_dotenv

from taskapi.core.config import get_settings
from taskapi.core.logging_setup import configure_logging


def main() -> None:
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "taskapi.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
