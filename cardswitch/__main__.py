import logging

import uvicorn

from cardswitch.config import settings

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=getattr(logging, settings.log_level))
    logger.info("Starting %s on %s:%d", settings.service_name, settings.host, settings.port)
    uvicorn.run(
        "cardswitch.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        workers=1,
    )


if __name__ == "__main__":
    main()
