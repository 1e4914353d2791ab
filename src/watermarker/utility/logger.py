import sys

from loguru import logger

from watermarker.core.config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(level: str | None = None, log_file: str | None = None):
    """CLI 시작 시 한 번 호출한다. 라이브러리로 쓸 때는 호출하지 않아도 된다.

    log_file (또는 settings.LOG_FILE)이 있으면 같은 형식으로 파일에도 남긴다.
    """
    level = level or settings.LOG_LEVEL
    log_file = log_file or settings.LOG_FILE

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    if log_file:
        logger.add(log_file, format=LOG_FORMAT, level=level, rotation="10 MB", colorize=False)
    return logger
