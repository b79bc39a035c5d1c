import logging
from typing import Union

from uvicorn.logging import DefaultFormatter

LOG_FORMAT = "%(levelprefix)s %(message)s"


def get_logger(name: str, log_level: Union[int, str] = logging.INFO) -> logging.Logger:
    """uvicorn 포맷터가 붙은 로거를 리턴합니다.

    핸들러와 레벨은 처음 한 번만 설정합니다. 애플리케이션이 이미 지정한
    레벨이나 먼저 만들어진 UoW 의 레벨은 덮어쓰지 않습니다.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        if logger.level == logging.NOTSET:
            logger.setLevel(log_level)
        ch = logging.StreamHandler()
        ch.setFormatter(DefaultFormatter(fmt=LOG_FORMAT))
        logger.addHandler(ch)

    return logger
