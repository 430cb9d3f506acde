import logging


def create_logger(level: int) -> logging.Logger:
    formatter = logging.Formatter(fmt="%(asctime)s - %(levelname)s - %(module)s - %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    podiumboard_logger = logging.getLogger("podiumboard")
    podiumboard_logger.setLevel(level)
    if not podiumboard_logger.handlers:
        podiumboard_logger.addHandler(handler)
    return podiumboard_logger


logger = create_logger(logging.INFO)
