import fcntl
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager

from alembic.config import Config

from alembic import command
from podiumboard.config import config
from podiumboard.utils.logging import logger

_MIGRATION_LOCK_PATH = os.path.join(tempfile.gettempdir(), "podiumboard-alembic.lock")


@contextmanager
def _migration_lock() -> Iterator[None]:
    # Several uvicorn workers may start at once; only one may run the upgrade.
    with open(_MIGRATION_LOCK_PATH, "w", encoding="utf-8") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_file, fcntl.LOCK_UN)


def get_alembic_config() -> Config:
    alembic_config = Config(config.alembic_config_path)
    alembic_config.set_main_option("sqlalchemy.url", config.database_url)
    return alembic_config


def alembic_run_migrations() -> None:
    with _migration_lock():
        logger.info("Running migrations from %s", config.alembic_config_path)
        command.upgrade(get_alembic_config(), "head")
