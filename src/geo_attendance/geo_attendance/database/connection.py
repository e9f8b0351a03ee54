from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT_SECONDS
from ..core.exceptions import PoolTimeoutError

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS


class DatabaseConnection:
    """Bounded connection pool shared by all repositories.

    mysql-connector's pool raises immediately when exhausted, so acquisition is
    gated by a semaphore of the same size: callers beyond the ceiling wait up
    to ``pool_timeout`` seconds and then fail with PoolTimeoutError.
    Built once by the container and passed in explicitly (no module globals).
    """

    def __init__(self, config: DBConfig, *, pool: Optional[Any] = None):
        self._config = config
        self._pool = pool
        self._pool_lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(int(config.pool_size))

    def _get_pool(self):
        with self._pool_lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name="geo_attendance",
                    pool_size=int(self._config.pool_size),
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                )
            return self._pool

    @contextmanager
    def connection(self) -> Iterator[Any]:
        if not self._slots.acquire(timeout=float(self._config.pool_timeout)):
            logger.warning("No database connection available after %ss", self._config.pool_timeout)
            raise PoolTimeoutError("Timed out waiting for a database connection")
        try:
            conn = self._get_pool().get_connection()
            try:
                yield conn
            finally:
                # returns the connection to the pool
                conn.close()
        finally:
            self._slots.release()

