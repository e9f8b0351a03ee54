from __future__ import annotations

import mysql.connector
import pytest
from mysql.connector import errorcode

from src.geo_attendance.geo_attendance.core.exceptions import DuplicateRecordError, PoolTimeoutError, StorageError
from src.geo_attendance.geo_attendance.database.connection import DatabaseConnection, DBConfig
from src.geo_attendance.geo_attendance.database.mysql_base import db_cursor, fetchall


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.closed = False

    def execute(self, sql, params=None):
        if self._conn.fail_with is not None:
            raise self._conn.fail_with
        self._conn.executed.append(sql)

    def fetchall(self):
        return [{"test": 1}]

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, pool):
        self._pool = pool
        self.executed = []
        self.fail_with = None
        self.commits = 0
        self.rollbacks = 0

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self._pool.returned += 1


class FakePool:
    def __init__(self):
        self.handed_out = []
        self.returned = 0
        self.fail_with = None

    def get_connection(self):
        conn = FakeConnection(self)
        conn.fail_with = self.fail_with
        self.handed_out.append(conn)
        return conn


def make_db(pool, *, size=1, timeout=0.05) -> DatabaseConnection:
    config = DBConfig(host="db", port=3306, user="u", password="p", database="attendance_app", pool_size=size, pool_timeout=timeout)
    return DatabaseConnection(config, pool=pool)


def test_connection_is_returned_to_pool():
    pool = FakePool()
    db = make_db(pool)
    with db.connection():
        pass
    with db.connection():
        pass
    assert pool.returned == 2


def test_waiting_past_timeout_raises():
    db = make_db(FakePool(), size=1)
    with db.connection():
        with pytest.raises(PoolTimeoutError):
            with db.connection():
                pass


def test_slot_is_released_after_error():
    db = make_db(FakePool(), size=1)
    with pytest.raises(RuntimeError):
        with db.connection():
            raise RuntimeError("boom")
    with db.connection():
        pass


def test_db_cursor_commits_on_success():
    pool = FakePool()
    with db_cursor(make_db(pool)) as (_, cur):
        cur.execute("SELECT 1 AS test")
        assert fetchall(cur) == [{"test": 1}]

    conn = pool.handed_out[0]
    assert conn.commits == 1
    assert conn.rollbacks == 0


def test_duplicate_key_becomes_duplicate_record_error():
    pool = FakePool()
    pool.fail_with = mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)

    with pytest.raises(DuplicateRecordError):
        with db_cursor(make_db(pool)) as (_, cur):
            cur.execute("INSERT INTO attendance ...")
    assert pool.handed_out[0].rollbacks == 1


def test_other_driver_errors_become_storage_error():
    pool = FakePool()
    pool.fail_with = mysql.connector.ProgrammingError(msg="Unknown column", errno=errorcode.ER_BAD_FIELD_ERROR)

    with pytest.raises(StorageError) as excinfo:
        with db_cursor(make_db(pool)) as (_, cur):
            cur.execute("SELECT nope FROM users")
    assert not isinstance(excinfo.value, DuplicateRecordError)
    assert excinfo.value.status_code == 500
