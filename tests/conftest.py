from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Optional

import pytest
from werkzeug.security import generate_password_hash

from src.geo_attendance.geo_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from src.geo_attendance.geo_attendance.container import AppOptions, wire_container
from src.geo_attendance.geo_attendance.core.enums import Role
from src.geo_attendance.geo_attendance.core.exceptions import DuplicateRecordError
from src.geo_attendance.geo_attendance.main import create_app
from src.geo_attendance.geo_attendance.settings.model import Setting
from src.geo_attendance.geo_attendance.users.model import User

DEMO_PASSWORD = "123456"

# Wednesday
WEDNESDAY_9AM = datetime(2024, 1, 10, 9, 0)


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._id = 0

    def add(self, user: User) -> User:
        self._by_id[user.user_id] = user
        self._id = max(self._id, user.user_id)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def create_user(self, *, name, email, password_hash, role, department=None, phone_number=None) -> int:
        if self.get_by_email(email):
            raise DuplicateRecordError(f"Duplicate entry '{email}'")
        self._id += 1
        self._by_id[self._id] = User(
            user_id=self._id,
            email=email,
            name=name,
            password_hash=password_hash,
            role=role,
            department=department,
            phone_number=phone_number,
        )
        return self._id

    def set_active(self, user_id: int, *, is_active: bool) -> bool:
        user = self._by_id.get(user_id)
        if not user or user.is_active == is_active:
            return False
        self._by_id[user_id] = replace(user, is_active=is_active)
        return True

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda u: u.user_id, reverse=True)


class InMemoryAttendance:
    """Mirrors the UNIQUE (user_id, work_date) key and the conditional checkout update."""

    def __init__(self, users: InMemoryUsers):
        self._users = users
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0
        # called right before an insert; lets a test slip in a concurrent check-in
        self.on_insert: Optional[Callable[[], None]] = None

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(attendance_id)

    def list_for_user_and_date(self, user_id: int, work_date: date):
        return [r for r in self._by_id.values() if r.user_id == user_id and r.work_date == work_date]

    def create_checkin(self, *, user_id, user_name, work_date, check_in_time, latitude, longitude, status) -> int:
        if self.on_insert is not None:
            hook, self.on_insert = self.on_insert, None
            hook()
        if self.list_for_user_and_date(user_id, work_date):
            raise DuplicateRecordError("Duplicate entry for key 'uq_attendance_user_day'")
        self._id += 1
        self._by_id[self._id] = AttendanceRecord(
            attendance_id=self._id,
            user_id=user_id,
            user_name=user_name,
            work_date=work_date,
            check_in_time=check_in_time,
            check_in_lat=latitude,
            check_in_lng=longitude,
            status=status,
            created_at=check_in_time,
        )
        return self._id

    def update_checkout(self, *, attendance_id, check_out_time, latitude, longitude, total_hours) -> bool:
        record = self._by_id.get(attendance_id)
        if not record or record.check_out_time is not None:
            return False
        self._by_id[attendance_id] = replace(
            record,
            check_out_time=check_out_time,
            check_out_lat=latitude,
            check_out_lng=longitude,
            total_hours=total_hours,
        )
        return True

    def _newest_first(self, records):
        return sorted(records, key=lambda r: r.check_in_time, reverse=True)

    def list_for_user(self, user_id: int, *, limit: int, offset: int):
        items = self._newest_first(r for r in self._by_id.values() if r.user_id == user_id)
        return items[offset : offset + limit]

    def get_latest_pending(self, user_id: int):
        pending = self._newest_first(r for r in self._by_id.values() if r.user_id == user_id and r.is_pending)
        return pending[0] if pending else None

    def list_for_date_range(self, *, start_date, end_date, user_id=None):
        return self._newest_first(
            r
            for r in self._by_id.values()
            if start_date <= r.work_date <= end_date and (user_id is None or r.user_id == user_id)
        )

    def get_report_rows(self, *, start_date, end_date, user_id=None):
        rows = []
        for r in self.list_for_date_range(start_date=start_date, end_date=end_date, user_id=user_id):
            user = self._users.get_by_id(r.user_id)
            rows.append(
                AttendanceReportRow(
                    attendance_id=r.attendance_id,
                    user_id=r.user_id,
                    user_name=user.name,
                    email=user.email,
                    department=user.department,
                    check_in_time=r.check_in_time,
                    check_out_time=r.check_out_time,
                    check_in_lat=r.check_in_lat,
                    check_in_lng=r.check_in_lng,
                    check_out_lat=r.check_out_lat,
                    check_out_lng=r.check_out_lng,
                    status=r.status,
                    total_hours=r.total_hours,
                )
            )
        return rows


class InMemorySettings:
    def __init__(self, values: Optional[dict] = None):
        self.values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def list_all(self):
        return [Setting(setting_key=k, setting_value=v) for k, v in sorted(self.values.items())]


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(scope="session")
def password_hash() -> str:
    return generate_password_hash(DEMO_PASSWORD)


@pytest.fixture
def users_repo(password_hash) -> InMemoryUsers:
    repo = InMemoryUsers()
    repo.add(User(1, "admin@test.com", "Admin Demo", password_hash, Role.ADMIN, department="Administration"))
    repo.add(User(2, "empleado@test.com", "Empleado Demo", password_hash, Role.EMPLOYEE, department="Operations"))
    return repo


@pytest.fixture
def attendance_repo(users_repo) -> InMemoryAttendance:
    return InMemoryAttendance(users_repo)


@pytest.fixture
def settings_repo() -> InMemorySettings:
    return InMemorySettings()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(WEDNESDAY_9AM)


@pytest.fixture
def app_options() -> AppOptions:
    return AppOptions(jwt_secret="test-secret")


@pytest.fixture
def container(users_repo, attendance_repo, settings_repo, clock, app_options):
    return wire_container(
        conn=None,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        options=app_options,
        clock=clock,
    )


@pytest.fixture
def client(container):
    app = create_app(container, settings_module="config.testing")
    return app.test_client()


@pytest.fixture
def admin_headers(container):
    token = container.token_service.issue(user_id=1, email="admin@test.com", role=Role.ADMIN)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def employee_headers(container):
    token = container.token_service.issue(user_id=2, email="empleado@test.com", role=Role.EMPLOYEE)
    return {"Authorization": f"Bearer {token}"}
