from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .backend.connection import BackendConfig, BackendConnection
from .core.constants import DEFAULT_REQUEST_TIMEOUT
from .reports.service import ReportService
from .time_entries.baas_time_entry_repository import BaasTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .time_entries.service import TimeEntryService
from .users.baas_user_repository import BaasIdentityProvider, BaasUserRepository
from .users.repository import IdentityProvider, UserRepository
from .users.service import AuthService, EmployeeService, ProfileService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    entries_repo: TimeEntryRepository
    identity: IdentityProvider

    auth_service: AuthService
    profile_service: ProfileService
    employee_service: EmployeeService
    time_entry_service: TimeEntryService
    report_service: ReportService


def wire_container(
    *,
    users_repo: UserRepository,
    entries_repo: TimeEntryRepository,
    identity: IdentityProvider,
    deduct_travel_time: bool = False,
) -> Container:
    return Container(
        users_repo=users_repo,
        entries_repo=entries_repo,
        identity=identity,
        auth_service=AuthService(identity, users_repo),
        profile_service=ProfileService(users_repo),
        employee_service=EmployeeService(users_repo),
        time_entry_service=TimeEntryService(entries_repo),
        report_service=ReportService(entries_repo, users_repo, deduct_travel_time=deduct_travel_time),
    )


def build_container(
    *,
    backend_config: dict,
    deduct_travel_time: bool = False,
    conn: Optional[BackendConnection] = None,
) -> Container:
    if conn is None:
        config = BackendConfig(
            url=str(backend_config["url"]),
            service_role_key=str(backend_config["service_role_key"]),
            timeout=int(backend_config.get("timeout", DEFAULT_REQUEST_TIMEOUT)),
        )
        conn = BackendConnection.get_instance(config)

    return wire_container(
        users_repo=BaasUserRepository(conn),
        entries_repo=BaasTimeEntryRepository(conn),
        identity=BaasIdentityProvider(conn),
        deduct_travel_time=deduct_travel_time,
    )
