"""Application entry point and composition root."""

import logging
from dataclasses import dataclass

from psycopg_pool import AsyncConnectionPool

from roleperm import __version__
from roleperm.application.ports import Cache
from roleperm.application.services.permission_resolver import PermissionResolver
from roleperm.application.use_cases.permission.assign_permission import AssignPermissionUseCase
from roleperm.application.use_cases.permission.check_permission import CheckPermissionUseCase
from roleperm.application.use_cases.permission.revoke_all_permissions import (
    RevokeAllPermissionsUseCase,
)
from roleperm.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from roleperm.application.use_cases.permission.sync_permissions import SyncPermissionsUseCase
from roleperm.config import Settings, get_settings
from roleperm.infrastructure.cache.memory_cache import InMemoryTTLCache
from roleperm.infrastructure.persistence.postgres.connection import create_pool
from roleperm.infrastructure.persistence.postgres.unit_of_work import create_uow_factory

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@dataclass
class PermissionService:
    """Wired permission resolver and override use cases."""

    resolver: PermissionResolver
    check: CheckPermissionUseCase
    assign: AssignPermissionUseCase
    revoke: RevokePermissionUseCase
    sync: SyncPermissionsUseCase
    revoke_all: RevokeAllPermissionsUseCase
    pool: AsyncConnectionPool | None = None


def build_service(
    unit_of_work_factory: type,
    cache: Cache,
    settings: Settings,
    pool: AsyncConnectionPool | None = None,
) -> PermissionService:
    """Wire resolver and use cases around a UoW factory and cache."""
    resolver = PermissionResolver(
        unit_of_work_factory=unit_of_work_factory,
        cache=cache,
        ttl=settings.cache_ttl_seconds,
        key_prefix=settings.cache_key_prefix,
    )
    return PermissionService(
        resolver=resolver,
        check=CheckPermissionUseCase(resolver),
        assign=AssignPermissionUseCase(unit_of_work_factory, resolver),
        revoke=RevokePermissionUseCase(unit_of_work_factory, resolver),
        sync=SyncPermissionsUseCase(unit_of_work_factory, resolver),
        revoke_all=RevokeAllPermissionsUseCase(unit_of_work_factory, resolver),
        pool=pool,
    )


def create_permission_service(settings: Settings | None = None) -> PermissionService:
    """Composition root - Postgres-backed service with an in-memory cache.

    The pool is returned unopened; callers await pool.open() for
    the lifetime of their application.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)
    return build_service(uow_factory, InMemoryTTLCache(), settings, pool=pool)


def main() -> None:
    """CLI entry point."""
    print(f"roleperm v{__version__}")
