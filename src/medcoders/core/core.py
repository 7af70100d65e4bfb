from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, cast
from urllib.parse import urlparse

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.config import Config

if TYPE_CHECKING:
    from medcoders.core.modules.access.service import AccessService
    from medcoders.core.modules.application.service import ApplicationService
    from medcoders.core.modules.blog.service import BlogService
    from medcoders.core.modules.career.service import CareerService
    from medcoders.core.modules.lead.service import LeadService
    from medcoders.core.modules.mail.service import MailService
    from medcoders.core.modules.session.service import SessionService
    from medcoders.core.modules.upload.service import UploadService
    from medcoders.core.modules.user.service import UserService


class Service:
    """Base class for services with direct database access."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self.database = database
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        self._core = core


class Services:
    """Service registry, instantiated in dependency order."""

    user: UserService
    session: SessionService
    access: AccessService
    mail: MailService
    upload: UploadService
    blog: BlogService
    career: CareerService
    application: ApplicationService
    lead: LeadService

    # (attribute_name, module_path, class_name); user must start before anything that seeds data
    SERVICE_CONFIGS = (
        ("user", "medcoders.core.modules.user.service", "UserService"),
        ("session", "medcoders.core.modules.session.service", "SessionService"),
        ("access", "medcoders.core.modules.access.service", "AccessService"),
        ("mail", "medcoders.core.modules.mail.service", "MailService"),
        ("upload", "medcoders.core.modules.upload.service", "UploadService"),
        ("blog", "medcoders.core.modules.blog.service", "BlogService"),
        ("career", "medcoders.core.modules.career.service", "CareerService"),
        ("application", "medcoders.core.modules.application.service", "ApplicationService"),
        ("lead", "medcoders.core.modules.lead.service", "LeadService"),
    )

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._services: list[Service] = []

        for attr_name, module_path, class_name in self.SERVICE_CONFIGS:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(database)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        # Mail stops after the services that queue emails through it
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config, database, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]]
    database: AsyncDatabase[dict[str, Any]]
    services: Services

    def __init__(self, config: Config) -> None:
        self.config = config
        self.mongo_client = AsyncMongoClient(config.database_url, uuidRepresentation="standard", tz_aware=True)
        self.database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
        self.services = Services(self.database)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        await self.services.stop_all()
        await self.mongo_client.aclose()
