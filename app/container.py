"""Dependency Injection container - initialized at app startup."""

from app.repositories import CacheStore, Database
from app.services.catalog import CatalogService
from app.services.covers import CoverService
from app.services.network import NetworkMonitor
from openlibrary_client import CatalogClient
from prefetch import PrefetchConfig, PrefetchOrchestrator
from settings import DB_PATH


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        db_path: str = DB_PATH,
        online: bool = True,
        prefetch_config: PrefetchConfig | None = None,
    ) -> None:
        """Wire all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Shared state
        self.network = NetworkMonitor(online=online)
        self.store = CacheStore(Database(db_path))
        self.client = CatalogClient()

        # Services
        self.covers = CoverService(covers=self.store.covers, network=self.network)
        self.catalog = CatalogService(client=self.client, store=self.store, network=self.network)
        self.prefetch = PrefetchOrchestrator(
            store=self.store,
            client=self.client,
            network=self.network,
            config=prefetch_config,
        )

        self._initialized = True

    async def start(self) -> None:
        """Open the HTTP client and the cache store."""
        await self.client.open()
        await self.store.init()

    async def shutdown(self) -> None:
        await self.client.aclose()
        await self.store.close()
        self._initialized = False


# Global container instance
container = Container()
