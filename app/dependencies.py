from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import get_settings
from app.services.artist_repository import ArtistRepository, FavoritesRepository
from app.services.dashboard_service import DashboardService
from app.services.directory_service import DirectoryService, directory_service
from app.services.onboarding_service import OnboardingService, onboarding_service
from app.services.storage_service import DocumentStore, build_store


@lru_cache
def get_store() -> DocumentStore:
    """
    Document store for submitted artists and favorites.

    Built once from settings. Override this dependency to plug in another
    backend (tests use a MemoryStore).
    """
    return build_store(get_settings())


def get_artist_repository(
    store: Annotated[DocumentStore, Depends(get_store)]
) -> ArtistRepository:
    return ArtistRepository(store)


def get_favorites_repository(
    store: Annotated[DocumentStore, Depends(get_store)]
) -> FavoritesRepository:
    return FavoritesRepository(store)


def get_dashboard_service(
    repository: Annotated[ArtistRepository, Depends(get_artist_repository)]
) -> DashboardService:
    return DashboardService(repository)


def get_directory_service() -> DirectoryService:
    return directory_service


def get_onboarding_service() -> OnboardingService:
    return onboarding_service


# Type aliases for cleaner dependency injection
ArtistRepo = Annotated[ArtistRepository, Depends(get_artist_repository)]
FavoritesRepo = Annotated[FavoritesRepository, Depends(get_favorites_repository)]
Directory = Annotated[DirectoryService, Depends(get_directory_service)]
Onboarding = Annotated[OnboardingService, Depends(get_onboarding_service)]
Dashboard = Annotated[DashboardService, Depends(get_dashboard_service)]
