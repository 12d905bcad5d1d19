"""Shared fixtures: an app wired to in-memory storage and zero delays."""
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_directory_service, get_onboarding_service, get_store
from app.main import app
from app.schemas.artist import Artist
from app.services.directory_service import DirectoryService
from app.services.onboarding_service import OnboardingService
from app.services.storage_service import MemoryStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def directory():
    return DirectoryService(delay=0, artist_delay=0)


@pytest.fixture
def client(store, directory):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_directory_service] = lambda: directory
    app.dependency_overrides[get_onboarding_service] = lambda: OnboardingService(delay=0)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def artists():
    return [
        Artist(
            id="a1",
            name="Priya Sharma",
            bio="Classical dancer trained in Bharatanatyam",
            category=["Dancer", "Cultural Performer"],
            languages=["Hindi", "Tamil"],
            fee_range="₹30,000 - ₹50,000",
            location="Mumbai, Maharashtra",
            rating=4.8,
        ),
        Artist(
            id="a2",
            name="Rajesh Kumar",
            bio="Wedding DJ and music producer",
            category=["DJ", "Music Producer"],
            languages=["Hindi", "Punjabi"],
            fee_range="₹15,000 - ₹30,000",
            location="Delhi, NCR",
            rating=4.6,
        ),
        Artist(
            id="a3",
            name="vikram joshi",
            bio="Stand-up comedian for corporate shows",
            category=["Comedian", "Host"],
            languages=["Marathi", "English"],
            fee_range="₹5,000 - ₹15,000",
            location="Pune, Maharashtra",
        ),
        Artist(
            id="a4",
            name="Meera Nair",
            bio="Contemporary choreographer",
            category=["Dancer", "Choreographer"],
            languages=["Malayalam", "English"],
            fee_range="₹30,000 - ₹50,000",
            location="Kochi, Kerala",
            rating=4.5,
        ),
    ]
