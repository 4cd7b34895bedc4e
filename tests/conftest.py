import pytest
from fastapi.testclient import TestClient

from blood_bank_api.app.main import app
from blood_bank_api.app.services.bloodbank_service import BloodBankService, get_bloodbank_service
from blood_bank_api.app.services.entry_store import EntryStore
from tests.factories import NOW


@pytest.fixture
def store() -> EntryStore:
    return EntryStore()


@pytest.fixture
def service(store) -> BloodBankService:
    return BloodBankService(store=store, clock=lambda: NOW)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_bloodbank_service] = lambda: service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
