import pytest

from visitor_records.schema import VisitorRecord


@pytest.fixture
def alice_payload():
    return [
        {
            "id": 1,
            "name": "Alice",
            "purpose": "Delivery",
            "contactPerson": "Bob",
            "status": "active",
            "timeIn": "09:00",
            "timeOut": "",
        }
    ]


@pytest.fixture
def records():
    return [
        VisitorRecord(id="a1", name="Alice Martin", purpose="Delivery", contact_person="Bob Smith",
                      status="active", time_in="2025-03-10T09:00", time_out=""),
        VisitorRecord(id="a2", name="Carlos Pérez", purpose="Entrevista", contact_person="Marta López",
                      status="completed", time_in="2025-03-11T10:15", time_out="2025-03-11T11:00",
                      photo="https://example.com/carlos.png"),
        VisitorRecord(id="a3", name="Lucía Gómez", purpose="Reunión con Alice", contact_person="Recepción",
                      status="pending", time_in="2025-03-10T12:30", time_out=""),
        # Registro incompleto: sin motivo ni contacto
        VisitorRecord(id="a4", name="Daniel Ruiz", status="unknown", time_in="13:00"),
    ]


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch):
    monkeypatch.delenv("VISITORS_API_URL", raising=False)
    monkeypatch.delenv("APP_LANG", raising=False)
