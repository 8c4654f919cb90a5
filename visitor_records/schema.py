from dataclasses import dataclass, fields
from typing import Any, Optional

import pandas as pd

# Estados conocidos → nivel visual
STATUS_TIERS = {
    "pending": "warning",
    "active": "primary",
    "completed": "success",
}
DEFAULT_STATUS_TIER = "neutral"

# Campo del modelo → clave en el JSON de la API
WIRE_KEYS = {
    "id": "_id",
    "name": "name",
    "purpose": "purpose",
    "contact_person": "contactPerson",
    "location": "location",
    "visitor_type": "visitorType",
    "time_in": "timeIn",
    "time_out": "timeOut",
    "status": "status",
    "photo": "photo",
}

SEARCH_FIELDS = ("name", "purpose", "contact_person")


def _text(value) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return None
    return str(value)


@dataclass(frozen=True)
class VisitorRecord:
    """Un registro de visita (check-in) tal como lo devuelve la API."""

    id: Any = None
    name: Optional[str] = None
    purpose: Optional[str] = None
    contact_person: Optional[str] = None
    location: Optional[str] = None
    visitor_type: Optional[str] = None
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    status: Optional[str] = None
    photo: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "VisitorRecord":
        """
        Crea un VisitorRecord desde el JSON de la API.

        - El id se toma de "_id" (MongoDB) y si falta o es null, de "id".
        - Las claves desconocidas se ignoran y las que faltan quedan en None.
        """
        values = {"id": data.get("_id") if data.get("_id") is not None else data.get("id")}
        for attr, key in WIRE_KEYS.items():
            if attr == "id":
                continue
            values[attr] = _text(data.get(key))
        return cls(**values)

    def to_dict(self) -> dict:
        """Forma JSON (camelCase) del registro."""
        return {WIRE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}

    @property
    def has_photo(self) -> bool:
        return bool(self.photo and self.photo.strip())


def status_tier(status) -> str:
    """pending → warning, active → primary, completed → success, cualquier otro → neutral."""
    if not isinstance(status, str):
        return DEFAULT_STATUS_TIER
    return STATUS_TIERS.get(status, DEFAULT_STATUS_TIER)


def records_to_df(records: list[VisitorRecord]) -> pd.DataFrame:
    """DataFrame con una fila por registro y la columna auxiliar status_tier."""
    if not records:
        return pd.DataFrame(columns=[f.name for f in fields(VisitorRecord)] + ["status_tier"])

    df = pd.DataFrame([vars(r) for r in records])
    df["status_tier"] = df["status"].apply(status_tier)
    return df
