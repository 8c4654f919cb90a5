import datetime

import pandas as pd


def normalize_text(s) -> str:
    """Texto en minúsculas para búsquedas por subcadena, sin recortar espacios.

    Cualquier valor que no sea str (None, números, listas) devuelve "".
    """
    if not isinstance(s, str):
        return ""
    return s.lower()


def date_only(ts) -> str:
    """Extract YYYY-MM-DD from timestamp string like YYYY-MM-DDTHH:MM:SS."""
    if not isinstance(ts, str):
        return ""
    return ts.strip().split("T")[0].split(" ")[0]


def parse_day(ts) -> datetime.date | None:
    """
    Devuelve la fecha (datetime.date) de un timestamp, o None si no tiene parte de fecha.

    Un valor solo con hora ("09:00") no tiene día y devuelve None, aunque
    pandas lo interpretaría como la fecha de hoy.
    """
    day = date_only(ts)
    if not day or ":" in day:
        return None

    fecha = pd.to_datetime(day, errors="coerce")
    if pd.isna(fecha):
        return None
    return fecha.date()
