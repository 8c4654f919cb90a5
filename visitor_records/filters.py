import datetime

from visitor_records.schema import SEARCH_FIELDS, VisitorRecord
from visitor_records.util import normalize_text, parse_day


def matches_search(record: VisitorRecord, search_term: str | None) -> bool:
    """
    True si el término aparece (sin distinguir mayúsculas) en el nombre, el motivo
    o la persona de contacto. Un término vacío coincide con todo; un campo
    ausente simplemente no coincide.
    """
    if search_term is None or search_term == "":
        return True
    term = normalize_text(search_term)
    if not term:
        return False
    # Los espacios del término cuentan: "ali " no coincide con "Alice"
    return any(term in normalize_text(getattr(record, attr, None)) for attr in SEARCH_FIELDS)


def matches_date(record: VisitorRecord, filter_date: datetime.date | None) -> bool:
    """Sin fecha coincide con todo; con fecha, el día de time_in debe ser el mismo."""
    if filter_date is None:
        return True
    return parse_day(record.time_in) == filter_date


def filter_records(
    records: list[VisitorRecord],
    search_term: str | None = "",
    filter_date: datetime.date | None = None,
) -> list[VisitorRecord]:
    """Subsecuencia de records (mismo orden) que cumple la búsqueda y la fecha."""
    return [
        r for r in (records or [])
        if matches_search(r, search_term) and matches_date(r, filter_date)
    ]
