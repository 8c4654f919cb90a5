"""
Obtención del listado de visitantes desde la API.

Una sola petición GET por sesión; cualquier fallo (red, respuesta que no es un
array, página HTML en lugar de JSON) se registra en el log y se traduce en una
lista vacía. Nunca se propaga una excepción a la página.
"""

import enum
import logging
from dataclasses import dataclass, field

import requests

from visitor_records.app_config.config import get_visitors_url
from visitor_records.schema import VisitorRecord

logger = logging.getLogger(__name__)

# Cualquier cuerpo que empiece por "<" (HTML, XML, fragmentos) no es JSON
MARKUP_START = "<"


class FetchErrorKind(enum.Enum):
    TRANSPORT = "transport"
    SHAPE = "shape"
    MARKUP = "markup"


@dataclass(frozen=True)
class FetchResult:
    records: list[VisitorRecord] = field(default_factory=list)
    error: FetchErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, records: list[VisitorRecord]) -> "FetchResult":
        return cls(records=list(records))

    @classmethod
    def failure(cls, kind: FetchErrorKind) -> "FetchResult":
        return cls(records=[], error=kind)


def looks_like_markup(text) -> bool:
    """True si el texto parece marcado (p. ej. la página 404 del servidor) en lugar de JSON."""
    if not isinstance(text, str):
        return False
    return text.lstrip().startswith(MARKUP_START)


def validate_payload(payload) -> FetchResult:
    """
    Valida el cuerpo ya decodificado de la respuesta.

    - str con HTML → MARKUP
    - cualquier cosa que no sea lista → SHAPE
    - lista → registros en el mismo orden; los elementos que no son objetos se descartan
    """
    if looks_like_markup(payload):
        logger.error("Received HTML instead of JSON. Check the API endpoint.")
        return FetchResult.failure(FetchErrorKind.MARKUP)

    if not isinstance(payload, list):
        logger.error("API response is not an array: %r", payload)
        return FetchResult.failure(FetchErrorKind.SHAPE)

    records = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning("Skipping visitor entry %d: expected an object, got %r", i, item)
            continue
        records.append(VisitorRecord.from_dict(item))

    return FetchResult.success(records)


def fetch_visitors(url: str | None = None, session: requests.Session | None = None) -> FetchResult:
    """Descarga el listado completo de visitantes (sin parámetros, sin reintentos)."""
    url = url or get_visitors_url()
    http = session or requests

    try:
        response = http.get(url)
        response.raise_for_status()  # 404, 500, ...
    except requests.exceptions.RequestException as e:
        logger.error("Error fetching visitors from %s: %s", url, e)
        return FetchResult.failure(FetchErrorKind.TRANSPORT)

    # El HTML se detecta antes de intentar decodificar JSON
    if looks_like_markup(response.text):
        logger.error("Received HTML instead of JSON from %s. Check the API endpoint.", url)
        return FetchResult.failure(FetchErrorKind.MARKUP)

    try:
        payload = response.json()
    except ValueError as e:
        logger.error("API response from %s is not valid JSON: %s", url, e)
        return FetchResult.failure(FetchErrorKind.SHAPE)

    result = validate_payload(payload)
    if result.ok:
        logger.info("Fetched %d visitor records from %s", len(result.records), url)
    return result
