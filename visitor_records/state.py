import datetime
import enum
import logging
from dataclasses import dataclass, field

import streamlit as st

from visitor_records.api.records_source import FetchErrorKind, FetchResult, fetch_visitors
from visitor_records.filters import filter_records
from visitor_records.printing import PassPrinter, log_pass_print
from visitor_records.schema import VisitorRecord

logger = logging.getLogger(__name__)

STATE_KEY = "visitors"


class LoadStatus(enum.Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class VisitorRecordsState:
    """
    Estado de la página de visitantes: registros, búsqueda y visitante seleccionado.

    Solo se modifica a través de los métodos de transición; la página nunca
    escribe los atributos directamente.
    """

    records: list[VisitorRecord] = field(default_factory=list)
    search_term: str = ""
    filter_date: datetime.date | None = None
    filters_visible: bool = False
    selected: VisitorRecord | None = None
    load_status: LoadStatus = LoadStatus.LOADING
    last_error: FetchErrorKind | None = None
    torn_down: bool = False
    printer: PassPrinter = log_pass_print

    # --- Carga -------------------------------------------------------

    def apply_fetch_result(self, result: FetchResult) -> bool:
        """Sustituye los registros por el resultado de la descarga. False si la sesión ya terminó."""
        if self.torn_down:
            logger.debug("Discarding fetch result after teardown")
            return False

        self.records = list(result.records)
        self.last_error = result.error
        self.load_status = LoadStatus.LOADED if result.ok else LoadStatus.FAILED

        # El seleccionado debe seguir existiendo en la lista nueva
        if self.selected is not None and not self._contains(self.selected):
            self.selected = None
        return True

    def teardown(self) -> None:
        """Marca la sesión como terminada; los resultados que lleguen después se descartan.

        Streamlit no avisa del fin de una sesión, así que la página no lo llama:
        es para quien aloje este estado fuera de una página (un worker, los tests).
        """
        self.torn_down = True

    # --- Filtros -----------------------------------------------------

    def set_search_term(self, term: str | None) -> None:
        self.search_term = term or ""

    def set_filter_date(self, filter_date: datetime.date | None) -> None:
        self.filter_date = filter_date

    def toggle_filters(self) -> None:
        self.filters_visible = not self.filters_visible

    def visible_records(self) -> list[VisitorRecord]:
        return filter_records(self.records, self.search_term, self.filter_date)

    # --- Selección ---------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self.selected is not None

    def select(self, record: VisitorRecord) -> None:
        if not self._contains(record):
            logger.warning("Ignoring selection of a record not in the list: %r", record.id)
            return
        self.selected = record

    def close(self) -> None:
        self.selected = None

    def trigger_print(self, record: VisitorRecord | None = None) -> bool:
        """Llama a la impresora con el registro indicado (o el seleccionado). No cambia el estado."""
        target = record if record is not None else self.selected
        if target is None:
            logger.warning("Print requested with no visitor selected")
            return False
        self.printer(target)
        return True

    def _contains(self, record: VisitorRecord) -> bool:
        if record.id is not None:
            return any(r.id == record.id for r in self.records)
        return any(r is record or r == record for r in self.records)


def init_app_state(printer: PassPrinter | None = None) -> VisitorRecordsState:
    """Crea el estado de la sesión la primera vez y lo devuelve."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = VisitorRecordsState()
    state = st.session_state[STATE_KEY]
    if printer is not None:
        state.printer = printer
    return state


def get_state() -> VisitorRecordsState:
    return st.session_state[STATE_KEY]


def load_records(state: VisitorRecordsState, fetch=fetch_visitors) -> bool:
    """Descarga los registros una sola vez por sesión. True si se hizo la descarga."""
    if state.load_status is not LoadStatus.LOADING:
        return False
    return state.apply_fetch_result(fetch())
