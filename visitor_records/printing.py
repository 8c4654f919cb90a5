import logging
from typing import Callable

from visitor_records.schema import VisitorRecord

logger = logging.getLogger(__name__)

# Cualquier función que reciba el registro e imprima (o encole) el pase
PassPrinter = Callable[[VisitorRecord], None]


def log_pass_print(record: VisitorRecord) -> None:
    """Impresora por defecto: solo deja constancia en el log."""
    logger.info("Printing pass for: %s", record.name)
