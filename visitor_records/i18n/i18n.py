from visitor_records.app_config.config import get_language

# Textos fuente en español; el catálogo solo necesita las traducciones.
TRANSLATIONS = {
    "en": {
        "Registro de :red[Visitantes]": "Visitor :red[Records]",
        "Buscar visitantes...": "Search visitors...",
        "Buscar": "Search",
        "Fecha de entrada": "Check-in date",
        "Filtros": "Filters",
        "Nombre": "Name",
        "Entrada": "Time In",
        "Salida": "Time Out",
        "Motivo": "Purpose",
        "Persona de contacto": "Contact Person",
        "Estado": "Status",
        "Acciones": "Actions",
        "Tipo de visitante": "Visitor Type",
        "Ubicación": "Location",
        "Detalle del visitante": "Visitor Details",
        "Sin foto disponible": "No photo available",
        "Cerrar": "Close",
        "Imprimir pase": "Print Pass",
        "Ver": "View",
        "Imprimir": "Print",
        "No hay visitantes para mostrar.": "No visitors to show.",
        "Cargando visitantes...": "Loading visitors...",
        "No se pudo obtener el listado de visitantes.": "Could not retrieve the visitor list.",
        "Resumen por estado": "Summary by status",
        "Quitar filtro de fecha": "Clear date filter",
        "Pase enviado a impresión": "Pass sent to print",
        "Ver registro JSON": "View JSON record",
        "Mostrando": "Showing",
        "de": "of",
    },
}


def t(text: str) -> str:
    """Traduce un texto de la interfaz al idioma configurado; si no hay traducción devuelve el original."""
    lang = get_language()
    return TRANSLATIONS.get(lang, {}).get(text, text)
