import logging
import os

import streamlit as st

logger = logging.getLogger(__name__)

APP_TITLE = "Registro de Visitantes"
APP_ICON = ":material/badge:"

DEFAULT_VISITORS_URL = "http://localhost:5000/api/visitors"
DEFAULT_LANG = "es"


def init_config():
    """Configuración de la página y del logging. Llamar al inicio de cada página."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon=APP_ICON,
        layout="wide",
    )


def _secrets_file_exists() -> bool:
    paths = [
        os.path.join(os.getcwd(), ".streamlit", "secrets.toml"),
        os.path.join(os.path.expanduser("~"), ".streamlit", "secrets.toml"),
    ]
    return any(os.path.exists(p) for p in paths)


def _get_secret(section: str, key: str):
    """Lee st.secrets[section][key]; None si no hay archivo de secrets o falta la clave."""
    # Sin archivo, st.secrets muestra un error en la página al acceder
    if not _secrets_file_exists():
        return None
    try:
        return st.secrets[section][key]
    except KeyError:
        logger.debug("Missing secret [%s] %s", section, key)
        return None


def get_visitors_url() -> str:
    """
    URL del listado de visitantes.

    Orden: variable de entorno VISITORS_API_URL, st.secrets["api"]["visitors_url"],
    y por último DEFAULT_VISITORS_URL.
    """
    url = os.environ.get("VISITORS_API_URL") or _get_secret("api", "visitors_url")
    return url or DEFAULT_VISITORS_URL


def get_language() -> str:
    lang = os.environ.get("APP_LANG") or _get_secret("app", "lang")
    return (lang or DEFAULT_LANG).lower()
