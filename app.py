import streamlit as st

import visitor_records.app_config.config as config
config.init_config()

from visitor_records.state import init_app_state, load_records
from visitor_records.ui.records_ui import records_header, filters_panel, records_table
from visitor_records.ui.detail_ui import visitor_detail
from visitor_records.i18n.i18n import t

state = init_app_state()

st.header(t("Registro de :red[Visitantes]"), divider="red")

# ============================================================
# 🔎 BÚSQUEDA Y FILTROS
# ============================================================
records_header(state)
filters_panel(state)

# ============================================================
# 📦 CARGA DE DATOS (una sola vez por sesión)
# ============================================================
with st.spinner(t("Cargando visitantes...")):
    load_records(state)

if st.session_state.get("flash"):
    st.toast(st.session_state["flash"], icon=":material/print:")
    st.session_state["flash"] = None

# ============================================================
# 🪪 DETALLE DEL VISITANTE
# ============================================================
visitor_detail(state)

# ============================================================
# 📋 LISTADO
# ============================================================
records_table(state, state.visible_records())
