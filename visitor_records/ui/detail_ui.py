import json

import streamlit as st

from visitor_records.app_config.styles import PHOTO_PLACEHOLDER_HEIGHT
from visitor_records.i18n.i18n import t
from visitor_records.schema import VisitorRecord
from visitor_records.state import VisitorRecordsState
from visitor_records.ui.records_ui import print_pass, status_badge


def photo_slot(record: VisitorRecord) -> tuple[str, str]:
    """("image", url) si hay foto; ("placeholder", texto) si no. El hueco de la foto nunca se omite."""
    if record.has_photo:
        return "image", record.photo.strip()
    return "placeholder", t("Sin foto disponible")


def _field(label: str, value) -> None:
    st.caption(label)
    st.write(value or "-")


def visitor_detail(state: VisitorRecordsState) -> None:
    """Detalle del visitante seleccionado, con foto, datos y acciones de cerrar / imprimir."""
    record = state.selected
    if record is None:
        return

    with st.container(border=True):
        head, close_col = st.columns([6, 1], vertical_alignment="center")
        head.subheader(t("Detalle del visitante"))
        close_col.button(
            ":material/close:",
            key="detalle_cerrar_x",
            on_click=state.close,
            help=t("Cerrar"),
        )

        col_photo, col_data = st.columns([1, 2])

        with col_photo:
            kind, value = photo_slot(record)
            if kind == "image":
                st.image(value, caption=record.name)
            else:
                st.markdown(
                    f"<div style='height:{PHOTO_PLACEHOLDER_HEIGHT}px; background-color:#f5f5f5; "
                    "border-radius:8px; display:flex; align-items:center; justify-content:center; "
                    f"color:#888;'>{value}</div>",
                    unsafe_allow_html=True,
                )

        with col_data:
            c1, c2 = st.columns(2)
            with c1:
                _field(t("Nombre"), record.name)
                _field(t("Entrada"), record.time_in)
                _field(t("Persona de contacto"), record.contact_person)
            with c2:
                _field(t("Tipo de visitante"), (record.visitor_type or "").capitalize())
                _field(t("Salida"), record.time_out)
                _field(t("Ubicación"), record.location)
            _field(t("Motivo"), record.purpose)
            st.caption(t("Estado"))
            st.markdown(status_badge(record.status))

        with st.expander(t("Ver registro JSON")):
            st.code(json.dumps(record.to_dict(), ensure_ascii=False, indent=2, default=str), language="json")

        b1, b2, _ = st.columns([1, 1.5, 4])
        b1.button(t("Cerrar"), key="detalle_cerrar", on_click=state.close)
        b2.button(
            t("Imprimir pase"),
            type="primary",
            icon=":material/print:",
            key="detalle_imprimir",
            on_click=print_pass,
            args=(state,),
        )
