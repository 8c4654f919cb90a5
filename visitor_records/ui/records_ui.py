import streamlit as st

from visitor_records.app_config.styles import STATUS_TIER_COLORS
from visitor_records.i18n.i18n import t
from visitor_records.schema import VisitorRecord, records_to_df, status_tier
from visitor_records.state import LoadStatus, VisitorRecordsState

COL_WIDTHS = [2, 1.3, 1.3, 2, 1.8, 1.2, 0.8, 0.8]


def print_pass(state: VisitorRecordsState, record: VisitorRecord | None = None) -> None:
    """Callback de los botones de imprimir; el aviso se muestra en el siguiente rerun."""
    target = record if record is not None else state.selected
    if state.trigger_print(target):
        st.session_state["flash"] = f"{t('Pase enviado a impresión')}: {target.name or '-'}"


def clear_filter_date() -> None:
    st.session_state["filter_date"] = None


def status_badge(status) -> str:
    color = STATUS_TIER_COLORS[status_tier(status)]
    label = status if isinstance(status, str) and status else "-"
    label = label.replace("[", "\\[").replace("]", "\\]")
    return f":{color}-background[{label}]"


def records_header(state: VisitorRecordsState) -> None:
    """Búsqueda, fecha y botón de filtros. Sincroniza los valores de los widgets con el estado."""
    col1, col2, col3 = st.columns([3, 1.5, 1], vertical_alignment="bottom")

    with col1:
        search_term = st.text_input(
            t("Buscar"),
            placeholder=t("Buscar visitantes..."),
            key="search_term",
        )
    with col2:
        filter_date = st.date_input(
            t("Fecha de entrada"),
            value=None,
            format="YYYY-MM-DD",
            key="filter_date",
        )
    with col3:
        st.button(
            t("Filtros"),
            icon=":material/filter_list:",
            type="primary" if state.filters_visible else "secondary",
            on_click=state.toggle_filters,
            key="toggle_filters",
        )

    state.set_search_term(search_term)
    state.set_filter_date(filter_date)


def filters_panel(state: VisitorRecordsState) -> None:
    """Panel auxiliar: resumen de registros por estado. Solo presentación."""
    if not state.filters_visible:
        return

    with st.container(border=True):
        st.markdown(f"**{t('Resumen por estado')}**")
        df = records_to_df(state.records)
        if df.empty:
            st.caption(t("No hay visitantes para mostrar."))
        else:
            resumen = (
                df["status"].fillna("-").value_counts()
                .rename_axis(t("Estado"))
                .reset_index(name="total")
            )
            st.dataframe(resumen, hide_index=True)

        st.button(
            t("Quitar filtro de fecha"),
            icon=":material/event_busy:",
            on_click=clear_filter_date,
            disabled=state.filter_date is None,
            key="clear_filter_date",
        )


def records_table(state: VisitorRecordsState, rows: list[VisitorRecord]) -> None:
    """Tabla de visitantes con acciones por fila (ver / imprimir)."""
    if not rows:
        st.info(t("No hay visitantes para mostrar."))
        if state.load_status is LoadStatus.FAILED:
            st.caption(t("No se pudo obtener el listado de visitantes."))
        return

    st.caption(f"{t('Mostrando')} {len(rows)} {t('de')} {len(state.records)}")

    headers = [
        t("Nombre"), t("Entrada"), t("Salida"), t("Motivo"),
        t("Persona de contacto"), t("Estado"), t("Acciones"), "",
    ]
    for col, label in zip(st.columns(COL_WIDTHS), headers):
        col.markdown(f"**{label}**" if label else "")

    for i, record in enumerate(rows):
        cols = st.columns(COL_WIDTHS, vertical_alignment="center")
        cols[0].write(record.name or "-")
        cols[1].write(record.time_in or "-")
        cols[2].write(record.time_out or "-")
        cols[3].write(record.purpose or "-")
        cols[4].write(record.contact_person or "-")
        cols[5].markdown(status_badge(record.status))
        cols[6].button(
            t("Ver"),
            icon=":material/visibility:",
            key=f"ver_{i}_{record.id}",
            on_click=state.select,
            args=(record,),
        )
        cols[7].button(
            t("Imprimir"),
            icon=":material/print:",
            key=f"imprimir_{i}_{record.id}",
            on_click=print_pass,
            args=(state, record),
        )
