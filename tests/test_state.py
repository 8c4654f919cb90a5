import datetime
from unittest.mock import MagicMock

from visitor_records.api.records_source import FetchErrorKind, FetchResult
from visitor_records.schema import VisitorRecord
from visitor_records.state import LoadStatus, VisitorRecordsState, load_records


def loaded_state(records, printer=None):
    state = VisitorRecordsState(printer=printer or MagicMock())
    state.apply_fetch_result(FetchResult.success(records))
    return state


def test_initial_state_is_closed_and_loading():
    state = VisitorRecordsState()
    assert state.selected is None
    assert not state.is_open
    assert state.search_term == ""
    assert state.filter_date is None
    assert state.filters_visible is False
    assert state.load_status is LoadStatus.LOADING
    assert state.records == []


def test_view_then_close_returns_to_closed(records):
    state = loaded_state(records)
    state.select(records[0])
    assert state.is_open
    assert state.selected == records[0]

    state.close()
    assert state.selected is None
    assert not state.is_open


def test_view_while_open_switches_record_directly(records):
    state = loaded_state(records)
    state.select(records[0])
    state.select(records[1])
    assert state.selected == records[1]


def test_close_when_closed_is_noop(records):
    state = loaded_state(records)
    state.close()
    assert state.selected is None


def test_select_unknown_record_is_ignored(records):
    state = loaded_state(records)
    state.select(VisitorRecord(id="otro"))
    assert state.selected is None


def test_print_uses_selected_record_without_changing_state(records):
    printer = MagicMock()
    state = loaded_state(records, printer)
    state.select(records[1])

    assert state.trigger_print() is True
    printer.assert_called_once_with(records[1])
    assert state.selected == records[1]


def test_print_from_row_does_not_open_detail(records):
    printer = MagicMock()
    state = loaded_state(records, printer)

    assert state.trigger_print(records[2]) is True
    printer.assert_called_once_with(records[2])
    assert state.selected is None


def test_print_while_closed_is_noop(records):
    printer = MagicMock()
    state = loaded_state(records, printer)

    assert state.trigger_print() is False
    printer.assert_not_called()


def test_default_printer_logs(records, caplog):
    state = VisitorRecordsState()
    state.apply_fetch_result(FetchResult.success(records))
    with caplog.at_level("INFO"):
        state.trigger_print(records[0])
    assert "Printing pass for: Alice Martin" in caplog.text


def test_failed_fetch_leaves_empty_records():
    state = VisitorRecordsState()
    state.apply_fetch_result(FetchResult.failure(FetchErrorKind.MARKUP))
    assert state.records == []
    assert state.load_status is LoadStatus.FAILED
    assert state.last_error is FetchErrorKind.MARKUP


def test_refresh_clears_selection_of_removed_record(records):
    state = loaded_state(records)
    state.select(records[0])

    state.apply_fetch_result(FetchResult.success(records[1:]))
    assert state.selected is None


def test_refresh_keeps_selection_still_present(records):
    state = loaded_state(records)
    state.select(records[1])

    state.apply_fetch_result(FetchResult.success(records[1:]))
    assert state.selected == records[1]


def test_result_after_teardown_is_discarded(records):
    state = VisitorRecordsState()
    state.teardown()

    assert state.apply_fetch_result(FetchResult.success(records)) is False
    assert state.records == []
    assert state.load_status is LoadStatus.LOADING


def test_load_records_fetches_once(records):
    fetch = MagicMock(return_value=FetchResult.success(records))
    state = VisitorRecordsState()

    assert load_records(state, fetch=fetch) is True
    assert load_records(state, fetch=fetch) is False
    fetch.assert_called_once_with()
    assert state.records == records
    assert state.load_status is LoadStatus.LOADED


def test_load_records_does_not_retry_after_failure():
    fetch = MagicMock(return_value=FetchResult.failure(FetchErrorKind.TRANSPORT))
    state = VisitorRecordsState()

    load_records(state, fetch=fetch)
    load_records(state, fetch=fetch)
    fetch.assert_called_once_with()
    assert state.load_status is LoadStatus.FAILED


def test_visible_records_follow_search_and_date(records):
    state = loaded_state(records)
    assert state.visible_records() == records

    state.set_search_term("alice")
    assert [r.id for r in state.visible_records()] == ["a1", "a3"]

    state.set_filter_date(datetime.date(2025, 3, 11))
    assert state.visible_records() == []

    state.set_search_term(None)
    assert state.search_term == ""
    assert [r.id for r in state.visible_records()] == ["a2"]


def test_toggle_filters(records):
    state = loaded_state(records)
    state.toggle_filters()
    assert state.filters_visible
    state.toggle_filters()
    assert not state.filters_visible


def test_load_after_teardown_does_not_write_state(records):
    fetch = MagicMock(return_value=FetchResult.success(records))
    state = VisitorRecordsState()
    state.teardown()

    assert load_records(state, fetch=fetch) is False
    assert state.records == []
