from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from adapters.base import Campground, NetworkFailure, NoMatches, SiteAvailability
from controller import ViewStateController
from state import DETAIL, RESULTS

NOW = datetime(2024, 7, 19, 12, 0)
JULY = date(2024, 7, 1)
CAMP = Campground("123", "Upper Pines", "Yosemite", "Yosemite Valley", "CA", 235, True, "campground")
SITE = SiteAvailability(
    "1001", "A001", "Loop A", "STANDARD",
    ("07/01", "07/02", "07/03", "07/10"), ("07/01-07/03", "07/10"),
)


@pytest.fixture
def adapter():
    mock_adapter = MagicMock()
    mock_adapter.search_campgrounds.return_value = [CAMP]
    mock_adapter.get_site_availability.return_value = [SITE]
    return mock_adapter


@pytest.fixture
def controller(adapter):
    return ViewStateController(adapter, "UTC", now=NOW)


def test_starts_on_results_in_current_month(controller):
    assert controller.state.panel == RESULTS
    assert controller.state.month == JULY


def test_submit_search_fills_list(controller, adapter):
    state = controller.submit_search("yosemite")
    adapter.search_campgrounds.assert_called_once_with("yosemite")
    assert state.campgrounds == (CAMP,)


def test_search_failure_keeps_existing_list(controller, adapter):
    controller.submit_search("yosemite")
    adapter.search_campgrounds.side_effect = NetworkFailure("Network failure during search.")
    state = controller.submit_search("zion")
    assert state.error_message == "Network failure during search."
    assert state.campgrounds == (CAMP,)


def test_search_no_matches_sets_message(controller, adapter):
    adapter.search_campgrounds.side_effect = NoMatches("No matching campgrounds...")
    assert controller.submit_search("nowhere").error_message == "No matching campgrounds..."


def test_select_fetches_current_month(controller, adapter):
    controller.submit_search("yosemite")
    state = controller.select_campground(0)
    adapter.get_site_availability.assert_called_once_with("123", JULY)
    assert state.panel == DETAIL
    assert state.sites == (SITE,)


def test_select_with_no_open_sites(controller, adapter):
    adapter.get_site_availability.return_value = []
    controller.submit_search("yosemite")
    assert controller.select_campground(0).error_message == "No reservable campsites."


def test_change_month_by_tab(controller, adapter):
    controller.submit_search("yosemite")
    controller.select_campground(0)
    state = controller.change_month(2)
    adapter.get_site_availability.assert_called_with("123", date(2024, 9, 1))
    assert state.month == date(2024, 9, 1)
    assert state.panel == DETAIL


def test_change_month_failure_keeps_sites(controller, adapter):
    controller.submit_search("yosemite")
    controller.select_campground(0)
    adapter.get_site_availability.side_effect = NetworkFailure("Network failure while retrieving campground.")
    state = controller.change_month(1)
    assert state.sites == (SITE,)
    assert state.error_message == "Network failure while retrieving campground."


def test_error_cleared_on_next_action(controller, adapter):
    adapter.search_campgrounds.side_effect = NetworkFailure("Network failure during search.")
    controller.submit_search("yosemite")
    assert controller.focus_input().error_message == ""


def test_back_returns_to_list(controller):
    controller.submit_search("yosemite")
    controller.select_campground(0)
    state = controller.back()
    assert state.panel == RESULTS
    assert state.campgrounds == (CAMP,)


def test_change_month_without_selection_raises(controller):
    with pytest.raises(ValueError):
        controller.change_month(1)


def test_tabs(controller):
    tabs = controller.tabs()
    assert len(tabs) == 6
    assert tabs[0] == (JULY, "Jul")


def test_select_while_in_detail_raises(controller, adapter):
    controller.submit_search("yosemite")
    controller.select_campground(0)
    with pytest.raises(ValueError):
        controller.select_campground(0)
    assert adapter.get_site_availability.call_count == 1
