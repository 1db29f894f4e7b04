from datetime import date, datetime

from adapters.base import AdapterError, BaseAdapter
from state import (
    MONTHS_SHOWN,
    DETAIL,
    RESULTS,
    Back,
    ChangeMonth,
    ClearError,
    Failed,
    SearchSucceeded,
    SelectCampground,
    SitesLoaded,
    ViewState,
    current_month,
    month_tabs,
    reduce,
)


class ViewStateController:
    """
    Holds the session's ViewState and turns user actions into transitions.

    Fetching actions call the adapter; any AdapterError becomes an error message
    on the state and leaves whatever was already displayed in place.
    """

    def __init__(
        self,
        adapter: BaseAdapter,
        timezone_str: str = "UTC",
        months_shown: int = MONTHS_SHOWN,
        now: datetime = None,
    ):
        self.adapter = adapter
        self.timezone_str = timezone_str
        self.months_shown = months_shown
        self._now = now
        self.state = ViewState(month=self.today_month())

    def today_month(self) -> date:
        return current_month(self.timezone_str, self._now)

    def dispatch(self, action) -> ViewState:
        self.state = reduce(self.state, action)
        return self.state

    def tabs(self) -> list:
        return month_tabs(self.today_month(), self.months_shown)

    # ── User actions ───────────────────────────────────────────────────────────

    def focus_input(self) -> ViewState:
        return self.dispatch(ClearError())

    def submit_search(self, keywords: str) -> ViewState:
        self.dispatch(ClearError())
        try:
            campgrounds = self.adapter.search_campgrounds(keywords)
        except AdapterError as e:
            return self.dispatch(Failed(str(e)))
        return self.dispatch(SearchSucceeded(tuple(campgrounds)))

    def select_campground(self, index: int) -> ViewState:
        if self.state.panel != RESULTS:
            raise ValueError("A campground is already selected")
        campground = self.state.campgrounds[index]
        self.dispatch(SelectCampground(campground, self.today_month()))
        return self._load_sites()

    def change_month(self, month) -> ViewState:
        """`month` is a tab index or a date within the wanted month."""
        if self.state.panel != DETAIL:
            raise ValueError("No campground selected")
        if isinstance(month, int):
            month = self.tabs()[month][0]
        self.dispatch(ChangeMonth(month.replace(day=1)))
        return self._load_sites()

    def back(self) -> ViewState:
        return self.dispatch(Back())

    def _load_sites(self) -> ViewState:
        key = self.state.month_key
        try:
            sites = self.adapter.get_site_availability(key.campground_id, key.month_start)
        except AdapterError as e:
            return self.dispatch(Failed(str(e)))
        return self.dispatch(SitesLoaded(tuple(sites)))
