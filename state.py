from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

import pytz

from adapters.base import Campground, MonthKey

RESULTS = "results"
DETAIL = "detail"
MONTHS_SHOWN = 6
NO_SITES = "No reservable campsites."


@dataclass(frozen=True)
class ViewState:
    month: date
    campgrounds: tuple = ()
    selected: Optional[Campground] = None
    sites: tuple = ()
    error_message: str = ""

    @property
    def panel(self) -> str:
        return RESULTS if self.selected is None else DETAIL

    @property
    def month_key(self) -> Optional[MonthKey]:
        if self.selected is None:
            return None
        return MonthKey(self.selected.id, self.month)


# ── Actions ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ClearError:
    pass


@dataclass(frozen=True)
class SearchSucceeded:
    campgrounds: tuple


@dataclass(frozen=True)
class SelectCampground:
    campground: Campground
    month: date


@dataclass(frozen=True)
class ChangeMonth:
    month: date


@dataclass(frozen=True)
class SitesLoaded:
    sites: tuple


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Back:
    pass


def reduce(state: ViewState, action) -> ViewState:
    """Returns the state that follows `action`. Never mutates `state`."""
    if isinstance(action, ClearError):
        return replace(state, error_message="")
    if isinstance(action, SearchSucceeded):
        return replace(
            state,
            campgrounds=tuple(action.campgrounds),
            selected=None,
            sites=(),
            error_message="",
        )
    if isinstance(action, SelectCampground):
        return replace(
            state,
            selected=action.campground,
            month=action.month,
            sites=(),
            error_message="",
        )
    if isinstance(action, ChangeMonth):
        return replace(state, month=action.month, error_message="")
    if isinstance(action, SitesLoaded):
        sites = tuple(action.sites)
        return replace(state, sites=sites, error_message="" if sites else NO_SITES)
    if isinstance(action, Failed):
        return replace(state, error_message=action.message)
    if isinstance(action, Back):
        return replace(state, selected=None, sites=(), error_message="")
    raise TypeError(f"Unknown action: {action!r}")


# ── Months ─────────────────────────────────────────────────────────────────────

def current_month(timezone_str: str = "UTC", now: datetime = None) -> date:
    """First day of the current month in the given timezone."""
    tz = pytz.timezone(timezone_str)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = tz.localize(now)
    else:
        now = now.astimezone(tz)
    return now.date().replace(day=1)


def add_months(month: date, step: int) -> date:
    index = month.year * 12 + month.month - 1 + step
    return date(index // 12, index % 12 + 1, 1)


def month_tabs(start: date, count: int = MONTHS_SHOWN) -> list:
    """[(month_start, "Jul"), ...] for `count` consecutive months from `start`."""
    first = start.replace(day=1)
    tabs = []
    for step in range(count):
        month = add_months(first, step)
        tabs.append((month, month.strftime("%b")))
    return tabs
