from datetime import date

import requests

from cache import SessionCache
from ranges import collapse, day_label

from .base import (
    BaseAdapter,
    Campground,
    InvalidKeywords,
    MonthKey,
    NetworkFailure,
    NoMatches,
    SiteAvailability,
)

SEARCH_URL = "https://www.recreation.gov/api/search"
AVAIL_BASE = "https://www.recreation.gov/api/camps/availability/campground"
SEARCH_SIZE = 30
KEYWORDS_MIN = 3
KEYWORDS_MAX = 50

SEARCH_FAILED = "Network failure during search."
FETCH_FAILED = "Network failure while retrieving campground."
NO_MATCHES = "No matching campgrounds..."


def parse_month(payload: dict, compact: bool = True) -> list:
    """
    Turns a monthly availability payload into SiteAvailability records.

    Sites without a single "Available" day are dropped. The result is ordered by
    the comma-joined day string, so a site whose first open day is earlier can
    still sort after one with more days.
    """
    sites = []
    for key, site in (payload.get("campsites") or {}).items():
        availabilities = site.get("availabilities") or {}
        days = [
            day_label(dt_str)
            for dt_str, status in sorted(availabilities.items())
            if status == "Available"
        ]
        if not days:
            continue
        sites.append(
            SiteAvailability(
                site_id=str(site.get("campsite_id") or key),
                site_label=site.get("site") or f"Site {key}",
                loop=site.get("loop") or "",
                campsite_type=site.get("campsite_type") or "",
                available_days=tuple(days),
                range_labels=tuple(collapse(days, compact)),
            )
        )
    return sorted(sites, key=lambda s: s.days)


class RecreationGovAdapter(BaseAdapter):
    def __init__(self, cache: SessionCache = None, compact: bool = True, timeout: float = None):
        self.cache = cache if cache is not None else SessionCache()
        self.compact = compact
        self.timeout = timeout

    # ── Search ─────────────────────────────────────────────────────────────────

    def search_campgrounds(self, keywords: str) -> list:
        keywords = keywords or ""
        if not KEYWORDS_MIN <= len(keywords) <= KEYWORDS_MAX:
            raise InvalidKeywords(f"Keywords must be {KEYWORDS_MIN} to {KEYWORDS_MAX} characters.")

        try:
            resp = requests.get(
                SEARCH_URL,
                params={"exact": "false", "size": SEARCH_SIZE, "q": keywords},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise NetworkFailure(SEARCH_FAILED) from e

        if not isinstance(payload, dict) or "results" not in payload:
            raise NoMatches(NO_MATCHES)

        return [
            Campground.from_result(r)
            for r in payload["results"] or []
            if r.get("reservable") and r.get("entity_type") == "campground"
        ]

    # ── Availability ───────────────────────────────────────────────────────────

    def get_site_availability(self, campground_id: str, month_start: date) -> list:
        key = MonthKey(str(campground_id), month_start.replace(day=1))
        cached = self.cache.get(key)
        if cached is not None:
            return list(cached)

        payload = self._fetch_month(key)
        return list(self.cache.put(key, parse_month(payload, self.compact)))

    def _fetch_month(self, key: MonthKey) -> dict:
        try:
            resp = requests.get(
                f"{AVAIL_BASE}/{key.campground_id}/month",
                params={"start_date": key.iso},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise NetworkFailure(FETCH_FAILED) from e
        if not isinstance(payload, dict):
            raise NetworkFailure(FETCH_FAILED)
        return payload
