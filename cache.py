from adapters.base import MonthKey


class SessionCache:
    """Site availability per (campground, month), kept for the whole session."""

    def __init__(self):
        self._entries = {}

    def get(self, key: MonthKey):
        return self._entries.get(key)

    def put(self, key: MonthKey, sites) -> tuple:
        self._entries[key] = tuple(sites)
        return self._entries[key]

    def clear(self):
        self._entries.clear()

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
