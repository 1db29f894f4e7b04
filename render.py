from state import DETAIL


def alternate(range_labels) -> list:
    """Pairs each run label with a highlight flag; the first run is highlighted, then every other one."""
    return [(label, i % 2 == 0) for i, label in enumerate(range_labels)]


def format_ranges(range_labels) -> str:
    return " ".join(f"[{label}]" if hot else label for label, hot in alternate(range_labels))


def _table(headers: list, rows: list) -> str:
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(str(cell))) for w, cell in zip(widths, row)]
    lines = ["  ".join(str(h).ljust(w) for h, w in zip(headers, widths)).rstrip()]
    lines.append("  ".join("-" * w for w in widths))
    for row in rows:
        lines.append("  ".join(str(c).ljust(w) for c, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


def format_campgrounds(campgrounds) -> str:
    if not campgrounds:
        return ""
    rows = [
        (i, c.site_count, c.name, c.parent_name, f"{c.city}, {c.state_code}")
        for i, c in enumerate(campgrounds)
    ]
    return _table(["#", "Sites", "Name", "Parent", "Location"], rows)


def format_sites(sites) -> str:
    if not sites:
        return ""
    rows = [(s.site_label, s.loop, s.campsite_type, format_ranges(s.range_labels), s.url) for s in sites]
    return _table(["Site", "Loop", "Type", "Available days", "Link"], rows)


def format_tabs(tabs, selected) -> str:
    return " ".join(
        f"<{i}:{name}>" if month == selected else f"{i}:{name}"
        for i, (month, name) in enumerate(tabs)
    )


def format_view(state, tabs) -> str:
    """Whole screen for the current state: error line, then the visible panel."""
    parts = []
    if state.error_message:
        parts.append(f"! {state.error_message}")
    if state.panel == DETAIL:
        parts.append(f"◀ b  {format_tabs(tabs, state.month)}")
        parts.append(state.selected.name)
        parts.append(format_sites(state.sites))
    else:
        parts.append(format_campgrounds(state.campgrounds))
    return "\n".join(p for p in parts if p)
