def day_label(date_str: str) -> str:
    """'2024-07-01T00:00:00Z' -> '07/01'"""
    return date_str[5:10].replace("-", "/")


def _day_number(label: str) -> int:
    return int(label.replace("/", ""))


def group_runs(labels: list) -> list:
    """
    Splits ordered "MM/DD" labels into runs of consecutive days.

    A label starts a new run unless it is exactly one day after the previous one.
    """
    runs = []
    expected = None
    for label in labels:
        n = _day_number(label)
        if runs and n == expected:
            runs[-1].append(label)
        else:
            runs.append([label])
        expected = n + 1
    return runs


def run_label(run: list, compact: bool = True) -> str:
    if not compact:
        return ",".join(run)
    if len(run) > 1:
        return f"{run[0]}-{run[-1]}"
    return run[0]


def collapse(labels: list, compact: bool = True) -> list:
    return [run_label(run, compact) for run in group_runs(labels)]
