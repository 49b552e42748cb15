"""Classification of mklabel stderr lines caused by locked objects.

When labelling recursively, cleartool reports locked elements and branch types
as errors even though every other element was labelled. These lines can be
tolerated when ``ignore_mklabel_failure_on_locked_objects`` is set.
"""

import re
from collections.abc import Iterable

# TODO: match localized cleartool messages once a non-English VOB is available to test against
LOCK_FAILURE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r".*Error: Lock on .* prevents operation 'make label'."),
    re.compile(r".*Error: Object locked except for.*"),
    re.compile(r".*Error: Trouble applying label to.*"),
)


def is_lock_failure_line(line: str) -> bool:
    """Return True if the whole line matches one of the lock failure patterns."""
    return any(pattern.fullmatch(line) for pattern in LOCK_FAILURE_PATTERNS)


def all_lock_failures(lines: Iterable[str]) -> bool:
    """Return True if every line is a lock failure.

    Any other line, blank ones included, keeps the failure real. Returns False
    when there are no lines: a failure that cleartool did not explain cannot be
    attributed to locks.
    """
    collected = list(lines)
    if not collected:
        return False
    return all(is_lock_failure_line(line) for line in collected)
