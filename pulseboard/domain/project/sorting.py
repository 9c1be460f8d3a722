"""Project ordering.

Pure functions. Sorting is stable: projects that compare equal keep
their original relative order.
"""

import unicodedata
from collections.abc import Callable, Iterable
from typing import Any

from .models import Project, SortKey


def collation_key(text: str) -> str:
    """Accent- and case-insensitive key for title comparison.

    "Ágil" and "agil" collate together, close to how a browser's
    localeCompare orders them.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


# key function, descending?
_ORDERINGS: dict[SortKey, tuple[Callable[[Project], Any], bool]] = {
    SortKey.NAME: (lambda p: collation_key(p.title), False),
    SortKey.PROGRESS: (lambda p: p.progress, True),
    SortKey.DUE_DATE: (lambda p: p.due_date, False),
}


def sort_projects(projects: Iterable[Project], key: SortKey | str) -> list[Project]:
    """Order projects by name, progress (descending) or due date.

    Args:
        projects: Snapshot to order (not modified)
        key: A SortKey or its string value

    Returns:
        New ordered list. An unrecognized key returns the input order.
    """
    try:
        sort_key = SortKey(key)
    except ValueError:
        return list(projects)

    key_fn, descending = _ORDERINGS[sort_key]
    return sorted(projects, key=key_fn, reverse=descending)
