"""
Helpers that assemble parameterized SQL fragments.

Each builder is a pure function returning ``(fragment, values)``: the fragment
only ever contains column names we control and ``:pN`` placeholders, the
caller-supplied data travels in ``values`` and is bound by SQLAlchemy.
"""
from typing import Any, Dict, List, Mapping, Tuple

from jobboard.core.exceptions import BadRequestError

# Filter key -> fixed predicate position
JOB_FILTER_KEYS = ("minSalary", "hasEquity", "title")


def placeholder(index: int) -> str:
    return f":p{index}"


def bind_params(values: List[Any], start: int = 1) -> Dict[str, Any]:
    """Map an ordered value list onto the ``p<start>``, ``p<start+1>``... names."""
    return {f"p{i}": value for i, value in enumerate(values, start=start)}


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so the caller's text matches literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def sql_for_filters(filters: Mapping[str, Any], start: int = 1) -> Tuple[str, List[Any]]:
    """
    Build the WHERE predicate for a job search.

    filters may contain:
      - minSalary: jobs with salary >= minSalary
      - hasEquity: when True, only jobs with equity > 0 (False means no filter)
      - title: case-insensitive partial match

    Returns ("salary >= :p1 AND CAST(equity AS REAL) > 0", [50000]) style pairs; an empty
    predicate matches every row. Keys set to None are ignored.
    """
    unknown = sorted(set(filters) - set(JOB_FILTER_KEYS))
    if unknown:
        raise BadRequestError([f"Unknown filter: {key}" for key in unknown])

    predicates: List[str] = []
    values: List[Any] = []

    min_salary = filters.get("minSalary")
    if min_salary is not None:
        values.append(min_salary)
        predicates.append(f"salary >= {placeholder(start + len(values) - 1)}")

    if filters.get("hasEquity") is True:
        predicates.append("CAST(equity AS REAL) > 0")

    title = filters.get("title")
    if title is not None:
        values.append(f"%{escape_like(title)}%")
        predicates.append(
            f"LOWER(title) LIKE LOWER({placeholder(start + len(values) - 1)}) ESCAPE '\\'"
        )

    return " AND ".join(predicates), values


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_map: Mapping[str, str],
    start: int = 1,
) -> Tuple[str, List[Any]]:
    """
    Build the SET clause for a partial update.

    `column_map` translates external field names to column names and must
    cover every key of `data`:

        sql_for_partial_update({"title": "X", "salary": 5}, {"title": "title", "salary": "salary"})
        => ('"title"=:p1, "salary"=:p2', ["X", 5])
    """
    if not data:
        raise BadRequestError("No data")

    unmapped = sorted(key for key in data if key not in column_map)
    if unmapped:
        raise BadRequestError([f"Field cannot be updated: {key}" for key in unmapped])

    columns: List[str] = []
    values: List[Any] = []
    for index, (key, value) in enumerate(data.items(), start=start):
        columns.append(f'"{column_map[key]}"={placeholder(index)}')
        values.append(value)

    return ", ".join(columns), values
