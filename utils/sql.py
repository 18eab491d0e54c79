"""
utils/sql.py
------------
Helpers that build parameterized SQL fragments.

Both helpers emit PostgreSQL-style positional placeholders (``$1``, ``$2``,
...) whose number is always the 1-based position of the bound value in the
accompanying ``values`` list. Nothing here touches the database.
"""

from typing import Any, Mapping, NamedTuple, Optional

from errors import ValidationError


class PartialUpdate(NamedTuple):
    """The SET part of an UPDATE plus the values it binds."""

    set_cols: str
    values: list

    @property
    def next_index(self) -> int:
        """Placeholder number for the first parameter after the SET values."""
        return len(self.values) + 1


def sql_for_partial_update(
    data: Mapping[str, Any], js_to_sql: Mapping[str, str]
) -> PartialUpdate:
    """
    Build the column assignments for a partial UPDATE.

    Only the fields present in ``data`` are assigned. Keys are walked in
    insertion order, so the Nth key is bound to ``$N``.

    Args:
        data: Logical field name -> new value, e.g.
            ``{"firstName": "Aliya", "age": 32}``.
        js_to_sql: Logical field name -> column name, for the fields whose
            column name differs, e.g. ``{"firstName": "first_name"}``.

    Returns:
        PartialUpdate(set_cols='"first_name"=$1, "age"=$2',
                      values=["Aliya", 32])

    Raises:
        ValidationError: If ``data`` is empty.
    """
    keys = list(data)
    if not keys:
        raise ValidationError("No data")

    # {"firstName": "Aliya", "age": 32} => ['"first_name"=$1', '"age"=$2']
    cols = [
        f'"{js_to_sql.get(key, key)}"=${idx}' for idx, key in enumerate(keys, start=1)
    ]
    return PartialUpdate(", ".join(cols), [data[key] for key in keys])


class WhereClause:
    """
    Accumulates AND-ed predicates and their bound values.

    Predicates are numbered in the order they are added, so callers control
    placeholder order simply by the order of their ``add`` calls.

    Usage:
        where = WhereClause()
        where.add("name ILIKE {}", "%net%")
        where.add("num_employees >= {}", 10)
        where.add_literal("equity > 0")
        sql = "SELECT ... FROM companies" + where.sql() + " ORDER BY name"
        rows = query(sql, where.values)
    """

    def __init__(self) -> None:
        self.conditions: list[str] = []
        self.values: list = []

    def add(self, template: str, value: Any) -> None:
        """Bind ``value`` and append ``template`` with its placeholder."""
        self.values.append(value)
        self.conditions.append(template.format(f"${len(self.values)}"))

    def add_literal(self, predicate: str) -> None:
        """Append a predicate that binds no value."""
        self.conditions.append(predicate)

    def sql(self) -> str:
        if not self.conditions:
            return ""
        return " WHERE " + " AND ".join(self.conditions)


def int_filter(filters: Mapping[str, Any], key: str) -> Optional[int]:
    """
    Read an optional integer filter.

    Digit strings (as they arrive from a query string) are accepted.

    Returns:
        The value as an int, or None when the key is absent or None.

    Raises:
        ValidationError: If the value is not an integer.
    """
    value = filters.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{key} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{key} must be an integer")
