"""
Apply search predicates and pagination queries to SQLAlchemy statements.

``to_sqlalchemy`` rewrites the positional ``?`` placeholders of a
:class:`~cqrs_ddd_pagination.search.SearchPredicate` into named bind
parameters (``:search_0``, ``:search_1``, ...) so the predicate can be used
with any dialect::

    stmt = select(UserRecord)
    stmt = apply_search(stmt, new_search(request.query_params))
    stmt = apply_pagination(stmt, new_query(request.query_params), UserRecord)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, TextClause, asc, bindparam, desc, literal_column, text

from ..query import DESC
from ..strategy import PLACEHOLDER

if TYPE_CHECKING:
    from ..query import PaginationQuery
    from ..search import SearchPredicate


def to_sqlalchemy(predicate: SearchPredicate, *, prefix: str = "search_") -> TextClause:
    """
    Build a ``TextClause`` equivalent to ``predicate.sql``.

    Args:
        predicate: The predicate to bind.
        prefix: Prefix of the generated bind parameter names.

    Returns:
        A text clause with one named bind parameter per condition.
    """
    conditions: list[str] = []
    binds = []
    for index, (condition, parameter) in enumerate(
        zip(predicate.conditions, predicate.parameters)
    ):
        name = f"{prefix}{index}"
        conditions.append(condition.replace(PLACEHOLDER, f":{name}", 1))
        binds.append(bindparam(name, parameter))
    sql = "(" + f" {predicate.operator} ".join(conditions) + ")"
    return text(sql).bindparams(*binds)


def apply_search(stmt: Select[Any], predicate: SearchPredicate | None) -> Select[Any]:
    """Add *predicate* to the statement's WHERE clause; ``None`` is a no-op."""
    if predicate is None:
        return stmt
    return stmt.where(to_sqlalchemy(predicate))


def _order_column(model: type[Any] | None, field: str) -> Any:
    if model is None:
        return literal_column(field)
    column = getattr(model, field, None)
    if column is None:
        raise AttributeError(f"Model {model} has no attribute {field}")
    return column


def apply_pagination(
    stmt: Select[Any],
    query: PaginationQuery,
    model: type[Any] | None = None,
) -> Select[Any]:
    """
    Apply ordering, limit and offset from a ``PaginationQuery``.

    Args:
        stmt: The base ``Select`` statement.
        query: Validated pagination parameters.
        model: Optional model class used to resolve the order column; when
            omitted the column name is used as a literal.

    Returns:
        The modified ``Select`` statement.
    """
    column = _order_column(model, query.get_order_by())
    direction = desc if query.get_direction() == DESC else asc
    return (
        stmt.order_by(direction(column))
        .limit(query.get_limit())
        .offset(query.get_offset())
    )
