"""Atomic match-or-insert statements.

Both supported backends (PostgreSQL and SQLite) implement
``INSERT ... ON CONFLICT ... DO UPDATE``, which resolves the match and the
write inside a single statement. Two callers racing on the same key can
therefore never both insert, and neither update is lost to a stale read.
"""
from typing import Dict, Iterable, Tuple

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.core.exceptions import InternalError
from app.core.identifiers import new_id

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert(
    db: Session,
    model,
    key_columns: Iterable[str],
    values: Dict,
) -> Tuple[bool, str]:
    """
    Insert a row, or update the row that already holds the same key.

    Every column in ``values`` that is not part of the key is overwritten on
    conflict. The statement is committed before returning.

    Args:
        db: Database session
        model: Mapped class whose table carries a unique constraint on key_columns
        key_columns: Column names forming the conflict target
        values: Column values, including the key columns

    Returns:
        (created, record_id): created is False when an existing row was updated

    Raises:
        InternalError: For a backend without ON CONFLICT support
    """
    dialect = db.get_bind().dialect.name
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        raise InternalError(f"Upsert is not supported on {dialect}")

    key_columns = list(key_columns)
    candidate_id = new_id()

    stmt = insert(model).values(id=candidate_id, **values)
    stmt = stmt.on_conflict_do_update(
        index_elements=key_columns,
        set_={
            column: stmt.excluded[column]
            for column in values
            if column not in key_columns
        },
    ).returning(model.id)

    record_id = db.execute(stmt).scalar_one()
    db.commit()

    # The id column is never in the update set, so a conflicting row keeps its own id
    return record_id == candidate_id, record_id
