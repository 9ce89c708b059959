"""Versioned schema migrations for the product store.

Applied versions are recorded in the ``schema_migrations`` table. Each
pending migration runs in its own transaction together with its ledger row,
so a failure leaves the database at the last fully applied version. New
migrations are appended to ``MIGRATIONS`` with the next version number and
must never be edited once released.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, NamedTuple

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    func,
    insert,
    inspect,
    select,
)
from sqlalchemy.engine import Connection, Engine

from app.core.constants import MIGRATIONS_TABLE, PRODUCT_TABLE, SEED_PRODUCTS

logger = logging.getLogger(__name__)

_ledger_metadata = MetaData()
schema_migrations = Table(
    MIGRATIONS_TABLE,
    _ledger_metadata,
    Column("version", Integer, primary_key=True, autoincrement=False),
    Column("description", String, nullable=False),
    Column("applied_at", DateTime(timezone=True), nullable=False),
)


class Migration(NamedTuple):
    version: int
    description: str
    apply: Callable[[Connection], None]


def _product_table_v1() -> Table:
    # Frozen copy of the v1 layout; later migrations must not depend on app.models.
    return Table(
        PRODUCT_TABLE,
        MetaData(),
        Column("id", Integer, primary_key=True),
        Column("name", String),
        Column("quantity", Integer, nullable=False),
        Column("price", Integer, nullable=False),
        Column("description", String),
        sqlite_autoincrement=True,
    )


def _create_product_table(conn: Connection) -> None:
    _product_table_v1().create(conn, checkfirst=True)


def _seed_products(conn: Connection) -> None:
    table = _product_table_v1()
    conn.execute(
        insert(table),
        [
            {"name": name, "price": price, "quantity": quantity, "description": description}
            for name, price, quantity, description in SEED_PRODUCTS
        ],
    )


MIGRATIONS: tuple[Migration, ...] = (
    Migration(1, "create Product table", _create_product_table),
    Migration(2, "seed sample products", _seed_products),
)


def current_version(bind: Engine) -> int:
    if not inspect(bind).has_table(MIGRATIONS_TABLE):
        return 0
    with bind.connect() as conn:
        version = conn.execute(select(func.max(schema_migrations.c.version))).scalar()
    return version or 0


def apply_migrations(bind: Engine) -> list[int]:
    """Apply pending migrations in order and return the versions applied."""
    _ledger_metadata.create_all(bind, checkfirst=True)
    applied_from = current_version(bind)

    applied = []
    for migration in MIGRATIONS:
        if migration.version <= applied_from:
            continue
        with bind.begin() as conn:
            migration.apply(conn)
            conn.execute(
                insert(schema_migrations).values(
                    version=migration.version,
                    description=migration.description,
                    applied_at=datetime.now(timezone.utc),
                )
            )
        logger.info("Applied migration %s: %s", migration.version, migration.description)
        applied.append(migration.version)

    if not applied:
        logger.debug("Schema is up to date at version %s", applied_from)
    return applied


def reset_database(bind: Engine) -> list[int]:
    """Drop the product table and ledger, then rebuild from scratch.

    Discards all data. Only meant for local development databases.
    """
    with bind.begin() as conn:
        _product_table_v1().drop(conn, checkfirst=True)
        schema_migrations.drop(conn, checkfirst=True)
    logger.warning("Dropped %s and %s", PRODUCT_TABLE, MIGRATIONS_TABLE)
    return apply_migrations(bind)


__all__ = [
    "MIGRATIONS",
    "Migration",
    "apply_migrations",
    "current_version",
    "reset_database",
    "schema_migrations",
]
