"""SQLAlchemy adapter – ``feature_flags`` table definition."""
from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Column, Integer, MetaData, String, Table, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB

DEFAULT_TABLE_NAME = "feature_flags"

FlagsJSON = JSON().with_variant(JSONB(), "postgresql")


def feature_flags_table(name: str = DEFAULT_TABLE_NAME, metadata: MetaData | None = None) -> Table:
    """Return the table holding one JSON flag record per entity.

    ``(flaggable_type, flaggable_id)`` is unique, so a second ``create`` for
    the same entity fails at the database.
    """
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("flaggable_type", String(255), nullable=False),
        Column("flaggable_id", String(255), nullable=False),
        Column("metadata", FlagsJSON, nullable=False, default=dict),
        UniqueConstraint("flaggable_type", "flaggable_id", name=f"uq_{name}_flaggable"),
    )


async def create_table(bind: Any, name: str = DEFAULT_TABLE_NAME) -> Table:
    """Create the flag table if it does not exist.

    Parameters
    ----------
    bind:
        An :class:`~sqlalchemy.ext.asyncio.AsyncEngine`.
    """
    table = feature_flags_table(name)
    async with bind.begin() as conn:
        await conn.run_sync(table.metadata.create_all)
    return table


__all__ = ["DEFAULT_TABLE_NAME", "create_table", "feature_flags_table"]
