"""SQLAlchemy adapter – SqlAlchemyFeatureFlagAdapter."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from sqlalchemy import bindparam, insert, select, update
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import IntegrityError

from mp_featuring.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_featuring.adapters.sqlalchemy.table import DEFAULT_TABLE_NAME, feature_flags_table
from mp_featuring.application.feature_flags.adapter import FeatureFlagAdapter
from mp_featuring.config.settings import FeatureFlagSettings
from mp_featuring.config.validation import MissingRequiredSettingError
from mp_featuring.kernel.errors import FeatureFlagConflictError
from mp_featuring.kernel.types import FlaggableRef


class SqlAlchemyFeatureFlagAdapter(FeatureFlagAdapter):
    """Stores each entity's overrides as one JSON document in a flag table.

    Every operation runs in its own session and transaction obtained from
    *session_factory*, so a successful call is durable when it returns.

    On PostgreSQL ``update`` merges in the database with the JSONB ``||``
    operator; other dialects read the document and write the merged result
    inside the same transaction.

    Parameters
    ----------
    session_factory:
        Zero-argument callable returning an
        :class:`~sqlalchemy.ext.asyncio.AsyncSession`, e.g. a
        :class:`SqlAlchemySessionFactory` or ``async_sessionmaker``.
    table_name:
        Name of the flag table (see :func:`create_table`).
    id_attribute:
        Entity attribute holding its identifier.
    """

    def __init__(
        self,
        session_factory: Callable[[], Any],
        table_name: str = DEFAULT_TABLE_NAME,
        id_attribute: str = "id",
    ) -> None:
        self._session_factory = session_factory
        self._table = feature_flags_table(table_name)
        self.id_attribute = id_attribute

    @classmethod
    def from_settings(
        cls,
        settings: FeatureFlagSettings,
        session_factory: Callable[[], Any] | None = None,
    ) -> "SqlAlchemyFeatureFlagAdapter":
        if session_factory is None:
            if not settings.database_url:
                raise MissingRequiredSettingError("FEATURE_FLAGS_DATABASE_URL")
            session_factory = SqlAlchemySessionFactory(settings.database_url, echo=settings.echo_sql)
        return cls(session_factory, table_name=settings.table_name, id_attribute=settings.id_attribute)

    @property
    def table(self) -> Any:
        return self._table

    # ------------------------------------------------------------------
    # FeatureFlagAdapter interface
    # ------------------------------------------------------------------

    async def fetch(self, target: Any) -> dict[str, bool] | None:
        ref = self._ref(target)
        async with self._session_factory() as session:
            result = await session.execute(select(self._metadata).where(*self._match(ref)))
            row = result.first()
        if row is None:
            return None
        return dict(row[0] or {})

    async def create(self, target: Any, flags: Mapping[str, bool]) -> None:
        ref = self._ref(target)
        stmt = insert(self._table).values(
            flaggable_type=ref.flaggable_type,
            flaggable_id=ref.flaggable_id,
            metadata=dict(flags),
        )
        try:
            async with self._session_factory() as session, session.begin():
                await session.execute(stmt)
        except IntegrityError as exc:
            raise FeatureFlagConflictError(ref, cause=exc) from exc

    async def update(self, target: Any, flags: Mapping[str, bool]) -> None:
        ref = self._ref(target)
        async with self._session_factory() as session, session.begin():
            if session.get_bind().dialect.name == "postgresql":
                patch = bindparam("patch", value=dict(flags), type_=JSONB)
                merged = self._metadata.op("||", return_type=JSONB)(patch)
            else:
                result = await session.execute(select(self._metadata).where(*self._match(ref)))
                merged = {**(result.scalar_one_or_none() or {}), **flags}
            await session.execute(update(self._table).where(*self._match(ref)).values(metadata=merged))

    async def replace(self, target: Any, flags: Mapping[str, bool]) -> None:
        ref = self._ref(target)
        async with self._session_factory() as session, session.begin():
            await session.execute(update(self._table).where(*self._match(ref)).values(metadata=dict(flags)))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _metadata(self) -> Any:
        return self._table.c["metadata"]

    def _ref(self, target: Any) -> FlaggableRef:
        return FlaggableRef.of(target, self.id_attribute)

    def _match(self, ref: FlaggableRef) -> tuple[Any, ...]:
        return (
            self._table.c.flaggable_type == ref.flaggable_type,
            self._table.c.flaggable_id == ref.flaggable_id,
        )


__all__ = ["SqlAlchemyFeatureFlagAdapter"]
