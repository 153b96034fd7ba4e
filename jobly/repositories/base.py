"""
Base repository with the SQL shared by every resource.

All entity-specific repositories inherit from this.
"""
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.repositories.sql import bind, placeholder, sql_for_partial_update


class BaseRepository:
    """
    Base repository providing keyed update/delete and row fetching.

    Usage:
        class CompanyRepository(BaseRepository):
            table = "companies"
            key_column = "handle"
            columns = "handle, name, ..."
            column_map = {"numEmployees": "num_employees"}
    """

    table: ClassVar[str]
    key_column: ClassVar[str]
    # Column list used in SELECT and RETURNING
    columns: ClassVar[str]
    # Field name -> column name, for fields whose names differ
    column_map: ClassVar[Dict[str, str]] = {}

    async def _fetch_one(
        self,
        db: AsyncSession,
        sql: str,
        values: Sequence[Any] = (),
    ) -> Optional[Dict[str, Any]]:
        """Run ``sql`` and return its first row as a dict, or None."""
        result = await db.execute(bind(sql, values))
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def _fetch_all(
        self,
        db: AsyncSession,
        sql: str,
        values: Sequence[Any] = (),
    ) -> List[Dict[str, Any]]:
        result = await db.execute(bind(sql, values))
        return [dict(row) for row in result.mappings().all()]

    async def _update_by_key(
        self,
        db: AsyncSession,
        key: Any,
        data: Mapping[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update to the row identified by ``key``.

        One statement; returns None when no row matched.
        """
        set_cols, values = sql_for_partial_update(data, self.column_map)
        key_idx = placeholder(len(values) + 1)

        sql = f"""
            UPDATE {self.table}
            SET {set_cols}
            WHERE {self.key_column} = {key_idx}
            RETURNING {self.columns}"""
        return await self._fetch_one(db, sql, [*values, key])

    async def _delete_by_key(
        self,
        db: AsyncSession,
        key: Any,
    ) -> bool:
        """Hard delete a row by key. Returns False when nothing matched."""
        row = await self._fetch_one(
            db,
            f"""DELETE
                FROM {self.table}
                WHERE {self.key_column} = :p1
                RETURNING {self.key_column}""",
            [key],
        )
        return row is not None
