# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase table operations.
# It implements the singleton pattern to reuse a single client connection
# and exposes the handful of query shapes every page of the application uses:
# - select with equality filters, ordering and limit
# - single-row lookup
# - insert / update / delete with equality filters
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   gifts = SupabaseClient.fetch_rows("gifts", filters={"wedding_id": wedding_id})
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"

# Postgres code for a value that doesn't parse as the column type
# (e.g. a non-UUID string compared with a uuid id); no row can match it
INVALID_VALUE_CODE = "22P02"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a code and an actionable suggestion alongside the message.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase table operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        # All gift envelopes of a wedding
        gifts = SupabaseClient.fetch_rows(
            "gifts",
            columns="id, envelope_name, envelope_number",
            filters={"wedding_id": "550e8400-..."},
        )

        # One wedding, or None
        wedding = SupabaseClient.fetch_one("wedding", {"id": wedding_id})
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _normalize_filters(cls, filters: dict[str, Any] | None) -> dict[str, Any]:
        """Convert UUID filter values to strings for queries."""
        return {
            column: str(value) if isinstance(value, UUID) else value
            for column, value in (filters or {}).items()
        }

    @classmethod
    def _apply_filters(cls, query: Any, filters: dict[str, Any]) -> Any:
        for column, value in filters.items():
            query = query.eq(column, value)
        return query

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_rows(
        cls,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        desc: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch rows from a table.

        Args:
            table: Table name (e.g. "moments")
            columns: Comma-separated column list (default: all)
            filters: Equality filters, column -> value
            order_by: Optional column to order by
            desc: Order descending when True
            limit: Maximum number of rows

        Returns:
            List of row dicts (empty if nothing matches)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        filters = cls._normalize_filters(filters)

        try:
            query = cls._apply_filters(client.table(table).select(columns), filters)
            if order_by:
                query = query.order(order_by, desc=desc)
            if limit is not None:
                query = query.limit(limit)

            response = query.execute()
            rows = response.data or []

            logger.debug(f"Fetched {len(rows)} rows from {table} where {filters}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch rows from {table}: {e}",
                code="FETCH_ROWS_FAILED",
                suggestion=f"Check that the {table} table exists and is accessible",
                details={"table": table, "filters": filters}
            )

    @classmethod
    def fetch_one(
        cls,
        table: str,
        filters: dict[str, Any],
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row matching the filters.

        Args:
            table: Table name
            filters: Equality filters identifying the row
            columns: Comma-separated column list (default: all)

        Returns:
            Row dict, or None if not found or the id is malformed

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        filters = cls._normalize_filters(filters)

        try:
            query = cls._apply_filters(client.table(table).select(columns), filters)
            response = query.single().execute()

            return response.data

        except Exception as e:
            # Check if it's a "not found" error
            if NO_ROWS_CODE in str(e) or INVALID_VALUE_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch row from {table}: {e}",
                code="FETCH_ONE_FAILED",
                suggestion="Check that the id exists",
                details={"table": table, "filters": filters}
            )

    @classmethod
    def fetch_first(cls, table: str, columns: str = "*") -> dict[str, Any] | None:
        """
        Fetch the first row of a table.

        Single-tenant pages treat the first wedding row as the active one.

        Returns:
            Row dict, or None if the table is empty
        """
        rows = cls.fetch_rows(table, columns=columns, limit=1)
        return rows[0] if rows else None

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with generated columns (id, created_at).

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        client = cls.get_client()
        data = cls._normalize_filters(data)

        try:
            response = (
                client.table(table)
                .insert(data)
                .execute()
            )

            if response.data:
                logger.info(f"Inserted row into {table}: {response.data[0].get('id')}")
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                details={"table": table}
            )

    @classmethod
    def update_rows(
        cls,
        table: str,
        data: dict[str, Any],
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Update rows matching the filters.

        Returns:
            The updated rows (empty if nothing matched)

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()
        filters = cls._normalize_filters(filters)

        try:
            query = cls._apply_filters(client.table(table).update(cls._normalize_filters(data)), filters)
            response = query.execute()
            rows = response.data or []

            logger.info(f"Updated {len(rows)} rows in {table} where {filters}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table}: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "filters": filters}
            )

    @classmethod
    def delete_rows(cls, table: str, filters: dict[str, Any]) -> int:
        """
        Delete rows matching the filters.

        Returns:
            Number of rows deleted (0 when a filter value is not a valid id)

        Raises:
            SupabaseClientError: If delete fails
        """
        if not filters:
            # An unfiltered delete would empty the table
            raise SupabaseClientError(
                message=f"Refusing to delete from {table} without filters",
                code="DELETE_WITHOUT_FILTER",
                details={"table": table}
            )

        client = cls.get_client()
        filters = cls._normalize_filters(filters)

        try:
            query = cls._apply_filters(client.table(table).delete(), filters)
            response = query.execute()
            count = len(response.data or [])

            logger.info(f"Deleted {count} rows from {table} where {filters}")
            return count

        except Exception as e:
            if INVALID_VALUE_CODE in str(e):
                logger.debug(f"No rows to delete from {table}: invalid filter value in {filters}")
                return 0
            raise SupabaseClientError(
                message=f"Failed to delete from {table}: {e}",
                code="DELETE_FAILED",
                details={"table": table, "filters": filters}
            )
