# =============================================================================
# core/services/record_service.py - Record Business Logic
# =============================================================================
# Turns a decoded Record into one parameterized INSERT.
# Separates HTTP concerns from database logic.
# =============================================================================

import logging

from lib.postgres_client import DatastoreError, PostgresDatastore
from core.models.record import Record
from app.exceptions import RecordWriteError

logger = logging.getLogger(__name__)


class RecordService:
    """
    Service for record persistence.

    Every call is exactly one statement with no retry; a duplicate id or
    any other database error is reported back unchanged.
    """

    @staticmethod
    def insert_statement(table: str) -> str:
        """Build the INSERT for the configured record table."""
        return f"INSERT INTO {table} (id, name) VALUES ($1, $2)"

    @staticmethod
    async def create_record(
        datastore: PostgresDatastore,
        record: Record,
        table: str = "tablea",
    ) -> Record:
        """
        Insert a record.

        Args:
            datastore: Open datastore handle
            record: Decoded request body
            table: Target table name

        Returns:
            The record as inserted

        Raises:
            RecordWriteError: If the database rejects the insert
        """
        fields = {"record_id": record.id, "record_name": record.name}
        logger.info("Attempting to create new record", extra=fields)

        try:
            await datastore.execute(
                RecordService.insert_statement(table),
                record.id,
                record.name,
            )
        except DatastoreError as e:
            logger.error(
                "Failed to insert record into database",
                extra={**fields, **e.log_fields()},
            )
            raise RecordWriteError(e.message, record_id=record.id) from e

        logger.info("Successfully created new record", extra=fields)
        return record
