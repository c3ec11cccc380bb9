# =============================================================================
# app/routers/records.py - Record Creation Endpoint
# =============================================================================
# POST /data decodes the body into a Record and inserts it.
#
# The body is decoded by hand rather than declared as a parameter so that a
# malformed payload yields 400 with the decoder's message, not FastAPI's
# 422 validation envelope. Only the first JSON value in the body is read.
# =============================================================================

import logging

from fastapi import APIRouter, Request, status

from app.dependencies import DatastoreDep, SettingsDep
from app.exceptions import RequestDecodeError
from core.models.record import Record
from core.services.record_service import RecordService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/data",
    response_model=Record,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Body is not a valid record (plain-text error)"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Insert failed (plain-text error)"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": Record.model_json_schema()}},
        }
    },
)
async def create_record(request: Request, datastore: DatastoreDep, settings: SettingsDep) -> Record:
    """
    Create a record.

    Echoes the decoded record with 201 once the insert succeeds.
    """
    raw = await request.body()
    try:
        record = Record.from_body(raw)
    except ValueError as e:
        logger.error("Failed to decode request body", extra={"error": str(e)})
        raise RequestDecodeError(str(e)) from e

    return await RecordService.create_record(datastore, record, table=settings.RECORD_TABLE)
