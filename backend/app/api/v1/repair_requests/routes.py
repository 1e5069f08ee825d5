"""Repair request CRUD API endpoints."""

import structlog
from fastapi import APIRouter, HTTPException, status

from app.api.v1.repair_requests.dependencies import RepairRequestServiceDep
from app.api.v1.repair_requests.schemas import (
    RepairRequestCreate,
    RepairRequestListResponse,
    RepairRequestResponse,
    RepairRequestUpdate,
)
from app.api.v1.schemas import StatusResponse
from app.services.repair_requests.exceptions import RepairRequestCreationFailed, RepairRequestNotFound

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["repair-requests"])

NOT_FOUND_MESSAGE = "Repair request not found."
CREATION_FAILED_MESSAGE = "Failed to create repair request."


@router.get("/repair-requests", response_model=RepairRequestListResponse, operation_id="listRepairRequests")
async def list_repair_requests(
    service: RepairRequestServiceDep,
    skip: int = 0,
    limit: int = 50,
) -> RepairRequestListResponse:
    """List repair requests, newest first."""
    items, total = await service.list_repair_requests(skip=skip, limit=limit)

    return RepairRequestListResponse(
        repair_requests=[RepairRequestResponse.from_model(item) for item in items],
        total=total,
    )


@router.post(
    "/repair-requests",
    response_model=RepairRequestResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createRepairRequest",
)
async def create_repair_request(
    payload: RepairRequestCreate,
    service: RepairRequestServiceDep,
) -> RepairRequestResponse:
    """Create a repair request and assign it the next receipt number."""
    try:
        repair_request = await service.create_repair_request(**payload.model_dump())
    except RepairRequestCreationFailed:
        raise HTTPException(status_code=500, detail=CREATION_FAILED_MESSAGE)
    return RepairRequestResponse.from_model(repair_request)


@router.get("/repair-requests/{receipt_number}", response_model=RepairRequestResponse, operation_id="getRepairRequest")
async def get_repair_request(
    receipt_number: str,
    service: RepairRequestServiceDep,
) -> RepairRequestResponse:
    """Get a single repair request by its receipt number."""
    try:
        repair_request = await service.get_repair_request(receipt_number)
        return RepairRequestResponse.from_model(repair_request)
    except RepairRequestNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)


@router.put(
    "/repair-requests/{receipt_number}", response_model=RepairRequestResponse, operation_id="updateRepairRequest"
)
async def update_repair_request(
    receipt_number: str,
    payload: RepairRequestUpdate,
    service: RepairRequestServiceDep,
) -> RepairRequestResponse:
    """Update repair progress (status, details, price, dates)."""
    try:
        repair_request = await service.update_repair_request(receipt_number, **payload.model_dump(exclude_unset=True))
        return RepairRequestResponse.from_model(repair_request)
    except RepairRequestNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)


@router.delete(
    "/repair-requests/{receipt_number}", response_model=StatusResponse, operation_id="deleteRepairRequest"
)
async def delete_repair_request(
    receipt_number: str,
    service: RepairRequestServiceDep,
) -> StatusResponse:
    """Soft delete a repair request."""
    try:
        await service.delete_repair_request(receipt_number)
    except RepairRequestNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)

    return StatusResponse(status="deleted", message=f"Repair request {receipt_number} deleted")
