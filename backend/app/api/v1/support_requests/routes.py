"""Support request CRUD API endpoints."""

from fastapi import APIRouter, HTTPException, status

from app.api.v1.schemas import StatusResponse
from app.api.v1.support_requests.dependencies import SupportRequestServiceDep
from app.api.v1.support_requests.schemas import (
    SupportRequestCreate,
    SupportRequestListResponse,
    SupportRequestResponse,
    SupportRequestUpdate,
)
from app.services.support_requests.exceptions import SupportRequestNotFound

router = APIRouter(tags=["support-requests"])

NOT_FOUND_MESSAGE = "Support request not found."


@router.get("/support-requests", response_model=SupportRequestListResponse, operation_id="listSupportRequests")
async def list_support_requests(
    service: SupportRequestServiceDep,
    skip: int = 0,
    limit: int = 50,
) -> SupportRequestListResponse:
    items, total = await service.list_support_requests(skip=skip, limit=limit)
    return SupportRequestListResponse(
        support_requests=[SupportRequestResponse.from_model(s) for s in items],
        total=total,
    )


@router.post(
    "/support-requests",
    response_model=SupportRequestResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createSupportRequest",
)
async def create_support_request(
    payload: SupportRequestCreate,
    service: SupportRequestServiceDep,
) -> SupportRequestResponse:
    support_request = await service.create_support_request(**payload.model_dump())
    return SupportRequestResponse.from_model(support_request)


@router.get(
    "/support-requests/{support_request_id}",
    response_model=SupportRequestResponse,
    operation_id="getSupportRequest",
)
async def get_support_request(support_request_id: int, service: SupportRequestServiceDep) -> SupportRequestResponse:
    try:
        return SupportRequestResponse.from_model(await service.get_support_request(support_request_id))
    except SupportRequestNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)


@router.put(
    "/support-requests/{support_request_id}",
    response_model=SupportRequestResponse,
    operation_id="updateSupportRequest",
)
async def update_support_request(
    support_request_id: int,
    payload: SupportRequestUpdate,
    service: SupportRequestServiceDep,
) -> SupportRequestResponse:
    try:
        support_request = await service.update_support_request(
            support_request_id, **payload.model_dump(exclude_unset=True)
        )
    except SupportRequestNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return SupportRequestResponse.from_model(support_request)


@router.delete(
    "/support-requests/{support_request_id}",
    response_model=StatusResponse,
    operation_id="deleteSupportRequest",
)
async def delete_support_request(support_request_id: int, service: SupportRequestServiceDep) -> StatusResponse:
    try:
        await service.delete_support_request(support_request_id)
    except SupportRequestNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)

    return StatusResponse(status="deleted", message=f"Support request {support_request_id} deleted")
