"""Category and subcategory CRUD API endpoints."""

from fastapi import APIRouter, HTTPException, status

from app.api.v1.categories.dependencies import CategoryServiceDep, SubcategoryServiceDep
from app.api.v1.categories.schemas import (
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
    SubcategoryCreate,
    SubcategoryListResponse,
    SubcategoryResponse,
    SubcategoryUpdate,
)
from app.api.v1.schemas import StatusResponse
from app.services.categories.exceptions import (
    CategoryAlreadyExists,
    CategoryNotFound,
    SubcategoryAlreadyExists,
    SubcategoryNotFound,
)

router = APIRouter(tags=["categories"])

CATEGORY_NOT_FOUND_MESSAGE = "Category not found."
SUBCATEGORY_NOT_FOUND_MESSAGE = "Subcategory not found."


# =============================================================================
# Categories
# =============================================================================


@router.get("/categories", response_model=CategoryListResponse, operation_id="listCategories")
async def list_categories(service: CategoryServiceDep, skip: int = 0, limit: int = 50) -> CategoryListResponse:
    items, total = await service.list_categories(skip=skip, limit=limit)
    return CategoryListResponse(categories=[CategoryResponse.from_model(c) for c in items], total=total)


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createCategory",
)
async def create_category(payload: CategoryCreate, service: CategoryServiceDep) -> CategoryResponse:
    try:
        category = await service.create_category(**payload.model_dump())
    except CategoryAlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))
    return CategoryResponse.from_model(category)


@router.get("/categories/{name}", response_model=CategoryResponse, operation_id="getCategory")
async def get_category(name: str, service: CategoryServiceDep) -> CategoryResponse:
    try:
        return CategoryResponse.from_model(await service.get_category(name))
    except CategoryNotFound:
        raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND_MESSAGE)


@router.put("/categories/{name}", response_model=CategoryResponse, operation_id="updateCategory")
async def update_category(name: str, payload: CategoryUpdate, service: CategoryServiceDep) -> CategoryResponse:
    try:
        category = await service.update_category(name, **payload.model_dump(exclude_unset=True))
    except CategoryNotFound:
        raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND_MESSAGE)
    except CategoryAlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))
    return CategoryResponse.from_model(category)


@router.delete("/categories/{name}", response_model=StatusResponse, operation_id="deleteCategory")
async def delete_category(name: str, service: CategoryServiceDep) -> StatusResponse:
    try:
        await service.delete_category(name)
    except CategoryNotFound:
        raise HTTPException(status_code=404, detail=CATEGORY_NOT_FOUND_MESSAGE)

    return StatusResponse(status="deleted", message=f"Category {name} deleted")


# =============================================================================
# Subcategories
# =============================================================================


@router.get("/subcategories", response_model=SubcategoryListResponse, operation_id="listSubcategories")
async def list_subcategories(
    service: SubcategoryServiceDep,
    category_id: int | None = None,
    skip: int = 0,
    limit: int = 50,
) -> SubcategoryListResponse:
    """List subcategories with their category, optionally for one category."""
    items, total = await service.list_subcategories(category_id=category_id, skip=skip, limit=limit)
    return SubcategoryListResponse(subcategories=[SubcategoryResponse.from_model(s) for s in items], total=total)


@router.post(
    "/subcategories",
    response_model=SubcategoryResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createSubcategory",
)
async def create_subcategory(payload: SubcategoryCreate, service: SubcategoryServiceDep) -> SubcategoryResponse:
    try:
        subcategory = await service.create_subcategory(**payload.model_dump())
    except CategoryNotFound:
        raise HTTPException(status_code=422, detail=CATEGORY_NOT_FOUND_MESSAGE)
    except SubcategoryAlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))
    return SubcategoryResponse.from_model(subcategory)


@router.get("/subcategories/{subcategory_id}", response_model=SubcategoryResponse, operation_id="getSubcategory")
async def get_subcategory(subcategory_id: int, service: SubcategoryServiceDep) -> SubcategoryResponse:
    try:
        return SubcategoryResponse.from_model(await service.get_subcategory(subcategory_id))
    except SubcategoryNotFound:
        raise HTTPException(status_code=404, detail=SUBCATEGORY_NOT_FOUND_MESSAGE)


@router.put("/subcategories/{subcategory_id}", response_model=SubcategoryResponse, operation_id="updateSubcategory")
async def update_subcategory(
    subcategory_id: int,
    payload: SubcategoryUpdate,
    service: SubcategoryServiceDep,
) -> SubcategoryResponse:
    try:
        subcategory = await service.update_subcategory(subcategory_id, **payload.model_dump(exclude_unset=True))
    except SubcategoryNotFound:
        raise HTTPException(status_code=404, detail=SUBCATEGORY_NOT_FOUND_MESSAGE)
    except CategoryNotFound:
        raise HTTPException(status_code=422, detail=CATEGORY_NOT_FOUND_MESSAGE)
    except SubcategoryAlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))
    return SubcategoryResponse.from_model(subcategory)


@router.delete("/subcategories/{subcategory_id}", response_model=StatusResponse, operation_id="deleteSubcategory")
async def delete_subcategory(subcategory_id: int, service: SubcategoryServiceDep) -> StatusResponse:
    try:
        await service.delete_subcategory(subcategory_id)
    except SubcategoryNotFound:
        raise HTTPException(status_code=404, detail=SUBCATEGORY_NOT_FOUND_MESSAGE)

    return StatusResponse(status="deleted", message=f"Subcategory {subcategory_id} deleted")
