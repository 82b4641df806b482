"""Product CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.application.schemas import (
    ApiResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)
from storefront.application.services import ProductService
from storefront.domain.exceptions import EntityNotFoundError, EntityValidationError
from storefront.infrastructure.dependencies import get_product_service
from storefront.presentation.api.params import parse_id, parse_limit

router = APIRouter(prefix="/products", tags=["Products"])


def _to_response(product) -> ProductResponse:
    return ProductResponse.model_validate(product, from_attributes=True)


@router.get(
    "",
    response_model=ApiResponse[list[ProductResponse]],
    response_model_exclude_none=True,
)
async def list_products(
    category: str | None = Query(None, description="Case-insensitive category filter"),
    limit: str | None = Query(None, description="Maximum number of products returned"),
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[list[ProductResponse]]:
    """Retrieve products, optionally filtered by category and truncated to ``limit``."""
    products, total = await service.list_products(category=category, limit=parse_limit(limit))
    return ApiResponse(data=[_to_response(p) for p in products], total=total)


@router.get(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    response_model_exclude_none=True,
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    """Retrieve a single product by ID."""
    try:
        product = await service.get_product(parse_id(product_id, "Product"))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=_to_response(product))


@router.post(
    "",
    response_model=ApiResponse[ProductResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    """Create a new product."""
    try:
        product = await service.create_product(data)
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ApiResponse(data=_to_response(product), message="Product created successfully")


@router.put(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    response_model_exclude_none=True,
)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    """Partially update an existing product."""
    try:
        product = await service.update_product(parse_id(product_id, "Product"), data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ApiResponse(data=_to_response(product), message="Product updated successfully")


@router.delete(
    "/{product_id}",
    response_model=ApiResponse[ProductResponse],
    response_model_exclude_none=True,
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> ApiResponse[ProductResponse]:
    """Delete a product by ID and return the removed record."""
    try:
        product = await service.delete_product(parse_id(product_id, "Product"))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=_to_response(product), message="Product deleted successfully")
