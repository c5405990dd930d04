from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from barcode_inventory.api.deps import get_current_user
from barcode_inventory.database import get_db
from barcode_inventory.services.product_service import ProductService
from barcode_inventory.schemas.product import (
    ProductCreate,
    ProductCategoryUpdate,
    ProductResponse,
    ProductListResponse,
    ProductSearchResponse,
    ProductDetailResponse,
    ProductMessageResponse
)

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    dependencies=[Depends(get_current_user)]
)


@router.post(
    "",
    response_model=ProductMessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Add a product, usually from a scanned barcode. Material number and barcode must be unused."
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new product.

    - **material**: Material number, unique (required)
    - **barcode**: Barcode, unique (required)
    - **description**: Up to 500 characters (required)
    - **category**: Category name, defaults to "Uncategorized" (optional)
    """
    service = ProductService(db)
    product = service.create(product_data)
    return ProductMessageResponse(
        message="Product added successfully",
        product=ProductResponse.model_validate(product)
    )


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List all products",
    description="Get all products, newest first, optionally filtered by category."
)
def list_products(
    category: Optional[str] = Query(None, description="Exact category name"),
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    products = service.get_all(category)

    return ProductListResponse(
        count=len(products),
        products=[ProductResponse.model_validate(p) for p in products]
    )


@router.get(
    "/search",
    response_model=ProductSearchResponse,
    summary="Search products",
    description="""
    Search by material number, barcode or description.

    A numeric query matches the material number exactly. Any other query
    matches barcode or description as a case-insensitive substring.
    """
)
def search_products(
    q: Optional[str] = Query(None, description="Search query"),
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    products = service.search(q)

    return ProductSearchResponse(
        count=len(products),
        query=q,
        products=[ProductResponse.model_validate(p) for p in products]
    )


@router.patch(
    "/{product_id}/category",
    response_model=ProductMessageResponse,
    summary="Move a product to another category",
    description="Reassign the product's category. Any category name is accepted."
)
def update_product_category(
    product_id: int,
    data: ProductCategoryUpdate,
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    product = service.update_category(product_id, data.category)
    return ProductMessageResponse(
        message="Product category updated successfully",
        product=ProductResponse.model_validate(product)
    )


@router.delete(
    "/{product_id}",
    response_model=ProductMessageResponse,
    summary="Delete a product"
)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    product = service.delete(product_id)
    return ProductMessageResponse(
        message="Product deleted successfully",
        product=ProductResponse.model_validate(product)
    )


@router.get(
    "/{product_id}",
    response_model=ProductDetailResponse,
    summary="Get product by ID"
)
def get_product(
    product_id: int,
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    product = service.get_by_id(product_id)
    return ProductDetailResponse(product=ProductResponse.model_validate(product))
