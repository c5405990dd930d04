from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from barcode_inventory.api.deps import get_current_user
from barcode_inventory.database import get_db
from barcode_inventory.services.category_service import CategoryService
from barcode_inventory.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryListResponse,
    CategoryDetailResponse,
    CategoryMessageResponse
)

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
    dependencies=[Depends(get_current_user)]
)


@router.get(
    "",
    response_model=CategoryListResponse,
    summary="List all categories",
    description="Get all categories ordered by name."
)
def list_categories(db: Session = Depends(get_db)):
    categories = CategoryService(db).get_all()
    return CategoryListResponse(
        count=len(categories),
        categories=[CategoryResponse.model_validate(c) for c in categories]
    )


@router.post(
    "",
    response_model=CategoryMessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category"
)
def create_category(
    data: CategoryCreate,
    db: Session = Depends(get_db)
):
    """
    Create a category.

    - **name**: Unique category name, up to 100 characters (required)
    """
    category = CategoryService(db).create(data.name)
    return CategoryMessageResponse(
        message="Category created successfully",
        category=CategoryResponse.model_validate(category)
    )


@router.delete(
    "/{category_id}",
    response_model=CategoryMessageResponse,
    summary="Delete a category",
    description="Delete a category. Refused with 409 while any product is filed under it."
)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    category = CategoryService(db).delete(category_id)
    return CategoryMessageResponse(
        message="Category deleted successfully",
        category=CategoryResponse.model_validate(category)
    )


@router.get(
    "/{category_id}",
    response_model=CategoryDetailResponse,
    summary="Get category by ID"
)
def get_category(
    category_id: int,
    db: Session = Depends(get_db)
):
    category = CategoryService(db).get_by_id(category_id)
    return CategoryDetailResponse(category=CategoryResponse.model_validate(category))
