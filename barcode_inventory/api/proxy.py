from functools import lru_cache

from fastapi import APIRouter, Depends

from barcode_inventory.api.deps import get_current_user
from barcode_inventory.services.lookup_service import ProductLookupService

router = APIRouter(
    prefix="/proxy",
    tags=["Proxy"],
    dependencies=[Depends(get_current_user)]
)


@lru_cache
def get_lookup_service() -> ProductLookupService:
    """Shared lookup service so upstream connections are pooled across requests."""
    return ProductLookupService()


def close_lookup_service() -> None:
    """Close the shared lookup service, if one was created."""
    if get_lookup_service.cache_info().currsize:
        get_lookup_service().close()
    get_lookup_service.cache_clear()


@router.get(
    "/product/{barcode}",
    summary="Look up a barcode externally",
    description="""
    Forward a barcode to the external product metadata service and relay its
    JSON response unchanged.

    - Upstream error status codes are passed through
    - 503 when the external service does not respond
    """
)
def lookup_product(
    barcode: str,
    service: ProductLookupService = Depends(get_lookup_service)
):
    return service.lookup(barcode)
