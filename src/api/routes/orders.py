"""Order endpoints."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_orders_use_case
from src.application.dto.requests import SaveOrderRequest
from src.application.dto.responses import DeleteResponse, ErrorResponse, OrderListResponse
from src.application.use_cases.manage_orders import ManageOrdersUseCase
from src.core.entities.order import Order

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=OrderListResponse)
async def list_orders(
    search: str = "",
    use_case: ManageOrdersUseCase = Depends(get_orders_use_case),
) -> OrderListResponse:
    """List orders, optionally filtered by customer or item name."""
    return use_case.to_response(await use_case.list_orders(search))


@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_order(
    request: SaveOrderRequest,
    use_case: ManageOrdersUseCase = Depends(get_orders_use_case),
) -> Order:
    """Create an order. Line totals, subtotal, tax and total are computed."""
    return await use_case.create_order(request)


@router.get(
    "/{order_id}",
    response_model=Order,
    responses={404: {"model": ErrorResponse}},
)
async def get_order(
    order_id: str,
    use_case: ManageOrdersUseCase = Depends(get_orders_use_case),
) -> Order:
    return await use_case.get_order(order_id)


@router.put(
    "/{order_id}",
    response_model=Order,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_order(
    order_id: str,
    request: SaveOrderRequest,
    use_case: ManageOrdersUseCase = Depends(get_orders_use_case),
) -> Order:
    return await use_case.update_order(order_id, request)


@router.delete(
    "/{order_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_order(
    order_id: str,
    use_case: ManageOrdersUseCase = Depends(get_orders_use_case),
) -> DeleteResponse:
    """Delete an order. An invoice built from it is not touched."""
    orphaned = await use_case.delete_order(order_id)
    return DeleteResponse(id=order_id, orphaned_references=orphaned)
