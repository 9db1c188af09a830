"""Customer endpoints."""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_customers_use_case
from src.application.dto.requests import CustomerRequest
from src.application.dto.responses import CustomerListResponse, DeleteResponse, ErrorResponse
from src.application.use_cases.manage_customers import ManageCustomersUseCase
from src.core.entities.customer import Customer

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    search: str = "",
    use_case: ManageCustomersUseCase = Depends(get_customers_use_case),
) -> CustomerListResponse:
    """List customers, optionally filtered by name, email or phone."""
    return use_case.to_response(await use_case.list_customers(search))


@router.post(
    "",
    response_model=Customer,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_customer(
    request: CustomerRequest,
    use_case: ManageCustomersUseCase = Depends(get_customers_use_case),
) -> Customer:
    return await use_case.create_customer(request)


@router.get(
    "/{customer_id}",
    response_model=Customer,
    responses={404: {"model": ErrorResponse}},
)
async def get_customer(
    customer_id: str,
    use_case: ManageCustomersUseCase = Depends(get_customers_use_case),
) -> Customer:
    return await use_case.get_customer(customer_id)


@router.put(
    "/{customer_id}",
    response_model=Customer,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_customer(
    customer_id: str,
    request: CustomerRequest,
    use_case: ManageCustomersUseCase = Depends(get_customers_use_case),
) -> Customer:
    """Replace a customer. Existing orders and invoices keep their copies."""
    return await use_case.update_customer(customer_id, request)


@router.delete(
    "/{customer_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_customer(
    customer_id: str,
    use_case: ManageCustomersUseCase = Depends(get_customers_use_case),
) -> DeleteResponse:
    """Delete a customer. Orders referencing it are not touched."""
    orphaned = await use_case.delete_customer(customer_id)
    return DeleteResponse(id=customer_id, orphaned_references=orphaned)
