"""Invoice endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from src.api.dependencies import (
    get_invoice_pdf_use_case,
    get_invoices_use_case,
    get_share_invoice_use_case,
)
from src.application.dto.requests import SaveInvoiceRequest
from src.application.dto.responses import (
    DeleteResponse,
    ErrorResponse,
    InvoiceListResponse,
    OrderListResponse,
    ShareLinkResponse,
)
from src.application.use_cases.create_invoice_pdf import CreateInvoicePdfUseCase
from src.application.use_cases.manage_invoices import ManageInvoicesUseCase
from src.application.use_cases.share_invoice import ShareInvoiceUseCase
from src.core.entities.invoice import Invoice

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    search: str = "",
    use_case: ManageInvoicesUseCase = Depends(get_invoices_use_case),
) -> InvoiceListResponse:
    """List invoices, optionally filtered by invoice number or customer name."""
    return use_case.to_response(await use_case.list_invoices(search))


@router.get(
    "/available-orders",
    response_model=OrderListResponse,
    responses={404: {"model": ErrorResponse}},
)
async def list_available_orders(
    editing_invoice_id: str | None = None,
    use_case: ManageInvoicesUseCase = Depends(get_invoices_use_case),
) -> OrderListResponse:
    """
    Orders that can back an invoice.

    Pass ``editing_invoice_id`` to keep the order of that invoice in the list.
    """
    orders = await use_case.list_available_orders(editing_invoice_id)
    return OrderListResponse(orders=orders, total=len(orders))


@router.post(
    "",
    response_model=Invoice,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_invoice(
    request: SaveInvoiceRequest,
    use_case: ManageInvoicesUseCase = Depends(get_invoices_use_case),
) -> Invoice:
    """Create an invoice from an order that has none yet."""
    return await use_case.create_invoice(request)


@router.get(
    "/{invoice_id}",
    response_model=Invoice,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: str,
    use_case: ManageInvoicesUseCase = Depends(get_invoices_use_case),
) -> Invoice:
    return await use_case.get_invoice(invoice_id)


@router.put(
    "/{invoice_id}",
    response_model=Invoice,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_invoice(
    invoice_id: str,
    request: SaveInvoiceRequest,
    use_case: ManageInvoicesUseCase = Depends(get_invoices_use_case),
) -> Invoice:
    return await use_case.update_invoice(invoice_id, request)


@router.delete(
    "/{invoice_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_invoice(
    invoice_id: str,
    use_case: ManageInvoicesUseCase = Depends(get_invoices_use_case),
) -> DeleteResponse:
    await use_case.delete_invoice(invoice_id)
    return DeleteResponse(id=invoice_id)


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {"content": {"application/pdf": {}}},
        404: {"model": ErrorResponse, "description": "Invoice not found"},
    },
)
async def get_invoice_pdf(
    invoice_id: str,
    use_case: CreateInvoicePdfUseCase = Depends(get_invoice_pdf_use_case),
) -> Response:
    """Generate and download the printable invoice."""
    result = await use_case.execute(invoice_id)
    return Response(
        content=result.pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
        },
    )


@router.get(
    "/{invoice_id}/share",
    response_model=ShareLinkResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def share_invoice(
    invoice_id: str,
    use_case: ShareInvoiceUseCase = Depends(get_share_invoice_use_case),
) -> ShareLinkResponse:
    """WhatsApp message and wa.me link for the invoice's customer."""
    return await use_case.execute(invoice_id)
