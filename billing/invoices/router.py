from typing import Annotated, List

from fastapi import APIRouter, Depends

from billing.core.dependencies import StoreDep, TimeoutDep
from billing.invoices.schemas import InvoiceAmountMatch, InvoiceForm, InvoiceTableRow, LatestInvoice
from billing.invoices.service import InvoiceService

router = APIRouter(prefix="/invoices", tags=["Invoices"])


def get_invoice_service(store: StoreDep, timeout: TimeoutDep) -> InvoiceService:
    return InvoiceService(store, timeout=timeout)


InvoiceServiceDep = Annotated[InvoiceService, Depends(get_invoice_service)]


@router.get("", response_model=List[InvoiceTableRow])
async def list_invoices(service: InvoiceServiceDep, query: str = "", page: int = 1) -> List[InvoiceTableRow]:
    return await service.list_invoices(query, page)


@router.get("/pages")
async def count_invoice_pages(service: InvoiceServiceDep, query: str = "") -> dict[str, int]:
    return {"total_pages": await service.count_invoice_pages(query)}


@router.get("/latest", response_model=List[LatestInvoice])
async def list_latest_invoices(service: InvoiceServiceDep) -> List[LatestInvoice]:
    return await service.list_latest_invoices()


@router.get("/amount/{amount}", response_model=List[InvoiceAmountMatch])
async def list_invoices_with_amount(amount: int, service: InvoiceServiceDep) -> List[InvoiceAmountMatch]:
    return await service.list_invoices_with_amount(amount)


@router.get("/{invoice_id}", response_model=InvoiceForm)
async def get_invoice(invoice_id: str, service: InvoiceServiceDep) -> InvoiceForm:
    return await service.get_invoice(invoice_id)
