from typing import Annotated, List

from fastapi import APIRouter, Depends

from billing.core.dependencies import StoreDep, TimeoutDep
from billing.customers.schemas import CustomerField, CustomerTableRow
from billing.customers.service import CustomerService

router = APIRouter(prefix="/customers", tags=["Customers"])


def get_customer_service(store: StoreDep, timeout: TimeoutDep) -> CustomerService:
    return CustomerService(store, timeout=timeout)


CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]


@router.get("", response_model=List[CustomerTableRow])
async def list_customers(service: CustomerServiceDep, query: str = "") -> List[CustomerTableRow]:
    return await service.list_customers(query)


@router.get("/fields", response_model=List[CustomerField])
async def list_customer_fields(service: CustomerServiceDep) -> List[CustomerField]:
    return await service.list_customer_fields()
