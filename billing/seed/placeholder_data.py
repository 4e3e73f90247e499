"""Reference data loaded by the seed loader.

Invoice ids are derived with ``uuid5`` so that every run produces the same
keys and re-seeding stays a no-op. Amounts are in cents.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List

_INVOICE_NAMESPACE = uuid.UUID("5b3f0c2e-8f1d-4c5a-9d42-3c1f0f6a9e10")


def _invoice_id(number: int) -> str:
    return str(uuid.uuid5(_INVOICE_NAMESPACE, f"invoice-{number}"))


users: List[Dict[str, Any]] = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

customers: List[Dict[str, Any]] = [
    {
        "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        "name": "Evil Rabbit",
        "email": "evil@rabbit.com",
        "image_url": "/customers/evil-rabbit.png",
    },
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "76d65c26-f784-44a2-ac19-586678f7c2f2",
        "name": "Michael Novotny",
        "email": "michael@novotny.com",
        "image_url": "/customers/michael-novotny.png",
    },
    {
        "id": "cc27c14a-0acf-4f4a-a6c9-d45682c144b9",
        "name": "Amy Burrell",
        "email": "amy@burrell.com",
        "image_url": "/customers/amy-burrell.png",
    },
    {
        "id": "13d07535-c59e-4157-a011-f8d2ef4e0cbb",
        "name": "Balazs Orban",
        "email": "balazs@orban.com",
        "image_url": "/customers/balazs-orban.png",
    },
]

_invoice_rows = [
    # (customer index, amount, status, date)
    (0, 15795, "pending", "2022-12-06"),
    (1, 20348, "pending", "2022-11-14"),
    (4, 3040, "paid", "2022-10-29"),
    (3, 44800, "paid", "2023-09-10"),
    (5, 34577, "pending", "2023-08-05"),
    (2, 54246, "pending", "2023-07-16"),
    (0, 666, "pending", "2023-06-27"),
    (3, 32545, "paid", "2023-06-09"),
    (4, 1250, "paid", "2023-06-17"),
    (5, 8546, "paid", "2023-06-07"),
    (1, 500, "paid", "2023-08-19"),
    (5, 8945, "paid", "2023-06-03"),
    (2, 1000, "paid", "2022-06-05"),
]

invoices: List[Dict[str, Any]] = [
    {
        "id": _invoice_id(number),
        "customer_id": customers[customer_index]["id"],
        "amount": amount,
        "status": status,
        "date": date,
    }
    for number, (customer_index, amount, status, date) in enumerate(_invoice_rows, start=1)
]

revenue: List[Dict[str, Any]] = [
    {"month": "Jan", "revenue": 2000},
    {"month": "Feb", "revenue": 1800},
    {"month": "Mar", "revenue": 2200},
    {"month": "Apr", "revenue": 2500},
    {"month": "May", "revenue": 2300},
    {"month": "Jun", "revenue": 3200},
    {"month": "Jul", "revenue": 3500},
    {"month": "Aug", "revenue": 3700},
    {"month": "Sep", "revenue": 2500},
    {"month": "Oct", "revenue": 2800},
    {"month": "Nov", "revenue": 3000},
    {"month": "Dec", "revenue": 4800},
]


@dataclass(frozen=True)
class SeedData:
    """The four batches the seed loader writes, in plain dict form."""

    users: List[Dict[str, Any]] = field(default_factory=list)
    customers: List[Dict[str, Any]] = field(default_factory=list)
    invoices: List[Dict[str, Any]] = field(default_factory=list)
    revenue: List[Dict[str, Any]] = field(default_factory=list)


PLACEHOLDER_DATA = SeedData(users=users, customers=customers, invoices=invoices, revenue=revenue)
