# CustomerCore - Customer Record Management Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""FastAPI dependencies shared by the API routers."""

from typing import Annotated

from beartype import beartype
from fastapi import Depends, Request

from ..services.customer_service import CustomerService


@beartype
def get_customer_service(request: Request) -> CustomerService:
    """Provide the customer service wired by the application factory."""
    service = getattr(request.app.state, "customer_service", None)
    if service is None:
        raise RuntimeError("Customer service is not configured on this application")
    return service


CustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
