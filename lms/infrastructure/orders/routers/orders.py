from fastapi import APIRouter, Depends
from starlette import status

from lms.application.orders.use_cases.order_use_case import OrderUseCase
from lms.core import container
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.identity.dependencies import AdminUser, CurrentUser
from lms.infrastructure.orders.schemas import (
    OrderCreateRequest,
    OrderEnvelope,
    OrderListResponse,
    OrderResponse,
)

router = APIRouter(tags=["orders"])


@router.post("/create-order", status_code=status.HTTP_201_CREATED)
async def create_order(
    data: OrderCreateRequest,
    current_user: CurrentUser,
    use_case: OrderUseCase = Depends(inject_use_case(container.order_use_case)),
) -> OrderEnvelope:
    """
    Enroll the current user in a course.

    A confirmation email and an admin notification are sent best-effort.
    """
    order = use_case.create_order(current_user.id, data.course_id, data.payment_info)
    return OrderEnvelope(
        message="Order created successfully", order=OrderResponse.model_validate(order)
    )


@router.get("/get-all-orders")
async def get_all_orders(
    _: AdminUser,
    use_case: OrderUseCase = Depends(inject_use_case(container.order_use_case)),
) -> OrderListResponse:
    orders = use_case.list_orders()
    return OrderListResponse(orders=[OrderResponse.model_validate(order) for order in orders])
