from datetime import datetime
from typing import Any

from pydantic import Field

from lms.infrastructure.common.schemas.response_wrappers import ApiModel


class OrderCreateRequest(ApiModel):
    course_id: int
    payment_info: dict[str, Any] | None = Field(
        None, description="Opaque payment metadata stored with the order"
    )


class OrderResponse(ApiModel):
    id: int
    course_id: int
    user_id: int
    payment_info: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderEnvelope(ApiModel):
    success: bool = True
    message: str
    order: OrderResponse


class OrderListResponse(ApiModel):
    success: bool = True
    orders: list[OrderResponse]
