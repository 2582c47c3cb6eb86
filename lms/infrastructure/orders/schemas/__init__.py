from .order_schemas import OrderCreateRequest, OrderEnvelope, OrderListResponse, OrderResponse

__all__ = ["OrderCreateRequest", "OrderEnvelope", "OrderListResponse", "OrderResponse"]
