"""FastAPI routes for the Ordering domain."""

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    CancelOrderRequest,
    OrderResponse,
    PayOrderRequest,
    PlaceOrderRequest,
)
from ordering.checkout.placement import OrderPlacementService
from ordering.order.fulfillment import FulfilOrder
from ordering.order.order import Order
from ordering.order.payment import MarkOrderPaid
from shared.security import Principal, require_admin, require_user

router = APIRouter(prefix="/orders", tags=["orders"])


def _load_visible_order(order_id: str, principal: Principal) -> Order:
    """Fetch an order the caller owns, or any order for an admin."""
    order = current_domain.repository_for(Order).get(order_id)
    if not (principal.is_admin or order.is_owned_by(principal.user_id)):
        raise HTTPException(status_code=403, detail="Not authorized to access this order")
    return order


@router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, principal: Principal = Depends(require_user)) -> OrderResponse:
    order = OrderPlacementService().place(
        customer_id=principal.user_id,
        items=[{"product_id": item.product, "quantity": item.quantity} for item in body.order_items],
        shipping_address=body.shipping_address.model_dump(),
        payment_method=body.payment_method,
        order_notes=body.order_notes,
    )
    return OrderResponse.from_order(order)


@router.get("/myorders", response_model=list[OrderResponse])
async def my_orders(principal: Principal = Depends(require_user)) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).for_customer(principal.user_id)
    return [OrderResponse.from_order(order) for order in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, principal: Principal = Depends(require_user)) -> OrderResponse:
    return OrderResponse.from_order(_load_visible_order(order_id, principal))


@router.put("/{order_id}/pay", response_model=OrderResponse)
async def pay_order(
    order_id: str,
    body: PayOrderRequest | None = None,
    principal: Principal = Depends(require_user),
) -> OrderResponse:
    _load_visible_order(order_id, principal)
    command = MarkOrderPaid(
        order_id=order_id,
        payment_reference=body.payment_reference if body else None,
    )
    current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(current_domain.repository_for(Order).get(order_id))


@router.put("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(
    order_id: str,
    body: CancelOrderRequest | None = None,
    principal: Principal = Depends(require_user),
) -> OrderResponse:
    _load_visible_order(order_id, principal)
    order = OrderPlacementService().cancel(order_id, reason=body.reason if body else None)
    return OrderResponse.from_order(order)


@router.put("/{order_id}/fulfil", response_model=OrderResponse)
async def fulfil_order(order_id: str, principal: Principal = Depends(require_admin)) -> OrderResponse:
    current_domain.process(FulfilOrder(order_id=order_id), asynchronous=False)
    return OrderResponse.from_order(current_domain.repository_for(Order).get(order_id))
