from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.models.schemas import Order, OrderCreate, OrdersResponse
from app.services.auth_dependencies import require_api_key
from app.services.order_service import OrderStore, get_order_store

router = APIRouter(tags=["orders"], dependencies=[Depends(require_api_key)])


@router.post("/orders", response_model=Order, status_code=201)
async def create_order(
    payload: OrderCreate,
    store: OrderStore = Depends(get_order_store),
) -> Order:
    return store.create(payload)


@router.get("/orders", response_model=OrdersResponse)
async def list_orders(store: OrderStore = Depends(get_order_store)) -> OrdersResponse:
    return OrdersResponse(orders=store.list_orders())


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(order_id: str, store: OrderStore = Depends(get_order_store)) -> Order:
    order = store.get(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
