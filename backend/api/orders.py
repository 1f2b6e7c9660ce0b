from fastapi import APIRouter, Body, Depends, Response
from typing import Any
from core.chain import RequestState, unwrap
from core.context import AppContext, get_context
from models.schemas import ErrorResponse

router = APIRouter()

@router.get("/orders")
def list_orders(ctx: AppContext = Depends(get_context)):
    return {"data": [order.model_dump() for order in ctx.orders.list()]}

@router.post("/orders", status_code=201, responses={400: {"model": ErrorResponse}})
def create_order(payload: Any = Body(None), ctx: AppContext = Depends(get_context)):
    """New orders always start out pending"""
    order = unwrap(ctx.orders.create(RequestState.build(payload)))
    return {"data": order.model_dump()}

@router.get("/orders/{orderId}", responses={404: {"model": ErrorResponse}})
def read_order(orderId: str, ctx: AppContext = Depends(get_context)):
    order = unwrap(ctx.orders.read(RequestState.build(orderId=orderId)))
    return {"data": order.model_dump()}

@router.put("/orders/{orderId}", responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def update_order(orderId: str, payload: Any = Body(None), ctx: AppContext = Depends(get_context)):
    order = unwrap(ctx.orders.update(RequestState.build(payload, orderId=orderId)))
    return {"data": order.model_dump()}

@router.delete("/orders/{orderId}", status_code=204, responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def delete_order(orderId: str, ctx: AppContext = Depends(get_context)):
    """Only pending orders can be deleted"""
    unwrap(ctx.orders.delete(RequestState.build(orderId=orderId)))
    return Response(status_code=204)
