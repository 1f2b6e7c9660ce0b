from fastapi import APIRouter, Body, Depends
from typing import Any
from core.chain import RequestState, unwrap
from core.context import AppContext, get_context
from models.schemas import ErrorResponse

router = APIRouter()

@router.get("/dishes")
def list_dishes(ctx: AppContext = Depends(get_context)):
    return {"data": [dish.model_dump() for dish in ctx.dishes.list()]}

@router.post("/dishes", status_code=201, responses={400: {"model": ErrorResponse}})
def create_dish(payload: Any = Body(None), ctx: AppContext = Depends(get_context)):
    dish = unwrap(ctx.dishes.create(RequestState.build(payload)))
    return {"data": dish.model_dump()}

@router.get("/dishes/{dishId}", responses={404: {"model": ErrorResponse}})
def read_dish(dishId: str, ctx: AppContext = Depends(get_context)):
    dish = unwrap(ctx.dishes.read(RequestState.build(dishId=dishId)))
    return {"data": dish.model_dump()}

@router.put("/dishes/{dishId}", responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def update_dish(dishId: str, payload: Any = Body(None), ctx: AppContext = Depends(get_context)):
    """Full replacement of name, description, image_url and price"""
    dish = unwrap(ctx.dishes.update(RequestState.build(payload, dishId=dishId)))
    return {"data": dish.model_dump()}
