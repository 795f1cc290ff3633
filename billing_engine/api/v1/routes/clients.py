# billing_engine/api/v1/routes/clients.py

from __future__ import annotations

from fastapi import APIRouter

from billing_engine.api.v1.envelope import ok
from billing_engine.api.v1.schemas.documents import PlaceOfSupplyRequest
from billing_engine.domain.services.state_directory import INDIAN_STATES, place_of_supply_for_client

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post("/place-of-supply", response_model=dict)
async def place_of_supply(body: PlaceOfSupplyRequest):
    """Place-of-supply label to pre-fill when this client is picked."""
    return ok({"place_of_supply": place_of_supply_for_client(body.client)})


@router.get("/states", response_model=dict)
async def states():
    return ok([{"name": s.name, "code": s.code, "capital": s.capital} for s in INDIAN_STATES])
