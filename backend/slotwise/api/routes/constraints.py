from fastapi import APIRouter, Depends

from slotwise.api.deps import get_store
from slotwise.engine.constraints import UnavailabilityConstraintSet
from slotwise.engine.structure import Day
from slotwise.schemas.constraints import (
    ToggleUnavailabilityRequest,
    ToggleUnavailabilityResponse,
    UnavailabilityPayload,
)
from slotwise.services.store import DocumentStore

router = APIRouter()


@router.get("", response_model=UnavailabilityPayload)
def read_unavailability(store: DocumentStore = Depends(get_store)):
    return UnavailabilityPayload(days_by_code=store.load_constraints().as_dict())


@router.put("", response_model=UnavailabilityPayload)
def replace_unavailability(payload: UnavailabilityPayload, store: DocumentStore = Depends(get_store)):
    constraints = UnavailabilityConstraintSet(payload.days_by_code)
    store.save_constraints(constraints)
    return UnavailabilityPayload(days_by_code=constraints.as_dict())


@router.post("/toggle", response_model=ToggleUnavailabilityResponse)
def toggle_unavailability(payload: ToggleUnavailabilityRequest, store: DocumentStore = Depends(get_store)):
    constraints = store.load_constraints()
    day = Day.parse(payload.day)
    unavailable = constraints.toggle(payload.code, day)
    store.save_constraints(constraints)
    return ToggleUnavailabilityResponse(
        code=payload.code,
        day=day.value,
        unavailable=unavailable,
        days=[item.value for item in constraints.days_for(payload.code)],
    )
