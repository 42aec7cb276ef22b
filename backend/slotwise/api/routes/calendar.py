from fastapi import APIRouter, Depends

from slotwise.api.deps import get_store
from slotwise.schemas.calendar import CalendarPayload
from slotwise.services.store import DocumentStore

router = APIRouter()


@router.get("/events", response_model=CalendarPayload)
def read_events(store: DocumentStore = Depends(get_store)):
    return CalendarPayload(events=store.load_calendar())


@router.put("/events", response_model=CalendarPayload)
def replace_events(payload: CalendarPayload, store: DocumentStore = Depends(get_store)):
    events = sorted(payload.events, key=lambda event: event.date)
    store.save_calendar(events)
    return CalendarPayload(events=events)
