from slotwise.models.schedule_document import DocumentKind, ScheduleDocument  # noqa: F401
