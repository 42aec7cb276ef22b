class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

class DataIntegrityError(AppError):
    """Raised when the schedule references a code that is not in the roster."""
    def __init__(self, code: str, details: dict = None):
        self.code = code
        super().__init__(
            f"Assignment code {code!r} is not present in the roster",
            status_code=409,
            details={"code": code, **(details or {})},
        )

class UnknownSlotError(AppError):
    """Raised when a day/period is not an assignable slot of the timetable."""
    def __init__(self, day: str, period: int | None):
        super().__init__(
            f"No teaching period {period} on {day}",
            status_code=404,
            details={"day": day, "period": period},
        )

class UnknownSectionError(AppError):
    def __init__(self, section: str):
        super().__init__(f"Section {section!r} is not part of this school", status_code=404)

class RosterValidationError(AppError):
    """Raised when roster records are inconsistent (duplicate codes, negative quotas)."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=422, details=details)

class SelectionRejectedError(AppError):
    """Raised when a write is attempted with a code the resolver does not offer as selectable."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, status_code=409, details=details)

class ResourceNotFoundError(AppError):
    """Raised when a requested resource is not found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with id {resource_id} not found", status_code=404)
