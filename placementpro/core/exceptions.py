"""
Domain errors.

Services raise these; a single handler in main.py turns them into
{"detail": ...} JSON responses with the attached status code.
"""


class PlacementError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(PlacementError):
    """Missing or malformed input. Nothing is saved."""
    status_code = 400


class DuplicateApplicationError(PlacementError):
    status_code = 400

    def __init__(self, student_id: str, drive_id: str):
        super().__init__("You have already applied to this drive")
        self.student_id = student_id
        self.drive_id = drive_id


class IneligibleError(PlacementError):
    status_code = 400


class DriveClosedError(PlacementError):
    status_code = 400


class InvalidTransitionError(PlacementError):
    status_code = 409

    def __init__(self, current: str, target: str):
        super().__init__(
            f"Invalid state transition. Cannot change status from '{current}' to '{target}'"
        )
        self.current = current
        self.target = target


class SlotFullError(PlacementError):
    status_code = 400


class NotFoundError(PlacementError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class AuthenticationError(PlacementError):
    status_code = 401


class PermissionDeniedError(PlacementError):
    status_code = 403
