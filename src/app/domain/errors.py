from __future__ import annotations


class AdminError(Exception):
    pass


class RecordNotFoundError(AdminError):
    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity.capitalize()} not found: {record_id}")
        self.entity = entity
        self.record_id = record_id


class RecordWriteError(AdminError):
    def __init__(self, operation: str, entity: str):
        super().__init__(f"Failed to {operation} {entity} - no data returned")
        self.operation = operation
        self.entity = entity


class RecordValidationError(AdminError):
    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity.capitalize()} validation failed: {record_id}")
        self.entity = entity
        self.record_id = record_id


class DraftValidationError(AdminError):
    def __init__(self, field_errors: dict[str, str]):
        details = "; ".join(f"{name}: {reason}" for name, reason in field_errors.items())
        super().__init__(f"Invalid form fields: {details}")
        self.field_errors = field_errors
