"""Request validators for the widget endpoints."""

from crud_core.validation import ValidationResult
from .models import Widget


async def validate_widget(widget: Widget) -> ValidationResult:
    if not widget.name or not widget.name.strip():
        return ValidationResult.invalid("Widget name is required")
    if widget.quantity < 0:
        return ValidationResult.invalid("Widget quantity cannot be negative")
    return ValidationResult.valid()


async def validate_widget_id(id: int) -> ValidationResult:
    if id <= 0:
        return ValidationResult.invalid("Widget id must be positive")
    return ValidationResult.valid()
