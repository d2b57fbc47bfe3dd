"""
Model registration: import every table model here so SQLModel metadata knows about it
before tables are created.
"""
from apps.widgets.models import Widget

__all__ = ["Widget"]
