"""
Repository registration: map every entity served by the generic router to its repository.
When adding/removing apps, add/remove the corresponding registrations here.
"""
from crud_core.repository.unit_of_work import RepositoryRegistry
from apps.widgets.models import Widget
from apps.widgets.repository import WidgetRepository

def register_repositories(registry: RepositoryRegistry) -> RepositoryRegistry:
    registry.register_entity(int, Widget, WidgetRepository)
    return registry
