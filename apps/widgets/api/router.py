from typing import Optional
from fastapi import Depends, Request
from crud_core.api.rest_router import CrudValidators, build_crud_router
from crud_core.repository.specification import FieldSpecification, Specification
from crud_core.security import get_current_user
from ..models import Widget, WidgetRead, WidgetWrite
from ..validators import validate_widget, validate_widget_id


def widget_specification(request: Request) -> Optional[Specification]:
    """?name=... narrows the listing to widgets with that exact name."""
    name = request.query_params.get("name")
    if name is None:
        return None
    return FieldSpecification(name=name)


router = build_crud_router(
    key_type=int,
    entity_type=Widget,
    get_schema=WidgetRead,
    put_schema=WidgetWrite,
    validators=CrudValidators(
        create=validate_widget,
        update=validate_widget,
        get_one=validate_widget_id,
        delete=validate_widget_id,
    ),
    specification_factory=widget_specification,
    dependencies=[Depends(get_current_user)],
)
