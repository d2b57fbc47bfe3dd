"""
Generic REST router: binds the five controller operations to HTTP routes for one entity.

Routes (relative to the prefix the router is mounted under):
    POST   /{id}   update, path id must equal body id
    PUT    /{id}   same as POST
    PUT    ""      create
    GET    ""      list, optionally filtered by a specification built from the request
    GET    /{id}   fetch one
    DELETE /{id}   delete

Read and write shapes are separate pydantic models; entities are built from the
write model and rendered through the read model.
"""

from typing import Any, Awaitable, Callable, List, Optional, Sequence, Type
from fastapi import APIRouter, Depends, Request
from fastapi.params import Depends as DependsParam
from pydantic import BaseModel, ConfigDict
from crud_core.api.dependencies import get_uow as default_get_uow
from crud_core.controller import GenericController
from crud_core.repository.specification import Specification
from crud_core.repository.unit_of_work import UnitOfWork
from crud_core.response import to_response
from crud_core.validation import ValidationResult

SpecificationFactory = Callable[[Request], Optional[Specification]]


class CrudValidators(BaseModel):
    """Optional per-operation validators; a missing one always passes."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    create: Optional[Callable[[Any], Awaitable[ValidationResult]]] = None
    update: Optional[Callable[[Any], Awaitable[ValidationResult]]] = None
    get_many: Optional[Callable[[], Awaitable[ValidationResult]]] = None
    get_one: Optional[Callable[[Any], Awaitable[ValidationResult]]] = None
    delete: Optional[Callable[[Any], Awaitable[ValidationResult]]] = None


def build_crud_router(
    *,
    key_type: Type,
    entity_type: Type[BaseModel],
    get_schema: Type[BaseModel],
    put_schema: Type[BaseModel],
    get_uow: Callable[..., UnitOfWork] = default_get_uow,
    validators: Optional[CrudValidators] = None,
    specification_factory: Optional[SpecificationFactory] = None,
    dependencies: Optional[Sequence[DependsParam]] = None,
    timeout: Optional[float] = None,
) -> APIRouter:
    """Build the CRUD router for one entity type. Mount it with a non-empty prefix."""
    validators = validators or CrudValidators()
    router = APIRouter(dependencies=list(dependencies or []))

    def get_controller(uow: UnitOfWork = Depends(get_uow)) -> GenericController:
        return GenericController(uow, key_type, entity_type)

    def to_entity(view_model: BaseModel):
        return entity_type.model_validate(view_model.model_dump())

    def to_view_model(entity) -> BaseModel:
        return get_schema.model_validate(entity, from_attributes=True)

    @router.api_route("/{id}", methods=["POST", "PUT"], response_model=get_schema)
    async def update(
        id: key_type,
        view_model: put_schema,
        controller: GenericController = Depends(get_controller),
    ):
        response = await controller.update(id, to_entity(view_model), validators.update, timeout)
        return to_response(response.map_value(to_view_model))

    @router.put("", response_model=get_schema)
    async def create(
        view_model: put_schema,
        controller: GenericController = Depends(get_controller),
    ):
        response = await controller.create(to_entity(view_model), validators.create, timeout)
        return to_response(response.map_value(to_view_model))

    @router.get("", response_model=List[get_schema])
    async def get_many(
        request: Request,
        controller: GenericController = Depends(get_controller),
    ):
        specification = specification_factory(request) if specification_factory else None
        response = await controller.get_many(specification, validators.get_many, timeout)
        return to_response(response.map_value(lambda entities: [to_view_model(e) for e in entities]))

    @router.get("/{id}", response_model=get_schema)
    async def get_one(
        id: key_type,
        controller: GenericController = Depends(get_controller),
    ):
        response = await controller.get_one(id, validators.get_one, timeout)
        return to_response(response.map_value(to_view_model))

    @router.delete("/{id}", response_model=bool)
    async def delete(
        id: key_type,
        controller: GenericController = Depends(get_controller),
    ):
        response = await controller.delete(id, validators.delete, timeout)
        return to_response(response)

    return router
