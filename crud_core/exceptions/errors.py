"""Errors raised by the CRUD layer outside of the envelope path."""


class CrudError(Exception):
    """Base class for CRUD layer errors."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RepositoryNotRegisteredError(CrudError, LookupError):
    """No repository factory is registered for the requested capability."""
    def __init__(self, capability):
        super().__init__(f"No repository registered for {capability!r}")
        self.capability = capability


class EntityNotFoundError(CrudError, LookupError):
    """An update targeted an id with no stored entity."""
    def __init__(self, model, id):
        super().__init__(f"{model.__name__} {id!r} does not exist")
        self.model = model
        self.id = id


class UnauthorizedError(CrudError):
    """The client has no access token to attach to an outbound request."""
    def __init__(self, message: str = "You are not authorized to view this content"):
        super().__init__(message)
