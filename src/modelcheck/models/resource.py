"""Resource model validated by modelcheck.

A resource is a named node in a content tree. It carries a stable path used as
its identity, a resource type used for adaptation checks, and child resources
addressable by name.
"""

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ChildResourceNotFoundError, InvalidResourceTypeError

R = TypeVar("R", bound="BaseResource")


class BaseResource(BaseModel):
    """Base resource model.

    Subclasses restrict which resource types may be adapted to them through
    ``RESOURCE_TYPES``; an empty tuple accepts any resource type.
    """
    RESOURCE_TYPES: ClassVar[tuple[str, ...]] = ()

    name: str
    path: str
    resource_type: str = Field(alias="sling:resourceType", default="")
    title: str | None = Field(alias="jcr:title", default=None)
    description: str | None = Field(alias="jcr:description", default=None)
    properties: dict[str, Any] = Field(default_factory=dict)
    children: list["BaseResource"] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def get_child(self, child_name: str) -> "BaseResource":
        """Return the named child resource.

        Raises:
            ChildResourceNotFoundError: If no child has that name
        """
        for child in self.children:
            if child.name == child_name:
                return child
        raise ChildResourceNotFoundError(
            f"Unable to get child '{child_name}' for '{self.path}': Child not found.",
            path=self.path,
            child_name=child_name,
        )

    def get_child_as(self, child_name: str, model_type: type[R]) -> R:
        """Return the named child adapted to ``model_type``.

        Raises:
            ChildResourceNotFoundError: If no child has that name
            InvalidResourceTypeError: If the child cannot be adapted
        """
        return self.get_child(child_name).adapt_to(model_type)

    def adapt_to(self, model_type: type[R]) -> R:
        """Adapt this resource to another resource model type."""
        if not (isinstance(model_type, type) and issubclass(model_type, BaseResource)):
            raise InvalidResourceTypeError(
                f"Unable to adapt '{self.path}': {model_type!r} is not a resource model.",
                path=self.path,
                child_name=self.name,
                resource_type=self.resource_type,
            )

        allowed = model_type.RESOURCE_TYPES
        if allowed and self.resource_type not in allowed:
            raise InvalidResourceTypeError(
                f"Unable to adapt '{self.path}' to {model_type.__name__}: "
                f"resource type '{self.resource_type}' is not one of {', '.join(allowed)}.",
                path=self.path,
                child_name=self.name,
                resource_type=self.resource_type,
            )

        try:
            return model_type.model_validate(self.model_dump())
        except ValidationError as e:
            raise InvalidResourceTypeError(
                f"Unable to adapt '{self.path}' to {model_type.__name__}: {e}",
                path=self.path,
                child_name=self.name,
                resource_type=self.resource_type,
            ) from e


BaseResource.model_rebuild()
