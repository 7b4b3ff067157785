"""Base entity class for named records."""

from pydantic import BaseModel, ConfigDict, Field


def field_repr(model: BaseModel) -> str:
    """Return "ClassName(field=value, ...)" for a model.

    Values are taken as objects rather than dumped to dicts, so nested
    models such as a Device's sensors print with their own repr.
    """
    fields = []
    for field_name in type(model).model_fields:
        field_value = getattr(model, field_name)
        if isinstance(field_value, str):
            fields.append(f"{field_name}='{field_value}'")
        else:
            fields.append(f"{field_name}={field_value!r}")

    return f"{model.__class__.__name__}({', '.join(fields)})"


class Entity(BaseModel):
    """Base class for all named records produced by a parse.

    Entities are frozen once built so a Result can be handed to
    consumers without fear of mutation. Equality is structural: two
    entities with the same fields compare equal, which is what makes
    re-parsing the same text produce an equal Result. All entities can
    be serialized to/from JSON while preserving all fields.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(
        min_length=1, description="Name as printed by the sensors tool"
    )

    def __repr__(self) -> str:
        """Return string representation showing all fields."""
        return field_repr(self)
