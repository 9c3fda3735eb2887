"""Runtime schemas: pydantic models plus one generic validation gate.

Field types use pydantic's strict scalars so a wrong primitive type is
rejected rather than coerced. Undeclared keys are dropped, so a validated
value carries exactly the declared fields.
"""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, TypeAdapter, ValidationError

from .errors import SchemaValidationError, Violation

# JSON numbers: ints stay ints, fractions are allowed, booleans and strings are not
Number = StrictInt | StrictFloat
NonNegativeNumber = Annotated[StrictInt, Field(ge=0)] | Annotated[StrictFloat, Field(ge=0)]


class Schema(BaseModel):
    """Base for payload schemas (path/query/body/header parts and responses)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class EndpointParameters(BaseModel):
    """Base for an endpoint's parameter schema.

    Subclasses declare any of the parts ``path``, ``query``, ``body`` and
    ``header``. A part without a default is required. Parts that are not
    declared are rejected, so a GET cannot smuggle a body through.
    """

    model_config = ConfigDict(extra="forbid")


PARAMETER_PARTS = ("path", "query", "body", "header")


@lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


def violations_from(exc: ValidationError) -> list[Violation]:
    """Flatten a pydantic ValidationError into Violation records."""
    return [
        Violation(
            location=".".join(str(part) for part in err["loc"]),
            message=err["msg"],
            input=err.get("input"),
        )
        for err in exc.errors()
    ]


def validate(schema: Any, value: Any, error_cls: type[SchemaValidationError], **error_kwargs) -> Any:
    """Validate ``value`` against ``schema`` or raise ``error_cls``.

    ``schema`` is a model class or anything pydantic can adapt
    (``list[Todo]``, ``dict[str, bool]``...). Returns the validated value.
    """
    try:
        return _adapter(schema).validate_python(value)
    except ValidationError as exc:
        raise error_cls(violations_from(exc), **error_kwargs) from exc


def field_names(model: type[BaseModel]) -> list[str]:
    """Wire names (aliases where declared) of a model's fields."""
    return [info.alias or name for name, info in model.model_fields.items()]


def part_model(parameters: type[EndpointParameters], part: str) -> type[BaseModel] | None:
    """Return the model class declared for one parameter part, if any."""
    info = parameters.model_fields.get(part)
    if info is None:
        return None
    annotation = info.annotation
    # Optional[Model] on an optional part
    for candidate in (annotation, *getattr(annotation, "__args__", ())):
        if isinstance(candidate, type) and issubclass(candidate, BaseModel):
            return candidate
    return None


def has_required_parts(parameters: type[EndpointParameters]) -> bool:
    return any(info.is_required() for info in parameters.model_fields.values())
