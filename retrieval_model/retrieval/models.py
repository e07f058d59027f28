"""Retrieval lifecycle data models.

A retrieval is always exactly one of four frozen variants. The ``state``
field is the discriminant and is pinned to a single ``RetrievalState``
member per variant, so a variant can never carry another variant's payload.
"""

from enum import IntEnum
from typing import Any, Generic, Literal, TypeVar, Union, final

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, field_validator
from pydantic.alias_generators import to_camel
from typing_extensions import TypeAliasType

T = TypeVar("T")
M = TypeVar("M")


class RetrievalState(IntEnum):
    """State of a retrieval."""

    IDLE = 0
    RETRIEVING = 1
    SUCCEEDED = 2
    ERRORED = 3


class _FrozenModel(BaseModel):
    """Immutable record with camelCase wire aliases."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ServiceError(_FrozenModel, Generic[M]):
    """Common contract for service error responses.

    Attributes:
        error_code: Service-specific error code.
        error_message: Human-readable message from the service.
        path: Field or segment path implicated by the error.
        help_uri: Link to documentation about the error.
        metadata: Caller-defined payload.
    """

    error_code: int = Field(description="Service error code")
    error_message: str = Field(description="Service error message")
    path: tuple[str, ...] | None = Field(
        default=None,
        description="Field or segment path implicated by the error",
    )
    help_uri: str | None = Field(default=None, description="Help link")
    metadata: M | None = Field(default=None, description="Caller-defined payload")


class Error(_FrozenModel):
    """Generic error record describing why a retrieval failed.

    Attributes:
        status_code: Status code of the failed request.
        service_error: Structured error body returned by the service.
        correlation_vector: Opaque trace token supplied by the caller.
    """

    status_code: int = Field(description="Request status code")
    service_error: SerializeAsAny[ServiceError] | None = Field(
        default=None,
        description="Structured service error body",
    )
    correlation_vector: str | None = Field(
        default=None,
        description="Opaque trace token",
    )


E = TypeVar("E", bound=Error)


class _Variant(_FrozenModel):
    """Shared behaviour of the retrieval variants."""

    @field_validator("state", mode="before", check_fields=False)
    @classmethod
    def _coerce_state(cls, value: Any) -> Any:
        # Accept the integer value or the symbolic name on the wire.
        if isinstance(value, str) and value.upper() in RetrievalState.__members__:
            return RetrievalState[value.upper()]
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return RetrievalState(value)
            except ValueError:
                return value
        return value


@final
class IdleRetrieval(_Variant):
    """Indicates that no data is being retrieved."""

    state: Literal[RetrievalState.IDLE] = RetrievalState.IDLE


@final
class WorkingRetrieval(_Variant):
    """Indicates that a request to retrieve data is in flight."""

    state: Literal[RetrievalState.RETRIEVING] = RetrievalState.RETRIEVING


@final
class SuccessfulRetrieval(_Variant, Generic[T]):
    """Contains a successfully retrieved value.

    Attributes:
        value: The retrieved payload, held as given.
    """

    state: Literal[RetrievalState.SUCCEEDED] = RetrievalState.SUCCEEDED
    value: T = Field(description="Retrieved payload")


@final
class RetrievalError(_Variant, Generic[E]):
    """Error result from a retrieval.

    Subclasses of ``Error`` are held and serialized with their own fields.

    Attributes:
        error: Description of the failure.
    """

    state: Literal[RetrievalState.ERRORED] = RetrievalState.ERRORED
    error: SerializeAsAny[E] = Field(description="Failure description")


Retrieval = TypeAliasType(
    "Retrieval",
    Union[
        IdleRetrieval,
        WorkingRetrieval,
        SuccessfulRetrieval[T],
        RetrievalError,
    ],
    type_params=(T,),
)
"""An asynchronous data retrieval in one of its four states."""
