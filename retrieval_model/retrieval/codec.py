"""Wire codec for retrievals.

Retrievals travel as JSON objects shaped the way the upstream services
speak them: camelCase keys, ``state`` as its integer value, and absent
optional fields left out.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Annotated, Any, Union

from pydantic import BaseModel, Discriminator, Tag, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from retrieval_model.exceptions import ErrorCode, RetrievalValidationError
from retrieval_model.logging_config import get_logger
from retrieval_model.retrieval.models import (
    Error,
    IdleRetrieval,
    Retrieval,
    RetrievalError,
    RetrievalState,
    SuccessfulRetrieval,
    WorkingRetrieval,
)

logger = get_logger(__name__)

_UNKNOWN_STATE = "unknown_state"


def _state_tag(data: Any) -> str | None:
    """Map a raw or validated retrieval to the name of its variant tag."""
    if isinstance(data, BaseModel):
        raw = getattr(data, "state", None)
    elif isinstance(data, Mapping):
        raw = data.get("state")
    else:
        return None

    if isinstance(raw, str):
        name = raw.upper()
        return name if name in RetrievalState.__members__ else None
    if isinstance(raw, int) and not isinstance(raw, bool):
        try:
            return RetrievalState(raw).name
        except ValueError:
            return None
    return None


@lru_cache
def _adapter(value_type: Any, error_type: type[Error]) -> TypeAdapter[Any]:
    return TypeAdapter(
        Annotated[
            Union[
                Annotated[IdleRetrieval, Tag(RetrievalState.IDLE.name)],
                Annotated[WorkingRetrieval, Tag(RetrievalState.RETRIEVING.name)],
                Annotated[
                    SuccessfulRetrieval[value_type],
                    Tag(RetrievalState.SUCCEEDED.name),
                ],
                Annotated[
                    RetrievalError[error_type],
                    Tag(RetrievalState.ERRORED.name),
                ],
            ],
            Discriminator(
                _state_tag,
                custom_error_type=_UNKNOWN_STATE,
                custom_error_message="Unrecognized retrieval state",
            ),
        ]
    )


def _dump_value(value: Any) -> Any:
    # A bare ``None`` value is kept; absent model fields are left out.
    if isinstance(value, BaseModel):
        return value.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            serialize_as_any=True,
        )
    return to_jsonable_python(value, by_alias=True)


def dump_retrieval(retrieval: Retrieval[Any]) -> dict[str, Any]:
    """Serialize a retrieval to a JSON-compatible dictionary.

    Args:
        retrieval: Retrieval to serialize.

    Returns:
        Dictionary with camelCase keys and an integer ``state``.

    Raises:
        RetrievalValidationError: If the payload cannot be represented
            as JSON.
    """
    try:
        if isinstance(retrieval, SuccessfulRetrieval):
            return {
                "state": int(retrieval.state),
                "value": _dump_value(retrieval.value),
            }

        data = retrieval.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
        )
    except PydanticSerializationError as e:
        logger.warning(
            f"Could not serialize retrieval: {e}",
            extra={"error_code": ErrorCode.PAYLOAD_MISMATCH.value},
        )
        raise RetrievalValidationError(
            f"Retrieval payload is not serializable: {e}",
            code=ErrorCode.PAYLOAD_MISMATCH,
            details={"state": retrieval.state.name},
        ) from e

    data["state"] = int(retrieval.state)
    return data


def parse_retrieval(
    data: Mapping[str, Any] | str | bytes,
    value_type: Any = Any,
    error_type: type[Error] = Error,
) -> Retrieval[Any]:
    """Validate a serialized retrieval into its variant.

    Args:
        data: Mapping, or JSON text, holding a serialized retrieval.
        value_type: Type the ``value`` of a succeeded retrieval must match.
        error_type: ``Error`` subclass the ``error`` of an errored retrieval
            is validated into.

    Returns:
        The variant selected by the payload's ``state``.

    Raises:
        RetrievalValidationError: If the state is unknown or the payload
            does not match the shape of its state.
    """
    adapter = _adapter(value_type, error_type)
    try:
        if isinstance(data, (str, bytes)):
            return adapter.validate_json(data)
        return adapter.validate_python(data)
    except ValidationError as e:
        error_types = {err["type"] for err in e.errors()}
        if _UNKNOWN_STATE in error_types:
            code = ErrorCode.UNKNOWN_STATE
        elif "json_invalid" in error_types:
            code = ErrorCode.VALIDATION_ERROR
        else:
            code = ErrorCode.PAYLOAD_MISMATCH

        logger.warning(
            f"Rejected retrieval payload: {e.error_count()} error(s)",
            extra={"error_code": code.value},
        )
        raise RetrievalValidationError(
            f"Invalid retrieval payload: {e.error_count()} error(s)",
            code=code,
            details={
                "errors": e.errors(
                    include_url=False,
                    include_context=False,
                    include_input=False,
                )
            },
        ) from e
