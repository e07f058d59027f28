"""Tests for retrieval data models."""

from typing import Any, assert_never

import pytest
from pydantic import ValidationError

from retrieval_model.retrieval import (
    IDLE_RETRIEVAL,
    WORKING_RETRIEVAL,
    Error,
    IdleRetrieval,
    Retrieval,
    RetrievalError,
    RetrievalState,
    ServiceError,
    SuccessfulRetrieval,
    WorkingRetrieval,
    error,
    success,
)


def describe(retrieval: Retrieval[Any]) -> str:
    """Exhaustive match over every variant."""
    match retrieval:
        case IdleRetrieval():
            return "idle"
        case WorkingRetrieval():
            return "retrieving"
        case SuccessfulRetrieval(value=value):
            return f"succeeded: {value!r}"
        case RetrievalError(error=err):
            return f"errored: {err.status_code}"
        case _:
            assert_never(retrieval)


class TestRetrievalState:
    """Tests for the state enumeration."""

    def test_members_in_order(self) -> None:
        """Exactly four states, in lifecycle order."""
        assert [state.name for state in RetrievalState] == [
            "IDLE",
            "RETRIEVING",
            "SUCCEEDED",
            "ERRORED",
        ]

    def test_states_are_small_integers(self) -> None:
        """States compare equal to their integer values."""
        assert RetrievalState.IDLE == 0
        assert RetrievalState.ERRORED == 3
        assert RetrievalState(2) is RetrievalState.SUCCEEDED


class TestVariants:
    """Tests for the retrieval variants."""

    def test_default_states(self) -> None:
        """Each variant carries its own state."""
        assert IdleRetrieval().state == RetrievalState.IDLE
        assert WorkingRetrieval().state == RetrievalState.RETRIEVING
        assert SuccessfulRetrieval(value=1).state == RetrievalState.SUCCEEDED
        assert RetrievalError(error=Error(status_code=500)).state == (
            RetrievalState.ERRORED
        )

    def test_foreign_state_rejected(self) -> None:
        """A variant cannot be tagged with another variant's state."""
        with pytest.raises(ValidationError):
            IdleRetrieval(state=RetrievalState.SUCCEEDED)

    def test_state_accepts_integer_and_name(self) -> None:
        """State can be given as its integer value or symbolic name."""
        assert WorkingRetrieval(state=1) == WORKING_RETRIEVAL
        assert WorkingRetrieval(state="retrieving") == WORKING_RETRIEVAL

    def test_succeeded_has_no_error(self) -> None:
        """A succeeded retrieval never exposes an error field."""
        retrieval = success(True)
        assert retrieval.value is True
        assert not hasattr(retrieval, "error")

    def test_errored_has_no_value(self) -> None:
        """An errored retrieval never exposes a value field."""
        retrieval = error(Error(status_code=404))
        assert retrieval.error.status_code == 404
        assert not hasattr(retrieval, "value")

    def test_foreign_payload_rejected(self) -> None:
        """Payload fields of other variants are rejected."""
        with pytest.raises(ValidationError):
            SuccessfulRetrieval(value=1, error=Error(status_code=500))
        with pytest.raises(ValidationError):
            IdleRetrieval(value=1)

    def test_succeeded_requires_value(self) -> None:
        """A succeeded retrieval must carry a value."""
        with pytest.raises(ValidationError):
            SuccessfulRetrieval()

    def test_variants_are_final(self) -> None:
        """Variant classes are marked final."""
        for variant in (
            IdleRetrieval,
            WorkingRetrieval,
            SuccessfulRetrieval,
            RetrievalError,
        ):
            assert getattr(variant, "__final__", False) is True

    def test_variants_are_immutable(self) -> None:
        """Variants cannot be mutated in place."""
        retrieval = success(1)
        with pytest.raises(ValidationError):
            retrieval.value = 2
        with pytest.raises(ValidationError):
            IDLE_RETRIEVAL.state = RetrievalState.RETRIEVING

    def test_structural_equality(self) -> None:
        """Variants with equal payloads are equal."""
        assert success([1, 2]) == success([1, 2])
        assert success(1) != success(2)
        assert IdleRetrieval() == IDLE_RETRIEVAL
        assert IDLE_RETRIEVAL != WORKING_RETRIEVAL

    def test_parametrized_value_is_validated(self) -> None:
        """A parametrized succeeded retrieval validates its value."""
        assert SuccessfulRetrieval[int](value=3).value == 3
        with pytest.raises(ValidationError):
            SuccessfulRetrieval[int](value="three")

    def test_exhaustive_match(self, server_error: Error) -> None:
        """Matching on variants recovers each payload."""
        assert describe(IDLE_RETRIEVAL) == "idle"
        assert describe(WORKING_RETRIEVAL) == "retrieving"
        assert describe(success("done")) == "succeeded: 'done'"
        assert describe(error(server_error)) == "errored: 500"


class TestError:
    """Tests for the error records."""

    def test_optional_fields_absent(self) -> None:
        """Optional fields default to absent."""
        err = Error(status_code=503)
        assert err.service_error is None
        assert err.correlation_vector is None

    def test_status_code_required(self) -> None:
        """Status code is required."""
        with pytest.raises(ValidationError):
            Error()

    def test_camel_case_aliases(self) -> None:
        """Records accept the camelCase wire names."""
        err = Error.model_validate(
            {
                "statusCode": 400,
                "serviceError": {"errorCode": 1, "errorMessage": "bad"},
                "correlationVector": "cv-1",
            }
        )
        assert err.status_code == 400
        assert err.service_error is not None
        assert err.service_error.error_message == "bad"
        assert err.correlation_vector == "cv-1"

    def test_service_error_fields(self, service_error: ServiceError) -> None:
        """Service error keeps every field."""
        assert service_error.error_code == 4001
        assert service_error.path == ("profile", "name")
        assert service_error.help_uri == "https://example.com/errors/4001"
        assert service_error.metadata == {"retryable": False}

    def test_service_error_optional_fields(self) -> None:
        """Service error optional fields default to absent."""
        body = ServiceError(error_code=1, error_message="bad")
        assert body.path is None
        assert body.help_uri is None
        assert body.metadata is None

    def test_empty_path_is_not_absent(self) -> None:
        """An empty path stays distinct from a missing one."""
        body = ServiceError(error_code=1, error_message="bad", path=[])
        assert body.path == ()

    def test_typed_metadata(self) -> None:
        """Metadata is validated against the parametrized type."""
        body = ServiceError[int](error_code=1, error_message="bad", metadata=7)
        assert body.metadata == 7
        with pytest.raises(ValidationError):
            ServiceError[int](error_code=1, error_message="bad", metadata="x")

    def test_records_are_immutable(self, server_error: Error) -> None:
        """Error records cannot be mutated in place."""
        with pytest.raises(ValidationError):
            server_error.status_code = 200
