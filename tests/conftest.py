"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

from retrieval_model.config import get_settings
from retrieval_model.retrieval import Error, ServiceError


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def service_error() -> ServiceError:
    """Service error body with every optional field populated.

    Returns:
        ServiceError for a rejected field.
    """
    return ServiceError(
        error_code=4001,
        error_message="Name is required",
        path=("profile", "name"),
        help_uri="https://example.com/errors/4001",
        metadata={"retryable": False},
    )


@pytest.fixture
def server_error(service_error: ServiceError) -> Error:
    """Error record as an upstream service failure.

    Returns:
        Error with a service body and correlation vector.
    """
    return Error(
        status_code=500,
        service_error=service_error,
        correlation_vector="cv-1234.1",
    )
