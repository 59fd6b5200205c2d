"""Tests for public API exports in __init__.py."""


def test_primary_api_export():
    """ResponseTimeMiddleware is exported from root package."""
    from response_time_middleware import ResponseTimeMiddleware

    assert callable(ResponseTimeMiddleware())


def test_zero_argument_construction():
    """The middleware has exactly one construction form: no arguments."""
    import pytest

    from response_time_middleware import ResponseTimeMiddleware

    with pytest.raises(TypeError):
        ResponseTimeMiddleware("X-Other-Header")  # type: ignore[call-arg]


def test_header_constants():
    from response_time_middleware import HEADER, REQUEST_TIME_FLOAT

    assert HEADER == "X-Response-Time"
    assert REQUEST_TIME_FLOAT == "REQUEST_TIME_FLOAT"


def test_registration_exports():
    from response_time_middleware import ConfigProvider, ResponseTimeMiddlewareFactory

    assert ConfigProvider is not None
    assert ResponseTimeMiddlewareFactory is not None


def test_exceptions_exported():
    from response_time_middleware import (
        MiddlewareValidationError,
        ResponseTimeMiddlewareError,
    )

    assert issubclass(MiddlewareValidationError, ResponseTimeMiddlewareError)


def test_fastapi_installer_import_path():
    """add_response_time_middleware is the same object from root and adapter."""
    from response_time_middleware import add_response_time_middleware
    from response_time_middleware.fastapi import (
        add_response_time_middleware as adapter_installer,
    )

    assert add_response_time_middleware is adapter_installer


def test_all_contains_exports():
    import response_time_middleware

    for name in (
        "ResponseTimeMiddleware",
        "format_response_time",
        "HEADER",
        "REQUEST_TIME_FLOAT",
        "RequestContext",
        "add_response_time_middleware",
        "build_middleware_chain",
        "run_pipeline",
        "ConfigProvider",
        "ResponseTimeMiddlewareFactory",
        "MiddlewareValidationError",
        "ResponseTimeMiddlewareError",
    ):
        assert name in response_time_middleware.__all__
        assert hasattr(response_time_middleware, name)


def test_version_format():
    """Verify version follows semantic versioning format."""
    import response_time_middleware

    parts = response_time_middleware.__version__.split(".")
    assert len(parts) >= 3, "Version should have at least major.minor.patch"
    assert all(part.isdigit() for part in parts[:2])
