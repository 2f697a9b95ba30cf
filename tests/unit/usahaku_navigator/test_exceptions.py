"""Tests for custom exception classes."""

from usahaku_navigator.exceptions import (
    AuthProviderException,
    ConfigurationException,
    ErrorCode,
    LearningStoreAPIException,
    LearningStoreException,
    NavigatorException,
)


class TestErrorCode:
    """Tests for the error code catalogue."""

    def test_error_code_values(self):
        assert {code.value for code in ErrorCode} == {
            "NAVIGATOR_ERROR",
            "INTERNAL_ERROR",
            "AUTH_PROVIDER_ERROR",
            "LEARNING_STORE_ERROR",
            "LEARNING_STORE_API_ERROR",
            "CONFIG_ERROR",
            "CONFIG_MISSING",
        }


class TestNavigatorException:
    """Tests for NavigatorException."""

    def test_navigator_exception_basic(self):
        exc = NavigatorException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.NAVIGATOR_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_navigator_exception_with_details(self):
        exc = NavigatorException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestSubclasses:
    """Tests for the specialised exceptions."""

    def test_auth_provider_exception_defaults(self):
        exc = AuthProviderException()

        assert isinstance(exc, NavigatorException)
        assert exc.code == ErrorCode.AUTH_PROVIDER_ERROR
        assert exc.status_code == 502

    def test_learning_store_exception_defaults(self):
        exc = LearningStoreException("store error")

        assert exc.code == ErrorCode.LEARNING_STORE_ERROR
        assert exc.status_code == 500

    def test_learning_store_api_exception(self):
        exc = LearningStoreAPIException("HTTP 500", details={"table": "learning_audiobooks"})

        assert isinstance(exc, LearningStoreException)
        assert exc.code == ErrorCode.LEARNING_STORE_API_ERROR
        assert exc.status_code == 502
        assert exc.details["table"] == "learning_audiobooks"

    def test_configuration_exception(self):
        exc = ConfigurationException("missing", code=ErrorCode.CONFIG_MISSING)

        assert exc.code == ErrorCode.CONFIG_MISSING
        assert exc.status_code == 500
