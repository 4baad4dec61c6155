"""Tests for error_handler and custom exceptions."""

from __future__ import annotations

from pathlib import Path

import pytest

from filament_scaffold.scaffold.errors import (
    CollisionError,
    ConfigurationError,
    ScaffoldError,
    ValidationError,
    error_handler,
)


class TestExceptionHierarchy:
    def test_base_error(self):
        exc = ScaffoldError("test")
        assert str(exc) == "test"
        assert exc.exit_code == 1

    def test_collision_error(self):
        exc = CollisionError("app/Filament/Resources/Invoices/InvoiceResource.php")
        assert isinstance(exc, ScaffoldError)
        assert exc.exit_code == 5
        assert exc.path == Path("app/Filament/Resources/Invoices/InvoiceResource.php")
        assert "InvoiceResource.php" in str(exc)
        assert "--force" in str(exc)

    def test_config_error(self):
        exc = ConfigurationError("bad config")
        assert isinstance(exc, ScaffoldError)
        assert exc.exit_code == 6

    def test_validation_error(self):
        exc = ValidationError("bad name")
        assert isinstance(exc, ScaffoldError)
        assert exc.exit_code == 7
        assert str(exc) == "bad name"

    def test_validation_error_default_message(self):
        assert str(ValidationError()) == "Validation error"


class TestErrorHandler:
    def test_passes_through_on_success(self):
        @error_handler
        def ok():
            return 42

        assert ok() == 42

    @pytest.mark.parametrize(
        ("exc", "code"),
        [
            (ScaffoldError("boom"), 1),
            (CollisionError("a/B.php"), 5),
            (ConfigurationError("bad"), 6),
            (ValidationError("bad"), 7),
            (ValueError("bad"), 1),
        ],
    )
    def test_maps_exit_codes(self, exc: Exception, code: int):
        @error_handler
        def fail():
            raise exc

        with pytest.raises(SystemExit) as exc_info:
            fail()
        assert exc_info.value.code == code

    def test_prints_message_to_stderr(self, capsys):
        @error_handler
        def fail():
            raise CollisionError("app/Filament/Resources/Owners/OwnerResource.php")

        with pytest.raises(SystemExit):
            fail()
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "OwnerResource.php" in err

    def test_other_exceptions_propagate(self):
        @error_handler
        def fail():
            raise KeyError("x")

        with pytest.raises(KeyError):
            fail()
