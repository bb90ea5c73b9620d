# Error Handling Unit Tests
"""
Unit tests for the exception hierarchy.
"""

from __future__ import annotations

import logging

import pytest

from wordgraph.errors import (
    ConfigurationError,
    EmptyInputError,
    ErrorContext,
    ErrorSeverity,
    GraphError,
    InputError,
    OutputError,
    ValidationError,
    WordGraphError,
)


class TestErrorSeverity:
    """ErrorSeverityのテスト"""

    def test_to_logging_level(self):
        assert ErrorSeverity.WARNING.to_logging_level() == logging.WARNING
        assert ErrorSeverity.ERROR.to_logging_level() == logging.ERROR
        assert ErrorSeverity.CRITICAL.to_logging_level() == logging.CRITICAL


class TestErrorContext:
    """ErrorContextのテスト"""

    def test_defaults(self):
        context = ErrorContext()

        assert context.component is None
        assert context.operation is None
        assert context.details == {}


class TestWordGraphError:
    """WordGraphErrorのテスト"""

    def test_basic(self):
        error = WordGraphError("Something failed")

        assert error.message == "Something failed"
        assert error.code == "WORDGRAPH_ERROR"
        assert error.severity == ErrorSeverity.ERROR
        assert str(error) == "[WORDGRAPH_ERROR] Something failed"

    def test_str_with_context(self):
        error = WordGraphError(
            "Build failed",
            code="BUILD_FAILED",
            component="builder",
            operation="build",
        )

        assert str(error) == "[BUILD_FAILED] Build failed (builder.build)"

    def test_str_with_cause(self):
        cause = OSError("disk gone")

        error = InputError("Failed to read input file: a.txt", path="a.txt", cause=cause)

        assert error.cause is cause
        assert str(error) == "[INPUT_ERROR] Failed to read input file: a.txt: disk gone"
        assert error.context.details == {"path": "a.txt"}

    def test_details(self):
        error = GraphError("Graph is frozen", component="graph", source="x")

        assert error.context.component == "graph"
        assert error.context.details == {"source": "x"}


class TestSpecificErrors:
    """個別例外のテスト"""

    @pytest.mark.parametrize(
        "error_class, code",
        [
            (ConfigurationError, "CONFIG_ERROR"),
            (InputError, "INPUT_ERROR"),
            (EmptyInputError, "EMPTY_INPUT"),
            (OutputError, "OUTPUT_ERROR"),
            (GraphError, "GRAPH_ERROR"),
            (ValidationError, "VALIDATION_ERROR"),
        ],
    )
    def test_codes(self, error_class, code):
        error = error_class("message")

        assert isinstance(error, WordGraphError)
        assert error.code == code

    def test_empty_input_is_input_error(self):
        """空入力は入力エラーの一種で重要度は警告"""
        error = EmptyInputError("no pairs", path="empty.txt")

        assert isinstance(error, InputError)
        assert error.severity == ErrorSeverity.WARNING
        assert error.context.details["path"] == "empty.txt"

    def test_output_error_keeps_walk(self):
        error = OutputError("cannot write", path="out/walk.txt")

        assert error.walk is None
        assert error.context.details == {"path": "out/walk.txt"}

    def test_validation_error_field(self):
        error = ValidationError("bad value", field="max_steps", value=-1)

        assert error.context.details == {"field": "max_steps", "value": "-1"}

    def test_catch_as_base(self):
        with pytest.raises(WordGraphError):
            raise EmptyInputError("empty")
