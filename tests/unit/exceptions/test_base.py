"""
Unit tests for the reqkit exception base class.
"""

import copy
import pickle

import pytest

from reqkit.exceptions import ReqkitError


@pytest.mark.unit
class TestReqkitError:
    def test_basic_error(self):
        error = ReqkitError("Test error")

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.error_code is None
        assert error.context == {}
        assert len(error.correlation_id) == 8

    def test_error_code_and_context(self):
        error = ReqkitError("Test error", error_code="TEST_001", context={"field": "x"})

        assert error.error_code == "TEST_001"
        assert error.context == {"field": "x"}

    def test_context_copied_on_construction(self):
        shared = {"field": "x"}
        error = ReqkitError("Test error", context=shared)

        shared["extra"] = "y"

        assert error.context == {"field": "x"}

    def test_context_property_returns_copy(self):
        error = ReqkitError("Test error", context={"field": "x"})

        error.context["extra"] = "y"

        assert error.context == {"field": "x"}

    @pytest.mark.parametrize(
        "attribute", ["message", "error_code", "context", "correlation_id", "timestamp"]
    )
    def test_attributes_read_only(self, attribute):
        error = ReqkitError("Test error")

        with pytest.raises(AttributeError):
            setattr(error, attribute, "changed")

    def test_to_dict(self):
        error = ReqkitError("Test error", error_code="TEST_002")
        result = error.to_dict()

        assert result["error_type"] == "ReqkitError"
        assert result["message"] == "Test error"
        assert result["error_code"] == "TEST_002"
        assert result["correlation_id"] == error.correlation_id
        assert result["timestamp"] == error.timestamp.isoformat()

    def test_unique_correlation_ids(self):
        assert ReqkitError("a").correlation_id != ReqkitError("b").correlation_id

    def test_pickle_keeps_identity_fields(self):
        error = ReqkitError("Test error", error_code="TEST_003", context={"k": 1})

        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is ReqkitError
        assert str(restored) == "Test error"
        assert restored.error_code == "TEST_003"
        assert restored.context == {"k": 1}
        assert restored.correlation_id == error.correlation_id
        assert restored.timestamp == error.timestamp

    def test_copy(self):
        error = ReqkitError("Test error", error_code="TEST_004")

        copied = copy.copy(error)

        assert copied.message == "Test error"
        assert copied.correlation_id == error.correlation_id
