"""Tests for RuleError and the exception helpers."""

import copy
import pickle

import pytest

from strvalidate import RuleError, ValidationFailed, email, integer, raise_error, raise_first


class TestRuleError:
    """Tests for the RuleError taxonomy."""

    @pytest.mark.parametrize(
        "member,message",
        [
            (RuleError.NOT_EMAIL, "Expecting an e-mail."),
            (RuleError.NOT_URL, "Expecting an URL."),
            (RuleError.NOT_FLOAT, "Expecting a floating point number (0-9 and point)."),
            (RuleError.NOT_INTEGER, "Expecting an integer number."),
            (RuleError.NOT_ALPHANUMERIC, "Expecting alphanumeric."),
            (RuleError.NOT_ALPHABETIC, "Expecting an alphabetic string."),
            (RuleError.IS_EMPTY, "Expecting a non empty value."),
            (RuleError.EMPTY, "Expecting an empty value."),
        ],
    )
    def test_messages(self, member, message):
        assert member.message == message
        assert str(member) == message

    def test_codes_are_unique(self):
        codes = [member.code for member in RuleError]
        assert len(codes) == len(set(codes)) == 8
        assert all(2100 <= code < 2200 for code in codes)

    def test_to_dict(self):
        assert RuleError.NOT_EMAIL.to_dict() == {
            "code": "NOT_EMAIL",
            "code_num": 2100,
            "constraint": "email",
            "message": "Expecting an e-mail.",
        }


class TestValidationFailed:
    """Tests for ValidationFailed and raise helpers."""

    def test_wraps_errors(self):
        exc = ValidationFailed(RuleError.NOT_EMAIL, RuleError.IS_EMPTY)
        assert exc.error is RuleError.NOT_EMAIL
        assert exc.errors == (RuleError.NOT_EMAIL, RuleError.IS_EMPTY)
        assert str(exc) == "Expecting an e-mail.; Expecting a non empty value."

    def test_requires_an_error(self):
        with pytest.raises(ValueError):
            ValidationFailed()

    def test_to_dict(self):
        data = ValidationFailed(RuleError.NOT_URL).to_dict()
        assert data["error"]["type"] == "validation_error"
        assert data["error"]["errors"] == [RuleError.NOT_URL.to_dict()]

    def test_raise_error(self):
        raise_error(None)
        with pytest.raises(ValidationFailed) as exc_info:
            raise_error(email("nope"))
        assert exc_info.value.error is RuleError.NOT_EMAIL

    def test_raise_first(self):
        raise_first(None, None)
        with pytest.raises(ValidationFailed) as exc_info:
            raise_first(email("user@example.com"), integer("x"), email("nope"))
        assert exc_info.value.error is RuleError.NOT_INTEGER

    def test_pickle_round_trip(self):
        exc = ValidationFailed(RuleError.NOT_EMAIL, RuleError.IS_EMPTY)
        restored = pickle.loads(pickle.dumps(exc))
        assert restored.errors == (RuleError.NOT_EMAIL, RuleError.IS_EMPTY)
        assert restored.error is RuleError.NOT_EMAIL
        assert str(restored) == str(exc)

    def test_copy(self):
        clone = copy.copy(ValidationFailed(RuleError.NOT_URL))
        assert clone.errors == (RuleError.NOT_URL,)
        assert str(clone) == "Expecting an URL."
