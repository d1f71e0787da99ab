"""
Unit tests for the registration field rules.

Tests verify:
- Required-name rules (blank and whitespace-only)
- Gmail-only and duplicate email rules, case-insensitive
- Password rule precedence (one message per value)
- Form-level aggregation
"""

import pytest

from src.domain.validation import (
    EMAIL_ALREADY_REGISTERED,
    EMAIL_NOT_GMAIL,
    EMAIL_REQUIRED,
    FIRST_NAME_REQUIRED,
    LAST_NAME_REQUIRED,
    PASSWORD_DIGIT,
    PASSWORD_LENGTH,
    PASSWORD_LOWERCASE,
    PASSWORD_REQUIRED,
    PASSWORD_SPECIAL,
    PASSWORD_UPPERCASE,
    FieldError,
    FormData,
    FormField,
    ValidationContext,
    to_field_errors,
    validate_field,
    validate_form,
)

REGISTERED = ValidationContext.from_emails(["test@gmail.com"])


class TestNameRules:
    """Tests for firstName/lastName."""

    @pytest.mark.parametrize("value", ["", " ", "   ", "\t\n"])
    def test_blank_first_name_is_required(self, value: str) -> None:
        """Empty or whitespace-only first name is rejected."""
        assert validate_field("firstName", value) == FIRST_NAME_REQUIRED

    @pytest.mark.parametrize("value", ["", "  "])
    def test_blank_last_name_is_required(self, value: str) -> None:
        """Empty or whitespace-only last name is rejected."""
        assert validate_field(FormField.LAST_NAME, value) == LAST_NAME_REQUIRED

    @pytest.mark.parametrize("value", ["John", " J ", "O'Brien", "李"])
    def test_non_blank_names_are_valid(self, value: str) -> None:
        """Any non-blank name passes."""
        assert validate_field("firstName", value) is None
        assert validate_field("lastName", value) is None


class TestEmailRules:
    """Tests for the email field."""

    def test_empty_email_is_required(self) -> None:
        assert validate_field("email", "") == EMAIL_REQUIRED

    def test_whitespace_email_is_required(self) -> None:
        assert validate_field("email", "   ") == EMAIL_REQUIRED

    @pytest.mark.parametrize(
        "value",
        [
            "john@yahoo.com",
            "john@outlook.com",
            "john@gmail.co",
            "john@gmail.com.evil.org",
            "@gmail.com",
            "jo hn@gmail.com",
            "john!@gmail.com",
            " john@gmail.com",
            "john@googlemail.com",
        ],
    )
    def test_non_gmail_rejected(self, value: str) -> None:
        """Anything not matching local@gmail.com is rejected as non-Gmail."""
        assert validate_field("email", value) == EMAIL_NOT_GMAIL

    @pytest.mark.parametrize(
        "value",
        [
            "john@gmail.com",
            "john.doe@gmail.com",
            "john+tag@gmail.com",
            "john_doe-99%x@gmail.com",
            "John@GMAIL.COM",
        ],
    )
    def test_gmail_accepted(self, value: str) -> None:
        """Gmail addresses with allowed local characters pass, any case."""
        assert validate_field("email", value) is None

    def test_registered_email_rejected(self) -> None:
        assert validate_field("email", "test@gmail.com", REGISTERED) == EMAIL_ALREADY_REGISTERED

    def test_registered_email_case_insensitive(self) -> None:
        assert validate_field("email", "TEST@Gmail.com", REGISTERED) == EMAIL_ALREADY_REGISTERED

    def test_gmail_rule_precedes_duplicate_rule(self) -> None:
        """A non-Gmail address reports the Gmail rule even if listed as registered."""
        context = ValidationContext.from_emails(["test@yahoo.com"])
        assert validate_field("email", "test@yahoo.com", context) == EMAIL_NOT_GMAIL

    def test_no_context_skips_duplicate_check(self) -> None:
        assert validate_field("email", "test@gmail.com") is None


class TestPasswordRules:
    """Tests for password rule precedence."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", PASSWORD_REQUIRED),
            ("Ab1!", PASSWORD_LENGTH),
            ("Ab1!567", PASSWORD_LENGTH),
            ("Ab1!" + "x" * 27, PASSWORD_LENGTH),
            ("ABCDEF123!", PASSWORD_LOWERCASE),
            ("password123!", PASSWORD_UPPERCASE),
            ("Password!!", PASSWORD_DIGIT),
            ("Password123", PASSWORD_SPECIAL),
            ("        ", PASSWORD_LOWERCASE),
            ("Password123!", None),
        ],
    )
    def test_first_failing_rule_wins(self, value: str, expected: str | None) -> None:
        """Exactly one message is produced, in rule order."""
        assert validate_field("password", value) == expected

    def test_length_bounds_inclusive(self) -> None:
        """8 and 30 characters are both accepted."""
        assert validate_field("password", "Abcde1!x") is None
        assert validate_field("password", "Abcde1!" + "x" * 23) is None

    def test_length_checked_before_character_classes(self) -> None:
        """A short password reports length even if it lacks every class."""
        assert validate_field("password", "aaa") == PASSWORD_LENGTH

    @pytest.mark.parametrize("special", list("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"))
    def test_every_special_character_counts(self, special: str) -> None:
        assert validate_field("password", f"Password1{special}") is None

    @pytest.mark.parametrize("other", ["~", "`", " ", "€"])
    def test_characters_outside_the_set_do_not_count(self, other: str) -> None:
        assert validate_field("password", f"Password1{other}") == PASSWORD_SPECIAL


class TestUnknownField:
    """Fields without rules."""

    def test_unknown_field_has_no_error(self) -> None:
        assert validate_field("nickname", "") is None


class TestValidateForm:
    """Tests for form-level aggregation."""

    def test_valid_form_returns_empty_mapping(self, valid_form_data: FormData) -> None:
        assert validate_form(valid_form_data) == {}

    def test_all_invalid_returns_all_four_fields(self) -> None:
        errors = validate_form(FormData())
        assert set(errors) == set(FormField)
        assert errors == {
            FormField.FIRST_NAME: FIRST_NAME_REQUIRED,
            FormField.LAST_NAME: LAST_NAME_REQUIRED,
            FormField.EMAIL: EMAIL_REQUIRED,
            FormField.PASSWORD: PASSWORD_REQUIRED,
        }

    def test_valid_fields_are_omitted(self, valid_form_data: FormData) -> None:
        valid_form_data.email = "john@yahoo.com"
        assert validate_form(valid_form_data) == {FormField.EMAIL: EMAIL_NOT_GMAIL}

    def test_context_applies_duplicate_rule(self, valid_form_data: FormData) -> None:
        valid_form_data.email = "Test@gmail.com"
        assert validate_form(valid_form_data, REGISTERED) == {
            FormField.EMAIL: EMAIL_ALREADY_REGISTERED
        }


class TestFieldErrors:
    """Tests for wire-format conversion."""

    def test_field_errors_follow_form_order(self) -> None:
        errors = {
            FormField.PASSWORD: PASSWORD_REQUIRED,
            FormField.FIRST_NAME: FIRST_NAME_REQUIRED,
        }
        assert to_field_errors(errors) == [
            FieldError("firstName", FIRST_NAME_REQUIRED),
            FieldError("password", PASSWORD_REQUIRED),
        ]


class TestFormData:
    """Tests for the form snapshot."""

    def test_payload_uses_wire_names(self, valid_form_data: FormData) -> None:
        assert valid_form_data.to_payload() == {
            "firstName": "John",
            "lastName": "Doe",
            "email": "john.doe@gmail.com",
            "password": "Password123!",
        }

    def test_get_and_set_by_field(self) -> None:
        data = FormData()
        data.set(FormField.LAST_NAME, "Doe")
        assert data.last_name == "Doe"
        assert data.get(FormField.LAST_NAME) == "Doe"
