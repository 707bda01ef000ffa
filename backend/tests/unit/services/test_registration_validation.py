import pytest
from signup.services._shared.errors import FormValidationError
from signup.services.registration.dto import RegistrationForm
from signup.services.registration.validation import is_valid_email, validate_form


@pytest.mark.parametrize(
    "email",
    ["a@b.com", "first.last+tag@example.co.uk", "x_y%z-1@sub.domain-1.io", "A@B.CO"],
)
def test_accepts_standard_addresses(email):
    assert is_valid_email(email) is True


@pytest.mark.parametrize(
    "email",
    ["", "bad-email", "a@b", "a@.com", "a@-b.com", "@b.com", "a@b.com extra", "a@@b.com"],
)
def test_rejects_malformed_addresses(email):
    assert is_valid_email(email) is False


def test_first_failing_rule_wins():
    form = RegistrationForm.from_raw(email="bad", password="")
    with pytest.raises(FormValidationError) as exc:
        validate_form(form)
    assert exc.value.field == "email"
    assert str(exc.value) == "Invalid email address"


def test_password_boundary():
    validate_form(RegistrationForm.from_raw(email="a@b.com", password="123456"))
    with pytest.raises(FormValidationError) as exc:
        validate_form(RegistrationForm.from_raw(email="a@b.com", password="12345"))
    assert exc.value.message == "Password must be at least 6 characters"


def test_configurable_minimum_length():
    form = RegistrationForm.from_raw(email="a@b.com", password="secret1")
    with pytest.raises(FormValidationError) as exc:
        validate_form(form, password_min_length=8)
    assert exc.value.message == "Password must be at least 8 characters"


def test_password_is_trimmed_before_checks():
    form = RegistrationForm.from_raw(email="a@b.com", password="      ")
    with pytest.raises(FormValidationError) as exc:
        validate_form(form)
    assert exc.value.message == "Password cannot be empty"
