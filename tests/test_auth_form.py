"""Tests for the sign-in form state."""
import pytest

from src.services.auth_form import LoginForm


@pytest.mark.parametrize(
    "form, expected",
    [
        (LoginForm(email="a@b.co", password="secret"), True),
        (LoginForm(email="  ", password="secret"), False),
        (LoginForm(email="a@b.co", password="abc"), False),
        (LoginForm(mode="register", email="a@b.co", password="abcd"), False),
        (LoginForm(mode="register", email="a@b.co", password="abcd", full_name="Sita"), True),
        (LoginForm(email="a@b.co", password="secret", loading=True), False),
    ],
)
def test_can_submit(form, expected):
    assert form.can_submit is expected


def test_switch_mode():
    form = LoginForm()
    form.switch_mode("register")
    assert form.mode == "register"
    with pytest.raises(ValueError):
        form.switch_mode("reset")
