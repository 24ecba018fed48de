"""Tests for the password buffer."""

from mongofactory.secret import SecretBuffer


class TestSecretBuffer:
    def test_default_empty(self) -> None:
        secret = SecretBuffer()
        assert len(secret) == 0
        assert not secret
        assert secret.reveal() == ""

    def test_reveal(self) -> None:
        assert SecretBuffer("some_password").reveal() == "some_password"

    def test_bytes(self) -> None:
        assert SecretBuffer(b"abc") == "abc"

    def test_clear_zeroes_contents(self) -> None:
        secret = SecretBuffer("some_password")
        data = secret._data
        secret.clear()
        assert not secret
        assert secret.reveal() == ""
        assert data is secret._data

    def test_equality(self) -> None:
        assert SecretBuffer("x") == SecretBuffer("x")
        assert SecretBuffer("x") == "x"
        assert SecretBuffer("x") != SecretBuffer("y")
        assert SecretBuffer("x") != 1

    def test_repr_masks_secret(self) -> None:
        assert "some_password" not in repr(SecretBuffer("some_password"))
        assert repr(SecretBuffer()) == "SecretBuffer('')"
