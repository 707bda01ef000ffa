"""Integration tests for the ``flask signup register`` command."""

from __future__ import annotations


def test_register_command_creates_user(cli_runner, backends) -> None:
    result = cli_runner.invoke(
        args=["signup", "register", "--email", "a@b.com", "--password", "secret1", "--username", "alice"]
    )

    assert result.exit_code == 0, result.output
    assert "User data saved." in result.output
    user_id = backends.identity.user_id_for("a@b.com")
    assert f"user_id={user_id}" in result.output
    assert backends.documents.get("users", user_id)["username"] == "alice"


def test_register_command_uploads_image(cli_runner, backends, tmp_path) -> None:
    picture = tmp_path / "me.png"
    picture.write_bytes(b"\x89PNG fake")

    result = cli_runner.invoke(
        args=["signup", "register", "--email", "a@b.com", "--password", "secret1", "--image", str(picture)]
    )

    assert result.exit_code == 0, result.output
    assert "Image uploaded." in result.output
    user_id = backends.identity.user_id_for("a@b.com")
    assert backends.blobs.get(f"images/{user_id}.jpg") == b"\x89PNG fake"


def test_register_command_prompts_for_password(cli_runner, backends) -> None:
    result = cli_runner.invoke(args=["signup", "register", "--email", "a@b.com"], input="secret1\n")

    assert result.exit_code == 0, result.output
    assert backends.identity.user_id_for("a@b.com") is not None


def test_register_command_fails_on_invalid_email(cli_runner, backends) -> None:
    result = cli_runner.invoke(
        args=["signup", "register", "--email", "bad-email", "--password", "secret1"]
    )

    assert result.exit_code == 1
    assert "Invalid email address" in result.output
    assert backends.identity.user_id_for("bad-email") is None


def test_register_command_rejects_non_image(cli_runner, tmp_path) -> None:
    document = tmp_path / "notes.txt"
    document.write_text("hello")

    result = cli_runner.invoke(
        args=["signup", "register", "--email", "a@b.com", "--password", "secret1", "--image", str(document)]
    )

    assert result.exit_code == 2
    assert "not an image" in result.output
