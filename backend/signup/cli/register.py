"""Flask CLI commands to run the registration flow from a terminal."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

import click
from flask.cli import with_appcontext

from signup.api.deps import build_registration_service
from signup.services._shared.ports import Notification, NotificationLevel, Notifier
from signup.services.registration.dto import (
    DEFAULT_IMAGE_CONTENT_TYPE,
    ImageHandle,
    RegistrationForm,
)

LOGGER = logging.getLogger(__name__)


class ClickNotifier(Notifier):
    """Echo each notification as soon as it is raised; errors go to stderr."""

    def notify(self, notification: Notification) -> None:
        is_error = notification.level is NotificationLevel.ERROR
        click.secho(notification.message, fg="red" if is_error else "green", err=is_error)


def _read_image(path: Path | None) -> ImageHandle | None:
    """Load a picked file into an :class:`ImageHandle`."""
    if path is None:
        return None
    content_type, _ = mimetypes.guess_type(path.name)
    if content_type and not content_type.startswith("image/"):
        raise click.BadParameter(f"{path.name} is not an image ({content_type})", param_hint="--image")
    return ImageHandle(
        content=path.read_bytes(),
        filename=path.name,
        content_type=content_type or DEFAULT_IMAGE_CONTENT_TYPE,
    )


@click.group("signup")
@click.option("--verbose", is_flag=True, help="Enable verbose logging for the registration flow.")
def signup_cli(verbose: bool) -> None:
    """User registration commands."""
    if verbose:
        logging.getLogger("signup").setLevel(logging.DEBUG)


@signup_cli.command("register")
@click.option("--username", default="", help="Display name stored on the profile.")
@click.option("--email", required=True, help="Sign-in email.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
@click.option("--dob", "date_of_birth", default="", help="Date of birth, as typed.")
@click.option("--gender", default="", help="Gender option.")
@click.option(
    "--image",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Profile image to upload after the profile is saved.",
)
@click.pass_context
@with_appcontext
def register_command(
    ctx: click.Context,
    username: str,
    email: str,
    password: str,
    date_of_birth: str,
    gender: str,
    image: Path | None,
) -> None:
    """Register a user and optionally upload a profile image."""
    service = build_registration_service(ClickNotifier(), channel="cli")
    handle = service.attach_image(_read_image(image))
    form = RegistrationForm.from_raw(
        username=username,
        email=email,
        password=password,
        date_of_birth=date_of_birth,
        gender=gender,
        image=handle,
    )
    outcome = service.register(form)
    LOGGER.debug("cli.register.finished", extra={"step": outcome.step.value})
    if not outcome.succeeded:
        ctx.exit(1)
    click.echo(f"user_id={outcome.user_id}")
