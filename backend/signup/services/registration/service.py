"""
RegistrationService
===================

Process-level service that registers a new user against external providers:

- Validates the form locally; nothing remote happens when a rule fails.
- Checks that the email has no existing account.
- Creates the account, then writes the profile document keyed by its id.
- Uploads the selected image (if any) to ``images/<user_id>.jpg``.

Each step runs only after the previous one succeeded. Provider failures are
turned into a single user-facing notification and end the sequence; nothing is
rolled back.
"""

from __future__ import annotations

from signup.services._shared.base import BaseService, ServiceContext
from signup.services._shared.errors import FormValidationError, ProviderError
from signup.services._shared.ports import (
    BlobStore,
    DocumentStore,
    IdentityProvider,
    Notification,
    NotificationLevel,
    Notifier,
    StaticStoragePermission,
    StoragePermission,
)
from signup.services.registration.dto import (
    ImageHandle,
    RegistrationForm,
    RegistrationOutcome,
    RegistrationStep,
    UserProfile,
)
from signup.services.registration.validation import (
    DEFAULT_PASSWORD_MIN_LENGTH,
    validate_form,
)

EMAIL_IN_USE = "Email already registered. Please use a different email or sign in."
EMAIL_CHECK_FAILED = "Failed to check email availability."
AUTHENTICATION_FAILED = "Authentication failed."
PROFILE_SAVE_FAILED = "Error saving user data."
PROFILE_SAVED = "User data saved."
IMAGE_UPLOADED = "Image uploaded."
IMAGE_UPLOAD_FAILED = "Image upload failed."
PERMISSION_DENIED = "Permission denied. Cannot access storage."

DEFAULT_USERS_COLLECTION = "users"
DEFAULT_IMAGE_PATH = "images/{user_id}.jpg"


class RegistrationService(BaseService):
    """
    Orchestrates one registration attempt against the identity provider,
    document store and blob store.
    """

    def __init__(
        self,
        *,
        identity: IdentityProvider,
        documents: DocumentStore,
        blobs: BlobStore,
        notifier: Notifier,
        permission: StoragePermission | None = None,
        users_collection: str = DEFAULT_USERS_COLLECTION,
        image_path: str = DEFAULT_IMAGE_PATH,
        password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its collaborators.

        :param identity: Account registry adapter.
        :param documents: Profile persistence adapter.
        :param blobs: Image storage adapter.
        :param notifier: Sink for user-facing messages.
        :param permission: Storage permission; granted when omitted.
        :param users_collection: Collection receiving profile documents.
        :param image_path: Blob path template, ``{user_id}`` is substituted.
        :param password_min_length: Minimum accepted password length.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.identity = identity
        self.documents = documents
        self.blobs = blobs
        self.notifier = notifier
        self.permission = permission or StaticStoragePermission(True)
        self.users_collection = users_collection
        self.image_path = image_path
        self.password_min_length = password_min_length
        self._sent: list[Notification] = []

    # ------------------------------------------------------------------ #
    # Image selection
    # ------------------------------------------------------------------ #

    def attach_image(self, handle: ImageHandle | None) -> ImageHandle | None:
        """
        Accept a locally selected image if storage access is granted.

        A denied permission is reported to the user and the handle is dropped;
        the form itself can still be submitted.

        :param handle: Picked image, or ``None`` when the picker was dismissed.
        :returns: The handle to put on the form, or ``None``.
        :rtype: ImageHandle | None
        """
        if handle is None:
            return None
        if not self.permission.is_granted():
            self.log.warning("registration.storage_permission_denied", extra=self.log_extra())
            self.notifier.notify(Notification(PERMISSION_DENIED, NotificationLevel.ERROR))
            return None
        return handle

    def profile_image_path(self, user_id: str) -> str:
        return self.image_path.format(user_id=user_id)

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def register(self, form: RegistrationForm) -> RegistrationOutcome:
        """
        Run the registration sequence for ``form``.

        :param form: Trimmed form values (see :meth:`RegistrationForm.from_raw`).
        :type form: :class:`RegistrationForm`
        :returns: Terminal step plus every notification emitted on the way.
        :rtype: :class:`RegistrationOutcome`
        """
        self._sent = []

        try:
            validate_form(form, password_min_length=self.password_min_length)
        except FormValidationError as exc:
            self.log.info(
                "registration.rejected",
                extra=self.log_extra(step=RegistrationStep.VALIDATION_FAILED.value),
            )
            self._notify(exc.message, NotificationLevel.ERROR)
            return self._outcome(RegistrationStep.VALIDATION_FAILED)

        # 1) Email availability
        try:
            in_use = self.identity.check_email_in_use(form.email)
        except ProviderError as exc:
            self._notify(exc.describe(EMAIL_CHECK_FAILED), NotificationLevel.ERROR)
            return self._failed(RegistrationStep.EMAIL_CHECK_FAILED)
        if in_use:
            self._notify(EMAIL_IN_USE, NotificationLevel.ERROR)
            return self._failed(RegistrationStep.EMAIL_IN_USE)

        # 2) Account creation
        try:
            user_id = self.identity.create_account(form.email, form.password)
        except ProviderError as exc:
            self._notify(exc.describe(AUTHENTICATION_FAILED), NotificationLevel.ERROR)
            return self._failed(RegistrationStep.ACCOUNT_FAILED)
        self.log.info("registration.account_created", extra=self.log_extra(user_id=user_id))

        # 3) Profile document, keyed by the new account id
        profile = UserProfile.from_form(user_id, form)
        try:
            self.documents.write_document(
                self.users_collection, profile.user_id, profile.to_document()
            )
        except ProviderError as exc:
            self._notify(exc.describe(PROFILE_SAVE_FAILED), NotificationLevel.ERROR)
            return self._failed(RegistrationStep.PROFILE_FAILED, user_id=user_id)
        self._notify(PROFILE_SAVED)

        # 4) Optional image upload
        image_uploaded: bool | None = None
        if form.image is not None:
            image_uploaded = self._upload_image(user_id, form.image)

        self.log.info(
            "registration.completed",
            extra=self.log_extra(step=RegistrationStep.COMPLETED.value, user_id=user_id),
        )
        return self._outcome(
            RegistrationStep.COMPLETED, user_id=user_id, image_uploaded=image_uploaded
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _upload_image(self, user_id: str, image: ImageHandle) -> bool:
        path = self.profile_image_path(user_id)
        try:
            self.blobs.upload_file(path, image.content, image.content_type)
        except ProviderError:
            self.log.error(
                "registration.image_upload_failed",
                exc_info=True,
                extra=self.log_extra(user_id=user_id, path=path),
            )
            self._notify(IMAGE_UPLOAD_FAILED, NotificationLevel.ERROR)
            return False
        self.log.debug("registration.image_uploaded", extra=self.log_extra(path=path))
        self._notify(IMAGE_UPLOADED)
        return True

    def _notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> None:
        notification = Notification(message, level)
        self._sent.append(notification)
        self.notifier.notify(notification)

    def _failed(self, step: RegistrationStep, *, user_id: str | None = None) -> RegistrationOutcome:
        self.log.warning(
            "registration.failed",
            extra=self.log_extra(step=step.value, user_id=user_id),
        )
        return self._outcome(step, user_id=user_id)

    def _outcome(
        self,
        step: RegistrationStep,
        *,
        user_id: str | None = None,
        image_uploaded: bool | None = None,
    ) -> RegistrationOutcome:
        return RegistrationOutcome(
            step=step,
            user_id=user_id,
            image_uploaded=image_uploaded,
            notifications=tuple(self._sent),
        )
