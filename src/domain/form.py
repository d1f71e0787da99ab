"""
Registration form state machine.

Tracks field values, touched flags, per-field errors and an overall
FormState across edit/blur/submit events.

Form States
===========

- IDLE: nothing evaluated yet, or new input after a success
- WARNING: a blur produced an error and no submit has happened since
- ERROR: a submit failed local validation, was rejected by the server,
  or could not reach the server
- SUCCESS: the last submit passed validation and was accepted

Transitions:
    edit   SUCCESS -> IDLE (any edit, regardless of validity)
    blur   any -> WARNING  (when the blurred field has an error)
    submit any -> ERROR    (local errors, server rejection, transport failure)
    submit any -> SUCCESS  (valid and accepted)

No state is terminal. Touched flags only ever go from False to True.
"""

import logging
from collections.abc import Mapping
from enum import Enum

from .exceptions import GatewayUnavailable
from .ports import RegistrationGateway
from .validation import FormData, FormField, ValidationContext, validate_field, validate_form

logger = logging.getLogger(__name__)

CONNECTIVITY_ERROR = "Unable to connect to the server. Please try again."


class FormState(str, Enum):
    """Overall form status driving the banner and submit button."""

    IDLE = "idle"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


class RegistrationForm:
    """
    Stateful controller for one form-interaction session.

    Events are plain method calls; callers serialize them. submit() is the
    only suspending operation.
    """

    def __init__(
        self,
        initial: FormData | None = None,
        *,
        gateway: RegistrationGateway | None = None,
        context: ValidationContext | None = None,
        connectivity_field: FormField = FormField.EMAIL,
    ) -> None:
        """
        Args:
            initial: Starting field values (empty strings by default)
            gateway: Submit gateway; None validates locally only
            context: Client-side duplicate hint list for the email rule
            connectivity_field: Field that carries the transport failure message
        """
        self._initial = initial or FormData()
        self._gateway = gateway
        self._context = context
        self._connectivity_field = connectivity_field
        self.reset()

    def reset(self) -> None:
        """Return to the initial values with no errors, touches or state."""
        self.form_data = FormData(**vars(self._initial))
        self.errors: dict[FormField, str] = {}
        self.touched: dict[FormField, bool] = {}
        self.state = FormState.IDLE
        self.submitting = False
        self.message: str | None = None

    def edit(self, name: FormField | str, value: str) -> None:
        """Handle a value change."""
        name = FormField(name)
        self.form_data.set(name, value)

        if self.touched.get(name):
            self._set_error(name, validate_field(name, value, self._context))

        if self.state is FormState.SUCCESS:
            self._transition(FormState.IDLE)
            self.message = None

    def blur(self, name: FormField | str, value: str | None = None) -> None:
        """
        Handle a field losing focus.

        Only the blurred field is checked; one error is enough for WARNING.
        """
        name = FormField(name)
        if value is None:
            value = self.form_data.get(name)
        else:
            self.form_data.set(name, value)

        self.touched[name] = True
        error = validate_field(name, value, self._context)
        self._set_error(name, error)

        if error:
            self._transition(FormState.WARNING)

    async def submit(self) -> FormState:
        """
        Validate everything and, if valid, send the form through the gateway.

        A submit while another is in flight is ignored.

        Returns:
            The resulting form state
        """
        if self.submitting:
            logger.debug("Submit ignored: request already in flight")
            return self.state

        for name in FormField:
            self.touched[name] = True

        errors = validate_form(self.form_data, self._context)
        self.errors = errors
        if errors:
            self._transition(FormState.ERROR)
            return self.state

        if self._gateway is None:
            self._succeed(None)
            return self.state

        self.submitting = True
        try:
            result = await self._gateway.register(self.form_data)
        except GatewayUnavailable as e:
            logger.warning("Registration request failed: %s", e)
            self.errors[self._connectivity_field] = CONNECTIVITY_ERROR
            self.message = CONNECTIVITY_ERROR
            self._transition(FormState.ERROR)
        else:
            if result.accepted:
                self._succeed(result.message)
            else:
                self._merge_server_errors({e.field: e.message for e in result.errors})
                self.message = result.message
                self._transition(FormState.ERROR)
        finally:
            self.submitting = False

        return self.state

    @property
    def can_submit(self) -> bool:
        return not self.submitting and self.state is not FormState.SUCCESS

    def is_invalid(self, name: FormField | str) -> bool:
        """A field is shown as invalid only once touched and erroring."""
        name = FormField(name)
        return bool(self.touched.get(name) and self.errors.get(name))

    @staticmethod
    def error_id(name: FormField | str) -> str:
        return f"{FormField(name).value}-error"

    def field_attributes(self, name: FormField | str) -> dict[str, str]:
        """Accessibility attributes for rendering the field's input element."""
        name = FormField(name)
        attributes = {"id": name.value, "name": name.value}
        if self.is_invalid(name):
            attributes["aria-invalid"] = "true"
            attributes["aria-describedby"] = self.error_id(name)
        return attributes

    def _set_error(self, name: FormField, error: str | None) -> None:
        if error:
            self.errors[name] = error
        else:
            self.errors.pop(name, None)

    def _merge_server_errors(self, server_errors: Mapping[str, str]) -> None:
        for field_name, message in server_errors.items():
            try:
                name = FormField(field_name)
            except ValueError:
                logger.debug("Ignoring server error for unknown field %r", field_name)
                continue
            self.errors[name] = message

    def _succeed(self, message: str | None) -> None:
        self.errors = {}
        self.message = message
        self._transition(FormState.SUCCESS)

    def _transition(self, state: FormState) -> None:
        if state is not self.state:
            logger.debug("Form state %s -> %s", self.state.value, state.value)
        self.state = state
