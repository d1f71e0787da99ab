"""
Client-side wiring - builds a RegistrationForm connected to the API.
"""

import httpx

from src.config.settings import Settings, get_settings
from src.domain.form import RegistrationForm
from src.domain.validation import FormData, ValidationContext

from .client import HttpRegistrationGateway


def create_registration_form(
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
    initial: FormData | None = None,
) -> tuple[RegistrationForm, HttpRegistrationGateway]:
    """
    Create a form whose submit posts to settings.api_url.

    The caller owns the returned gateway and should aclose() it when the
    form session ends.
    """
    settings = settings or get_settings()
    gateway = HttpRegistrationGateway(
        settings.api_url,
        client=client,
        timeout=settings.request_timeout_seconds,
    )
    form = RegistrationForm(
        initial,
        gateway=gateway,
        context=ValidationContext.from_emails(settings.registered_email_hints),
    )
    return form, gateway
