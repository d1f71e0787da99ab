"""HTTP adapters - Client for the registration API."""

from .client import HttpRegistrationGateway
from .wiring import create_registration_form

__all__ = ["HttpRegistrationGateway", "create_registration_form"]
