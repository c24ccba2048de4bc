"""Validation of messages against Discord's limits."""

from webhook_client.validation.checker import check_compatibility, validate
from webhook_client.validation.context import ValidationContext
from webhook_client.validation.interval import Interval, Limit

__all__ = ["Interval", "Limit", "ValidationContext", "check_compatibility", "validate"]
