"""
Exceptions raised by the mailing list store.

Storage request failures are not wrapped: botocore's ClientError and
BotoCoreError reach the caller unchanged.
"""


class MailingListError(Exception):
    """Base class for mailing list store errors."""


class StoreConfigurationError(MailingListError):
    """AWS credentials, profile or region could not be resolved."""


class SubscriptionEncodeError(MailingListError):
    """A subscription could not be encoded into a table item."""


class SubscriptionDecodeError(MailingListError):
    """A table item could not be decoded into a subscription."""
