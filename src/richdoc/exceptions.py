"""Custom exceptions for richdoc."""


class RichdocError(Exception):
    """Base exception for richdoc operations."""


class ParseError(RichdocError):
    """Payload is not a well-formed document."""


class DocumentTooDeepError(ParseError):
    """Document nesting exceeds the configured depth limit."""


class PayloadTooLargeError(ParseError):
    """Payload exceeds the configured size limit."""
