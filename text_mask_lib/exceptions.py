"""
Custom exception hierarchy for the text-mask library.

All public exceptions inherit from :class:`TextMaskError`, allowing callers
to catch a single base class for any mask-related failure while still being
able to differentiate specific error conditions when needed.

Every error is raised while the mask is being configured.  Editing never
raises: characters that do not fit the pattern are dropped silently.
"""


class TextMaskError(Exception):
    """Base exception for all text-mask-specific errors."""

    pass


class ConfigurationError(TextMaskError):
    """Raised when the options passed to a text mask cannot produce a mask."""

    pass
