"""Custom exceptions for credential persistence.

Example:
    ```python
    from gitlab_client_core.auth.exceptions import NotConfiguredError

    try:
        credentials = store.load()
    except NotConfiguredError as e:
        print(f"Run configure() first, nothing found at {e.path}")
    ```
"""

from pathlib import Path


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialValidationError(CredentialError):
    """Raised when a token or domain is rejected before being saved.

    Attributes:
        field: Name of the rejected input ("token" or "domain").
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotConfiguredError(CredentialError):
    """Raised when credentials are loaded before any have been saved.

    This aborts the calling operation: no placeholder credentials are ever
    synthesized.

    Attributes:
        path: The configuration file that was expected to exist.
    """

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class CredentialFileError(CredentialError):
    """Raised when the configuration file or its directory cannot be read or written.

    Attributes:
        path: The configuration file involved.
    """

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class CredentialDecodeError(CredentialFileError):
    """Raised when the configuration file exists but is structurally invalid."""

    pass
