"""Credential persistence for the GitLab client.

This module provides:
- A validated ``{domain, token}`` credential pair
- A file-backed store that re-reads credentials on every load
- The credential error taxonomy

Example:
    ```python
    from gitlab_client_core.auth import ConfigurationStore

    store = ConfigurationStore()
    store.save(token="glpat-123", domain="https://gitlab.example.com")
    ```
"""

from gitlab_client_core.auth.credentials import (
    ConfigurationStore,
    Credentials,
    is_valid_domain,
    validate_domain,
    validate_token,
)
from gitlab_client_core.auth.exceptions import (
    CredentialDecodeError,
    CredentialError,
    CredentialFileError,
    CredentialValidationError,
    NotConfiguredError,
)

__all__ = [
    "ConfigurationStore",
    "CredentialDecodeError",
    "CredentialError",
    "CredentialFileError",
    "CredentialValidationError",
    "Credentials",
    "NotConfiguredError",
    "is_valid_domain",
    "validate_domain",
    "validate_token",
]
