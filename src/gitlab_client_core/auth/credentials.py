"""Persistent credential storage for the GitLab client.

Credentials are a ``{domain, token}`` pair saved once and re-read on every
request. The configuration root is injected explicitly, or resolved from the
``GITLAB_CLIENT_CONFIG_ROOT`` environment variable (.env files included), or
defaults to the platform's per-user configuration directory.

File layout: ``<config_root>/GitLabClient/Configuration.json``

Example:
    ```python
    from gitlab_client_core.auth import ConfigurationStore

    store = ConfigurationStore()
    store.save(token="glpat-123", domain="https://gitlab.example.com")

    credentials = store.load()
    print(credentials.domain)
    ```

Security Considerations:
    - Tokens are never logged and are excluded from ``repr()``
    - Validation happens before any file is touched
    - The file is replaced atomically, never merged
"""

import json
import logging
import os
import re
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from gitlab_client_core.auth.exceptions import (
    CredentialDecodeError,
    CredentialFileError,
    CredentialValidationError,
    NotConfiguredError,
)
from gitlab_client_core.config import (
    CONFIG_FILE_NAME,
    CONFIG_ROOT_ENV_VAR,
    PRODUCT_NAME,
    SettingResolver,
    default_config_root,
)

logger = logging.getLogger(__name__)

_HOST_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"

# Visible ASCII only: the token travels as an HTTP header value
TOKEN_PATTERN = re.compile(r"^[\x21-\x7e]+$")

DOMAIN_PATTERN = re.compile(
    r"^https?://"
    rf"(?:(?:{_HOST_LABEL}\.)*{_HOST_LABEL}|\[[0-9A-Fa-f:.]+\])"
    r"(?::\d{1,5})?"
    r"(?:/[^\s?#]*)?$",
    re.IGNORECASE,
)


def is_valid_domain(domain: str) -> bool:
    """Return True if `domain` is an absolute http(s) URI with a valid host.

    An optional port and path are allowed; a query string or fragment is not,
    since the API prefix is appended to the domain.
    """
    return isinstance(domain, str) and DOMAIN_PATTERN.match(domain) is not None


def validate_domain(domain: str) -> str:
    """Return `domain` unchanged or raise CredentialValidationError."""
    if not is_valid_domain(domain):
        raise CredentialValidationError(
            f"Invalid domain {domain!r}: expected an absolute http:// or https:// URL without query or "
            "fragment, such as 'https://gitlab.example.com'",
            field="domain",
        )
    return domain


def is_valid_token(token: str) -> bool:
    """Return True if `token` is non-empty visible ASCII (no spaces or control characters)."""
    return isinstance(token, str) and TOKEN_PATTERN.match(token) is not None


def validate_token(token: str) -> str:
    """Return `token` unchanged or raise CredentialValidationError."""
    if not isinstance(token, str) or not token.strip():
        raise CredentialValidationError("Token must be a non-empty string", field="token")
    if not is_valid_token(token):
        raise CredentialValidationError(
            "Token must contain only visible ASCII characters (no spaces, line breaks or control characters)",
            field="token",
        )
    return token


@dataclass(frozen=True)
class Credentials:
    """The persisted ``{domain, token}`` pair authorizing API access."""

    domain: str
    token: str = field(repr=False)

    def to_dict(self) -> dict[str, str]:
        return {"token": self.token, "domain": self.domain}

    @classmethod
    def from_dict(cls, data: object) -> "Credentials":
        """Build credentials from decoded configuration data.

        Raises:
            ValueError: If `data` is not an object with a valid ``token``
                and ``domain``.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        missing = [key for key in ("token", "domain") if key not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")

        token = data["token"]
        domain = data["domain"]
        if not is_valid_token(token):
            raise ValueError("field 'token' must be a non-empty visible ASCII string")
        if not is_valid_domain(domain):
            raise ValueError(f"field 'domain' is not an absolute http(s) URL: {domain!r}")

        return cls(domain=domain, token=token)


class ConfigurationStore:
    """Save and load credentials from a single JSON configuration file.

    Nothing is cached: every `load()` reads the file again, so a `save()` from
    another process is picked up by the next request.

    Example:
        ```python
        # Tests redirect storage without touching the environment
        store = ConfigurationStore(config_root=tmp_path)
        ```
    """

    def __init__(
        self,
        config_root: str | Path | None = None,
        *,
        product: str = PRODUCT_NAME,
        resolver: SettingResolver | None = None,
    ):
        """Initialize the store.

        Args:
            config_root: Directory holding per-product configuration. When
                None, resolved from the GITLAB_CLIENT_CONFIG_ROOT environment
                variable, then the platform default.
            product: Subdirectory name under the configuration root.
            resolver: Setting resolver to use when `config_root` is None.
        """
        if config_root is None:
            resolver = resolver or SettingResolver()
            config_root = resolver.resolve(
                env_var_name=CONFIG_ROOT_ENV_VAR,
                default=str(default_config_root()),
            )

        root = Path(os.path.expanduser(os.path.expandvars(str(config_root))))
        self._directory = root / product
        self._path = self._directory / CONFIG_FILE_NAME

    @property
    def path(self) -> Path:
        """Location of the configuration file."""
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def save(self, token: str, domain: str) -> Credentials:
        """Validate and persist credentials, replacing any previous file.

        Args:
            token: Private token sent as the PRIVATE-TOKEN header.
            domain: Absolute base URL of the GitLab instance.

        Returns:
            The saved credentials.

        Raises:
            CredentialValidationError: If the token is empty or not visible
                ASCII, or the domain is not an absolute http(s) URL. Nothing is
                written.
            CredentialFileError: If the directory or file cannot be written.
        """
        credentials = Credentials(domain=validate_domain(domain), token=validate_token(token))

        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CredentialFileError(
                f"Cannot create configuration directory {self._directory}: {e}", path=self._path
            ) from e

        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._directory,
                prefix=f".{CONFIG_FILE_NAME}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(credentials.to_dict(), tmp, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CredentialFileError(f"Cannot write configuration file {self._path}: {e}", path=self._path) from e

        logger.debug(f"Saved credentials for {credentials.domain} to {self._path} (***)")
        return credentials

    def load(self) -> Credentials:
        """Read credentials from the configuration file.

        Raises:
            NotConfiguredError: If no configuration has been saved yet.
            CredentialFileError: If the file exists but cannot be read.
            CredentialDecodeError: If the file content is not a valid
                ``{token, domain}`` object.
        """
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise NotConfiguredError(
                f"No GitLab configuration found at {self._path}. Save a token and domain first.",
                path=self._path,
            ) from None
        except OSError as e:
            raise CredentialFileError(f"Cannot read configuration file {self._path}: {e}", path=self._path) from e

        try:
            credentials = Credentials.from_dict(json.loads(content))
        except ValueError as e:
            # json.JSONDecodeError is a ValueError too
            raise CredentialDecodeError(f"Invalid configuration file {self._path}: {e}", path=self._path) from e

        logger.debug(f"Loaded credentials for {credentials.domain} from {self._path} (***)")
        return credentials
