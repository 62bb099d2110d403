"""GitLab error payload models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorPayload:
    """Error body returned by the GitLab API.

    GitLab reports failures as ``{"message": ...}`` where the message is a
    string, a list of strings, or a mapping of field name to messages. OAuth
    style failures use ``{"error": ..., "error_description": ...}`` instead.
    """

    message: str | list | dict | None = None
    error: str | None = None
    error_description: str | None = None

    # Any other members of the error object
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorPayload | None":
        """Parse a GitLab error body from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorPayload, or None if the body is not a GitLab error object
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # Empty or non-JSON bodies
            return None

        if not isinstance(data, dict):
            return None

        known_fields = {"message", "error", "error_description"}
        if not any(field in data for field in known_fields):
            return None

        extensions = {k: v for k, v in data.items() if k not in known_fields}

        return cls(
            message=data.get("message"),
            error=data.get("error"),
            error_description=data.get("error_description"),
            extensions=extensions if extensions else None,
        )

    def describe(self) -> str:
        """Render the payload as a single line of text."""
        parts = []

        if isinstance(self.message, dict):
            field_messages = []
            for field, messages in self.message.items():
                if isinstance(messages, list):
                    messages = ", ".join(str(m) for m in messages)
                field_messages.append(f"{field}: {messages}")
            if field_messages:
                parts.append("; ".join(field_messages))
        elif isinstance(self.message, list):
            if self.message:
                parts.append("; ".join(str(m) for m in self.message))
        elif self.message:
            parts.append(str(self.message))

        if self.error:
            parts.append(self.error)
        if self.error_description and self.error_description != self.error:
            parts.append(self.error_description)

        return " - ".join(parts) if parts else "Unknown API error"
