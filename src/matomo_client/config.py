"""
Client configuration.
"""

from __future__ import annotations

import os
import typing as t

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

ResponseFormat = t.Literal["json", "xml", "csv", "tsv", "html", "rss", "original"]

DEFAULT_TIMEOUT_SECONDS = 30.0
ENV_PREFIX = "MATOMO_"


class ClientOptions(BaseModel):
    """
    Immutable connection settings shared by the transport and every module.

    Attributes
    ----------
    url : str
        Base URL of the Matomo instance, e.g. ``https://example.org/matomo``.
    token_auth : str | None
        API authentication token.
    id_site : int | str | None
        Default site identifier injected when a call omits ``idSite``.
    format : ResponseFormat
        Response format requested from the API.
    language : str | None
        Default language injected when a call omits ``language``.
    timeout : float
        Request timeout in seconds.
    security_mode : bool
        Send parameters in a POST body instead of the query string.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    token_auth: str | None = None
    id_site: int | str | None = None
    format: ResponseFormat = "json"
    language: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    security_mode: bool = True

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped:
            raise ValueError("Matomo URL cannot be empty")
        return stripped

    @property
    def endpoint(self) -> str:
        """API entry point URL."""
        return f"{self.url}/index.php"

    @classmethod
    def from_env(cls, **overrides: t.Any) -> "ClientOptions":
        """
        Build options from ``MATOMO_*`` environment variables.

        A ``.env`` file in the working directory is loaded first without
        overriding variables that are already set.

        Parameters
        ----------
        **overrides : typing.Any
            Explicit values taking precedence over the environment.

        Returns
        -------
        ClientOptions
            Validated options.
        """
        load_dotenv()
        values: dict[str, t.Any] = {
            "url": os.getenv(f"{ENV_PREFIX}URL"),
            "token_auth": os.getenv(f"{ENV_PREFIX}AUTH_TOKEN"),
            "id_site": os.getenv(f"{ENV_PREFIX}DEFAULT_SITE_ID"),
            "format": os.getenv(f"{ENV_PREFIX}FORMAT"),
            "language": os.getenv(f"{ENV_PREFIX}LANGUAGE"),
            "timeout": os.getenv(f"{ENV_PREFIX}TIMEOUT"),
        }
        security_mode = os.getenv(f"{ENV_PREFIX}SECURITY_MODE")
        if security_mode is not None:
            values["security_mode"] = security_mode.strip().lower() not in {"0", "false", "no", "off"}
        values.update(overrides)
        if not values.get("url"):
            raise ValueError(
                f"Matomo URL not found. Either set {ENV_PREFIX}URL in the environment "
                "variables or provide it through the url parameter."
            )
        return cls(**{key: value for key, value in values.items() if value is not None})
