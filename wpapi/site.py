"""Site reference and credential bundle for the WordPress REST API."""

import base64
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


def basic_auth_header(username: str, app_password: str) -> dict:
    """Generate Basic Auth header for WordPress REST API."""
    password = app_password.replace(" ", "")  # Remove spaces from app passwords
    credentials = f"{username}:{password}"
    encoded = base64.b64encode(credentials.encode()).decode()
    return {"Authorization": f"Basic {encoded}"}


@dataclass(frozen=True)
class WordPressSite:
    """A WordPress install plus the headers attached to every request.

    The header bundle is opaque here: whatever the caller put in it is sent
    verbatim. Build one with ``from_credentials`` or ``from_settings`` when
    you only have a username and application password.
    """

    url: str
    headers: dict = field(default_factory=dict)
    timeout: float = 30.0
    upload_timeout: float = 120.0

    def __post_init__(self):
        object.__setattr__(self, "url", self.url.rstrip("/"))
        object.__setattr__(self, "headers", dict(self.headers))

    @property
    def api_root(self) -> str:
        return f"{self.url}/wp-json/wp/v2"

    @classmethod
    def from_credentials(
        cls,
        url: str,
        username: str,
        app_password: str,
        timeout: float = 30.0,
        upload_timeout: float = 120.0,
    ) -> "WordPressSite":
        return cls(
            url=url,
            headers=basic_auth_header(username, app_password),
            timeout=timeout,
            upload_timeout=upload_timeout,
        )

    @classmethod
    def from_settings(cls, settings=None) -> "WordPressSite":
        """Build a site from WP_URL, WP_USERNAME and WP_APP_PASSWORD."""
        if settings is None:
            from config.settings import settings

        missing = [
            name
            for name in ("wp_url", "wp_username", "wp_app_password")
            if not getattr(settings, name)
        ]
        if missing:
            raise ValueError(f"WordPress settings incomplete, missing: {', '.join(missing)}")

        logger.info(f"Loaded WordPress site: {settings.wp_url}")
        return cls.from_credentials(
            settings.wp_url,
            settings.wp_username,
            settings.wp_app_password,
            timeout=settings.wp_timeout,
            upload_timeout=settings.wp_upload_timeout,
        )
