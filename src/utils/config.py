"""Environment-backed settings.

Each concern reads its own frozen dataclass via ``from_env()``. The
aggregate is cached by ``get_settings()`` so every caller in the process
shares one read-only instance.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_EMAIL_SUBJECT = "Your Generated Cover Letter"
DEFAULT_EMAIL_TEMPLATE = (
    "Dear {name},\n\n"
    "Please find your generated cover letter below:\n\n"
    "{cover_letter}\n\n"
    "Best regards,\n"
    "The Cover Letter Service Team"
)


def _env(name: str, default: str | None = None) -> str | None:
    """Read an env var, treating blank values as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class AuthSettings:
    jwt_secret: str
    jwt_issuer: str = "JobPortalAPI"
    jwt_expiration_days: int = 7
    jwt_algorithm: str = "HS256"

    @classmethod
    def from_env(cls) -> 'AuthSettings':
        secret = _env("JWT_SECRET_KEY")
        if not secret:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        return cls(
            jwt_secret=secret,
            jwt_issuer=_env("JWT_ISSUER", "JobPortalAPI"),
            jwt_expiration_days=int(_env("JWT_EXPIRATION_DAYS", "7")),
        )


@dataclass(frozen=True)
class DatabaseSettings:
    url: str = "sqlite:///./jobapp.db"

    @classmethod
    def from_env(cls) -> 'DatabaseSettings':
        return cls(url=_env("DATABASE_URL", "sqlite:///./jobapp.db"))


@dataclass(frozen=True)
class LLMSettings:
    model: str = "openai/gemma3:1b"
    api_base: str | None = None
    api_key: str | None = None
    timeout_seconds: float = 60.0
    temperature: float = 0.7

    @classmethod
    def from_env(cls) -> 'LLMSettings':
        return cls(
            model=_env("LLM_MODEL", "openai/gemma3:1b"),
            api_base=_env("LLM_API_BASE"),
            api_key=_env("LLM_API_KEY"),
            timeout_seconds=float(_env("LLM_TIMEOUT_SECONDS", "60")),
        )


@dataclass(frozen=True)
class StorageSettings:
    bucket_name: str | None = None
    account_id: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    prefix: str = "coverletters/"

    @property
    def is_configured(self) -> bool:
        return all([self.bucket_name, self.account_id, self.access_key_id, self.secret_access_key])

    @classmethod
    def from_env(cls) -> 'StorageSettings':
        return cls(
            bucket_name=_env("R2_BUCKET_NAME"),
            account_id=_env("R2_ACCOUNT_ID"),
            access_key_id=_env("R2_ACCESS_KEY_ID"),
            secret_access_key=_env("R2_SECRET_ACCESS_KEY"),
            prefix=_env("COVER_LETTER_PREFIX", "coverletters/"),
        )


@dataclass(frozen=True)
class EmailSettings:
    """Email delivery configuration.

    ``provider`` is one of ``mailgun``, ``sendgrid`` or ``simulate``. The
    subject and message templates accept the named placeholders ``{name}``,
    ``{job_title}``, ``{company_name}`` and ``{cover_letter}``.
    """
    provider: str = "mailgun"
    subject: str = DEFAULT_EMAIL_SUBJECT
    message_template: str = DEFAULT_EMAIL_TEMPLATE
    mailgun_api_key: str | None = None
    mailgun_domain: str | None = None
    mailgun_from_email: str | None = None
    mailgun_from_name: str = "Cover Letter Service"
    mailgun_base_url: str = "https://api.mailgun.net"
    sendgrid_api_key: str | None = None
    sendgrid_from_email: str | None = None
    sendgrid_from_name: str = "Cover Letter Service"

    @classmethod
    def from_env(cls) -> 'EmailSettings':
        template = _env("EMAIL_MESSAGE_TEMPLATE", DEFAULT_EMAIL_TEMPLATE)
        return cls(
            provider=_env("EMAIL_PROVIDER", "mailgun").lower(),
            subject=_env("EMAIL_SUBJECT", DEFAULT_EMAIL_SUBJECT),
            # Allow literal "\n" in single-line .env values
            message_template=template.replace("\\n", "\n"),
            mailgun_api_key=_env("MAILGUN_API_KEY"),
            mailgun_domain=_env("MAILGUN_DOMAIN"),
            mailgun_from_email=_env("MAILGUN_FROM_EMAIL"),
            mailgun_from_name=_env("MAILGUN_FROM_NAME", "Cover Letter Service"),
            mailgun_base_url=_env("MAILGUN_BASE_URL", "https://api.mailgun.net").rstrip("/"),
            sendgrid_api_key=_env("SENDGRID_API_KEY"),
            sendgrid_from_email=_env("SENDGRID_FROM_EMAIL"),
            sendgrid_from_name=_env("SENDGRID_FROM_NAME", "Cover Letter Service"),
        )


@dataclass(frozen=True)
class Settings:
    auth: AuthSettings
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    llm: LLMSettings = field(default_factory=LLMSettings)
    storage: StorageSettings = field(default_factory=StorageSettings)
    email: EmailSettings = field(default_factory=EmailSettings)
    jooble_api_key: str | None = None
    cors_origins: str = "*"

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            auth=AuthSettings.from_env(),
            database=DatabaseSettings.from_env(),
            llm=LLMSettings.from_env(),
            storage=StorageSettings.from_env(),
            email=EmailSettings.from_env(),
            jooble_api_key=_env("JOOBLE_API_KEY"),
            cors_origins=_env("CORS_ORIGINS", "*"),
        )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process.

    Raises:
        ValueError: If JWT_SECRET_KEY is not set.
    """
    return Settings.from_env()
