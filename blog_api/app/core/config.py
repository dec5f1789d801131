"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration; in a real deployment at
least ``SECRET_KEY`` and the administrator credentials must be
overridden.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to console output.
    log_file: str = os.getenv("LOG_FILE", "")

    # Token signing.  ``JWT_SECRET`` is honoured for compatibility with
    # older deployments of the blog backend.
    secret_key: str = os.getenv("SECRET_KEY", os.getenv("JWT_SECRET", "change_me"))
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    # HMAC variant used to sign tokens: HS256, HS384 or HS512.
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Administrator account.  ``ADMIN_PASSWORD_HASH`` (``salthex$hashhex``
    # as produced by ``security.hash_password``) takes precedence over the
    # plain ``ADMIN_PASSWORD``.  Login is refused while neither is set.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@blog.com")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "")
    admin_password_hash: str = os.getenv("ADMIN_PASSWORD_HASH", "")

    # Optional static token accepted as an administrator credential.
    # Intended for integrations that cannot perform a login round-trip.
    admin_static_token: str = os.getenv("ADMIN_TOKEN", "")

    # Cover image storage.  Relative paths are resolved against the
    # current working directory.
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    max_upload_bytes: int = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

    # Comma-separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    seed_sample_posts: bool = _env_bool("SEED_SAMPLE_POSTS", "true")
    # When enabled, ``totalViews`` in /api/stats is summed from the posts
    # instead of reporting the static seed value.
    live_stats: bool = _env_bool("LIVE_STATS", "false")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    @property
    def cors_origin_list(self) -> list:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
