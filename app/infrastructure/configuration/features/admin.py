"""Admin authoring feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class AdminSettings(FeatureSettings):
    """Admin login, session and draft lifetimes.

    Environment Variables:
        ADMIN_PASSWORD: Shared admin secret, required at startup
        ADMIN_SESSION_MAX_AGE_SECONDS: Lifetime of an admin session token
        DRAFT_TTL_SECONDS: Lifetime of an unpublished draft
        ORPHAN_GRACE_SECONDS: Minimum age before an incomplete folder may be swept
        MAX_IMAGE_BYTES: Largest photo accepted by the suggest step
    """

    ADMIN_PASSWORD: str = Field(default="", alias="ADMIN_PASSWORD")
    ADMIN_SESSION_MAX_AGE_SECONDS: int = Field(
        default=28800, alias="ADMIN_SESSION_MAX_AGE_SECONDS"
    )
    DRAFT_TTL_SECONDS: int = Field(default=3600, alias="DRAFT_TTL_SECONDS")
    ORPHAN_GRACE_SECONDS: int = Field(default=3600, alias="ORPHAN_GRACE_SECONDS")
    MAX_IMAGE_BYTES: int = Field(default=10 * 1024 * 1024, alias="MAX_IMAGE_BYTES")
