"""
PDF storage configuration settings.

Selects where uploaded syllabus PDFs are kept: a local directory for
development or an S3 bucket in deployed environments.

Dependencies: pydantic_settings
System role: PDF store configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for uploaded PDF storage."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="local",
        description="Storage backend: 'local' for development, 's3' for production",
    )
    local_dir: str = Field(
        default="./data",
        description="Root directory for the local backend",
    )
    bucket: str = Field(
        default="syllabus-hub-dev-uploads",
        description="S3 bucket for uploaded PDFs",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for the S3 bucket",
    )
    prefix: str = Field(
        default="uploads",
        description="Key prefix for stored PDFs",
    )
