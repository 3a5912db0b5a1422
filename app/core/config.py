"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Every field has a LocalStack-friendly default so the
service starts with no environment at all; values are validated at load time.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Resource names (table, bucket, topic, queue) are process-wide constants
    shared by the bootstrap and the request workflows.
    """

    # App
    app_name: str = "task-intake"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    allowed_origins: str = "*"

    # AWS / LocalStack
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = Field(
        default="http://localhost:4566",
        validation_alias=AliasChoices("LOCALSTACK_ENDPOINT", "AWS_ENDPOINT_URL"),
    )
    aws_access_key_id: str = "test"
    aws_secret_access_key: SecretStr = SecretStr("test")
    aws_account_id: str = "000000000000"

    # DynamoDB
    tasks_table_name: str = "Tasks"
    tasks_table_hash_key: str = "taskId"
    tasks_table_read_capacity: int = 5
    tasks_table_write_capacity: int = 5
    # Bounded wait for a freshly created table to become ACTIVE.
    table_ready_poll_delay_seconds: int = 2
    table_ready_max_attempts: int = 25

    # S3
    images_bucket_name: str = "shopping-images"
    image_key_prefix: str = "images/"
    image_key_extension: str = ".jpg"
    image_default_content_type: str = "image/jpeg"
    max_upload_size: int = 10 * 1024 * 1024  # 10MB

    # SNS / SQS
    task_events_topic_name: str = "task-events"
    task_queue_name: str = "task-queue"
    # When False, queue consumers receive events only through the topic subscription.
    fanout_direct_queue_send: bool = True

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def validate_resources(self) -> "Settings":
        """Validate resource names and bootstrap bounds.

        - Table, bucket, topic and queue names must be non-empty.
        - Capacities and table poll bounds must be positive.
        - An empty endpoint string means "real AWS" and is normalized to None.
        """
        for field_name in (
            "tasks_table_name",
            "tasks_table_hash_key",
            "images_bucket_name",
            "task_events_topic_name",
            "task_queue_name",
        ):
            if not getattr(self, field_name).strip():
                raise ValueError(f"{field_name} must be a non-empty string")
        for field_name in (
            "tasks_table_read_capacity",
            "tasks_table_write_capacity",
            "table_ready_poll_delay_seconds",
            "table_ready_max_attempts",
            "max_upload_size",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"{field_name} must be positive")
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("telemetry_sample_rate must be between 0.0 and 1.0")
        if self.aws_endpoint_url is not None and not self.aws_endpoint_url.strip():
            self.aws_endpoint_url = None
        return self

    @property
    def topic_arn(self) -> str:
        """Topic ARN derived from region, account and topic name (used when bootstrap could not resolve it)."""
        return (
            f"arn:aws:sns:{self.aws_region}:{self.aws_account_id}:"
            f"{self.task_events_topic_name}"
        )

    @property
    def queue_url(self) -> str:
        """Queue URL derived from endpoint, account and queue name (used when bootstrap could not resolve it)."""
        if self.aws_endpoint_url:
            base = self.aws_endpoint_url.rstrip("/")
        else:
            base = f"https://sqs.{self.aws_region}.amazonaws.com"
        return f"{base}/{self.aws_account_id}/{self.task_queue_name}"

    @property
    def blob_locator_base(self) -> str:
        """Base URL for image locators returned by uploads."""
        if self.aws_endpoint_url:
            return f"{self.aws_endpoint_url.rstrip('/')}/{self.images_bucket_name}"
        return f"https://{self.images_bucket_name}.s3.{self.aws_region}.amazonaws.com"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
