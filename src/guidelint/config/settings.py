"""Application settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from guidelint.models import OutputFormat, Severity


class RuleSettings(BaseModel):
  """Per-rule configuration."""

  model_config = ConfigDict(extra="forbid")

  enabled: bool = True
  severity: Severity | None = None

  @field_validator("severity", mode="before")
  @classmethod
  def _lowercase_severity(cls, value: object) -> object:
    if isinstance(value, str):
      return value.lower()
    return value


class Settings(BaseModel):
  """Application configuration."""

  model_config = ConfigDict(use_enum_values=False, extra="forbid")

  rules: dict[str, RuleSettings] = Field(default_factory=dict)
  format: OutputFormat = OutputFormat.TEXT
  jobs: int = Field(default=1, ge=1)
  timeout: float | None = Field(default=None, gt=0)
