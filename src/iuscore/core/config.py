"""Nested pydantic-settings configuration for iuscore.

Each sub-config reads its own ``IUSCORE_<GROUP>_*`` env vars::

    export IUSCORE_REPORT_DEFAULT_PROFILE=cd
    export IUSCORE_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from iuscore.segments.catalog import DEFAULT_IMPAIRMENT_REASON


class ReportConfig(BaseSettings):
    """Report session defaults.

    Env vars use ``IUSCORE_REPORT_`` prefix.
    """

    model_config = {"env_prefix": "IUSCORE_REPORT_"}

    default_profile: Literal["uc", "cd"] = "uc"
    default_indication: str = ""
    default_impairment_reason: str = Field(default=DEFAULT_IMPAIRMENT_REASON, min_length=1)
    output_format: Literal["text", "json"] = "text"


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``IUSCORE_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "IUSCORE_OBSERVABILITY_"}

    log_level: str = "INFO"
    log_format: Literal["auto", "json", "console"] = "auto"
    service_name: str = "iuscore"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    report: ReportConfig = ReportConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
