"""
Checker configuration.

Options can be built directly or from environment variables:

    OAS_CHECKER_SPEC_PATH   Path to the OpenAPI contract document (YAML or JSON)
    OAS_CHECKER_LOG_ISSUES  Log every recorded issue at WARNING (default: true)

A .env file in the working directory is loaded on import.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

load_dotenv()


SPEC_PATH_ENV = "OAS_CHECKER_SPEC_PATH"
LOG_ISSUES_ENV = "OAS_CHECKER_LOG_ISSUES"


class Options(BaseModel):
    """
    Settings for a Checker.

    Frozen after creation; one Options instance may back many checkers.
    """
    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )

    file: Optional[Path] = None
    log_issues: bool = True

    @field_validator('file', mode='before')
    @classmethod
    def strip_file(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v

    @classmethod
    def from_env(cls, **overrides) -> "Options":
        """Build options from OAS_CHECKER_* variables; keyword overrides win."""
        values = {
            'file': os.getenv(SPEC_PATH_ENV),
            'log_issues': os.getenv(LOG_ISSUES_ENV, 'true'),
        }
        values.update(overrides)
        return cls(**values)
