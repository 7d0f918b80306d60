"""
External Field Limit Configuration

Loads name -> limit mappings from YAML so limits can live next to the
import job instead of on the record classes.

File format:

    version: "2024-06"
    field_limits:
      remark: 200          # field name
      Customer Name: 50    # export header or declared label

Keys are matched against each field's candidate keys (field name,
declared label, export headers). Limits must be positive integers.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, StrictInt, ValidationError, field_validator

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

FIELD_LIMITS_PATH_ENV = "FIELD_LIMITS_PATH"


class FieldLimitsConfig(BaseModel):
    """Schema of a field limits YAML document."""
    version: str = "unknown"
    field_limits: Dict[str, StrictInt] = {}

    @field_validator("field_limits")
    @classmethod
    def limits_must_be_positive(cls, value: Dict[str, int]) -> Dict[str, int]:
        invalid = [key for key, limit in value.items() if limit <= 0]
        if invalid:
            raise ValueError(f"limits must be positive, got non-positive values for: {', '.join(invalid)}")
        return value


def parse_field_limits(document: Optional[Dict[str, Any]]) -> FieldLimitsConfig:
    """
    Validate an already-parsed configuration document.

    Args:
        document: Mapping as produced by yaml.safe_load (None means empty)

    Raises:
        ConfigurationError: If the document does not match the schema
    """
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ConfigurationError(f"Field limits config must be a mapping, got {type(document).__name__}")

    try:
        return FieldLimitsConfig(**document)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid field limits config: {e}") from e


def load_field_limits(path: Union[str, Path]) -> Dict[str, int]:
    """
    Load external field limits from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        name -> limit mapping

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Field limits file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e

    config = parse_field_limits(document)
    logger.info(f"Loaded {len(config.field_limits)} field limits from {path} (version {config.version})")
    return dict(config.field_limits)


def load_field_limits_from_env() -> Dict[str, int]:
    """
    Load field limits from the file named by FIELD_LIMITS_PATH.

    Returns an empty mapping when the variable is not set.
    """
    path = os.getenv(FIELD_LIMITS_PATH_ENV)
    if not path:
        return {}
    return load_field_limits(path)
