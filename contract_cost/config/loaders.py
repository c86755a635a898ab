# contract_cost/config/loaders.py
"""
Load calculation scenarios from YAML files.

A scenario holds the contract parameters, report options and a list of
groups. Each group supplies its steps inline (``steps``) or as a path to a
tab-separated file (``steps_file``) resolved relative to the scenario file.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from cerberus import Validator
from pydantic import ValidationError

from contract_cost.config.models import CalculationRequest, format_validation_error
from contract_cost.data.readers import read_steps_text
from contract_cost.exceptions import ConfigLoadError, InvalidConfiguration

logger = logging.getLogger(__name__)

RAISE_RULE = {"type": ["number", "string", "list"], "nullable": True, "required": False}

SCENARIO_SCHEMA = {
    "contract": {
        "type": "dict",
        "required": True,
        "schema": {
            # Types are checked by ContractParameters (InvalidConfiguration)
            "years": {"required": True, "nullable": True},
            "last_raise": {"required": True, "nullable": True},
        },
    },
    "report": {
        "type": "dict",
        "required": False,
        "schema": {
            "include_grand_total": {"type": "boolean", "required": False},
            "raise_first_year": {"type": "boolean", "required": False},
            "step_column": {"type": "boolean", "required": False},
        },
    },
    "groups": {
        "type": "list",
        "required": True,
        "schema": {
            "type": "dict",
            "schema": {
                "name": {"type": "string", "nullable": True, "required": False},
                "group_id": {"type": ["string", "integer"], "nullable": True, "required": False},
                "union_raise": RAISE_RULE,
                "mgmt_raise": RAISE_RULE,
                "steps": {"type": "string", "nullable": True, "required": False, "excludes": "steps_file"},
                "steps_file": {"type": "string", "required": False, "excludes": "steps"},
            },
        },
    },
}


def load_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path pointing to the YAML scenario file.

    Returns:
        A dictionary containing the loaded configuration.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed.
    """
    if not isinstance(config_path, Path):
        config_path = Path(config_path)

    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        logger.exception(f"Could not read configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Could not read configuration file {config_path}") from e

    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def _read_group_steps(group: Dict[str, Any], base_dir: Path) -> Dict[str, Any]:
    group = dict(group)
    steps_file = group.pop("steps_file", None)
    if steps_file is not None:
        path = Path(steps_file)
        if not path.is_absolute():
            path = base_dir / path
        group["steps"] = read_steps_text(path)
        logger.debug(f"Loaded steps for group '{group.get('name')}' from {path}")
    if group.get("group_id") is not None:
        group["group_id"] = str(group["group_id"])
    return group


def request_from_dict(config_data: Dict[str, Any], base_dir: Optional[Path] = None) -> CalculationRequest:
    """
    Validate a scenario dictionary and turn it into a CalculationRequest.

    Args:
        config_data: Parsed scenario (see module docstring for the layout).
        base_dir: Directory that relative ``steps_file`` paths are resolved
            against. Defaults to the working directory.

    Raises:
        ConfigLoadError: If the scenario does not have the expected shape.
        InvalidConfiguration: If contract parameters or raises are invalid.
        DataReadError: If a referenced step file cannot be read.
    """
    v = Validator(SCENARIO_SCHEMA)
    if not v.validate(config_data):
        raise ConfigLoadError(f"Config validation failed: {v.errors}")

    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
    groups = [_read_group_steps(g, base_dir) for g in config_data.get("groups") or []]

    try:
        request = CalculationRequest(
            groups=groups,
            contract=config_data["contract"],
            options=config_data.get("report") or {},
        )
    except ValidationError as e:
        message = format_validation_error(e)
        logger.error(f"Invalid scenario parameters: {message}")
        raise InvalidConfiguration(message) from e

    logger.debug(f"Scenario loaded with {len(request.groups)} groups")
    return request


def load_scenario(config_path: Union[str, Path]) -> CalculationRequest:
    """
    Load a YAML scenario file into a validated CalculationRequest.

    Relative ``steps_file`` entries are resolved against the directory of
    the scenario file.
    """
    config_path = Path(config_path)
    config_data = load_yaml_config(config_path)
    return request_from_dict(config_data, base_dir=config_path.parent)


# Expose for import
__all__ = [
    "load_yaml_config",
    "request_from_dict",
    "load_scenario",
]
