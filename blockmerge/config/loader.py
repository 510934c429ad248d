from pathlib import Path

import yaml
from hotlog import get_logger
from pydantic import ValidationError

from blockmerge.config.models import BlockmergeConfig
from blockmerge.exceptions import ConfigValidationError

logger = get_logger(__name__)

DEFAULT_CONFIG = Path('blockmerge.yaml')


def load_config_file(yaml_file: Path) -> BlockmergeConfig:
    """Load and validate a YAML configuration file.

    Args:
        yaml_file: Path to the YAML configuration file.

    Returns:
        A validated BlockmergeConfig instance.

    Raises:
        ConfigValidationError: The file does not describe a valid configuration.
    """
    with yaml_file.open(encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f'{yaml_file}: expected a mapping at the top level'
        raise ConfigValidationError(msg)
    try:
        config = BlockmergeConfig.model_validate(data)
    except ValidationError as err:
        raise ConfigValidationError(f'{yaml_file}: {err}') from err
    config.config_file = yaml_file
    return config


def load_config(
    yaml_file: Path | None,
    patterns: list[str] | None = None,
) -> BlockmergeConfig:
    """Build the configuration for a run.

    The default config file is optional; a file that was passed explicitly
    must exist. Patterns from the command line are added to the configured
    ones.

    Args:
        yaml_file: Path to the YAML configuration file, or None for the default.
        patterns: Extra glob patterns given on the command line.

    Returns:
        The merged configuration.

    Raises:
        ConfigValidationError: The explicit file is missing, or no pattern is
            configured at all.
    """
    path = yaml_file if yaml_file is not None else DEFAULT_CONFIG
    if path.exists():
        config = load_config_file(path)
        logger.debug('config_loaded', config_file=str(path))
    elif yaml_file is not None and yaml_file != DEFAULT_CONFIG:
        msg = f'Configuration file not found: {yaml_file}'
        raise ConfigValidationError(msg)
    else:
        config = BlockmergeConfig()

    config = config.with_patterns(list(patterns or []))
    if not config.patterns:
        msg = 'No file patterns given: pass patterns on the command line or set `patterns` in the config file'
        raise ConfigValidationError(msg)
    return config
