from .loader import DEFAULT_CONFIG, load_config, load_config_file
from .models import BlockmergeConfig

__all__ = [
    'DEFAULT_CONFIG',
    'BlockmergeConfig',
    'load_config',
    'load_config_file',
]
