from .apply import command as apply_cmd
from .preview import command as preview_cmd

__all__ = ['apply_cmd', 'preview_cmd']
