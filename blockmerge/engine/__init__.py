from blockmerge.engine.core import (
    ScanResult,
    SourceFile,
    merge_sources,
    patch_records,
    scan_sources,
)
from blockmerge.engine.patcher import (
    LineEdit,
    PatchOutcome,
    Rewritten,
    Unchanged,
    apply_edits,
    patch_file,
)
from blockmerge.engine.registry import BlockInfo, BlockRegistry
from blockmerge.engine.resolver import resolve_block

__all__ = [
    'BlockInfo',
    'BlockRegistry',
    'LineEdit',
    'PatchOutcome',
    'Rewritten',
    'ScanResult',
    'SourceFile',
    'Unchanged',
    'apply_edits',
    'merge_sources',
    'patch_file',
    'patch_records',
    'resolve_block',
    'scan_sources',
]
