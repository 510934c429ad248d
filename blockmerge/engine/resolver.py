from hotlog import get_logger

from blockmerge.directives.content import ContentLine
from blockmerge.engine.registry import BlockRegistry

logger = get_logger(__name__)


def resolve_block(registry: BlockRegistry, block_id: str) -> list[ContentLine]:
    """Compute the final content of a block.

    The last replace wins over the default; every append is then added in
    discovery order. An identifier nothing was registered for resolves to an
    empty list.

    Args:
        registry: The registry filled during the scan pass.
        block_id: The block identifier to resolve.

    Returns:
        The resolved content lines, not yet indented for any target.
    """
    info = registry.get(block_id)
    if info is None:
        logger.debug('unknown_block', block=block_id)
        return []

    if info.replaces:
        base = info.replaces[-1]
        content = list(base.content)
        source = f'replace:{base.path}'
    elif info.default is not None:
        content = list(info.default.content)
        source = f'default:{info.default.path}'
    else:
        content = []
        source = 'none'

    for append in info.appends:
        content.extend(append.content)

    logger.debug(
        'resolved_block',
        block=block_id,
        base=source,
        appends=len(info.appends),
        lines=len(content),
    )
    return content
