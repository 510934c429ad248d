from collections.abc import Iterator
from dataclasses import dataclass, field

from hotlog import get_logger

from blockmerge.directives.scanner import BlockOccurrence, BlockRole

logger = get_logger(__name__)


@dataclass
class BlockInfo:
    """Everything registered for one block identifier, in discovery order."""

    block_id: str
    default: BlockOccurrence | None = None
    replaces: list[BlockOccurrence] = field(default_factory=list)
    appends: list[BlockOccurrence] = field(default_factory=list)
    targets: list[BlockOccurrence] = field(default_factory=list)


class BlockRegistry:
    """Accumulates block occurrences across every scanned file.

    Files must be scanned in discovery order; the registry keeps occurrences
    in the order they are registered and that order decides which replace
    wins and how appends are concatenated.
    """

    def __init__(self) -> None:
        self._blocks: dict[str, BlockInfo] = {}

    def register(self, occurrence: BlockOccurrence) -> BlockInfo:
        info = self._blocks.get(occurrence.block_id)
        if info is None:
            info = BlockInfo(block_id=occurrence.block_id)
            self._blocks[occurrence.block_id] = info

        if occurrence.role is BlockRole.DEFAULT:
            if info.default is not None:
                logger.warning(
                    'duplicate_block_default',
                    block=occurrence.block_id,
                    previous=info.default.path,
                    current=occurrence.path,
                )
            info.default = occurrence
            info.targets.append(occurrence)
        elif occurrence.role is BlockRole.EMPTY:
            info.targets.append(occurrence)
        elif occurrence.role is BlockRole.REPLACE:
            info.replaces.append(occurrence)
        elif occurrence.role is BlockRole.APPEND:
            info.appends.append(occurrence)
        return info

    def get(self, block_id: str) -> BlockInfo | None:
        return self._blocks.get(block_id)

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._blocks

    def __iter__(self) -> Iterator[BlockInfo]:
        return iter(self._blocks.values())

    def __len__(self) -> int:
        return len(self._blocks)

    def log_summary(self) -> None:
        """Log one debug event per registered block."""
        for info in self:
            logger.debug(
                'registered_block',
                block=info.block_id,
                default_lines=len(info.default.content) if info.default else None,
                replaces=len(info.replaces),
                appends=len(info.appends),
                targets=len(info.targets),
            )
