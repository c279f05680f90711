"""Remove block types a document no longer uses once it is saved.

A manual save (not an autosave) uninstalls every unused block type and
unregisters it by name. Nothing happens until the save state changes, so
repeated updates during one save act once.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BlockType:
    name: str
    title: str = ''
    extra: dict[str, Any] = field(default_factory=dict, compare=False)


class AutoBlockUninstaller:
    def __init__(
        self,
        uninstall: Callable[[BlockType], None],
        unregister: Callable[[str], None],
    ):
        self._uninstall = uninstall
        self._unregister = unregister
        self._should_remove: bool | None = None  # None until the first update

    def update(self, is_saving: bool, is_autosaving: bool, unused: Sequence[BlockType]) -> list[BlockType]:
        """Feed the current editor state. Returns the block types removed."""
        should_remove = is_saving and not is_autosaving
        if should_remove == self._should_remove:
            return []
        self._should_remove = should_remove

        if not should_remove or not unused:
            return []

        removed = []
        for block_type in unused:
            self._uninstall(block_type)
            self._unregister(block_type.name)
            removed.append(block_type)
        return removed
