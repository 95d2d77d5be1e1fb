"""aoc2024.day09
================

Disk fragmenter: the dense disk map alternates file and free-space run
lengths. Part 1 compacts block by block; part 2 moves whole files into the
leftmost free fragment that fits, highest file id first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import SolveConfig
from .errors import ParseError
from .types import Answer

Block = Optional[int]
"""A disk block: the owning file id, or ``None`` for free space."""

FREE: Block = None


@dataclass(frozen=True)
class Fragment:
    """A contiguous run of identical blocks."""

    size: int
    file_id: Optional[int] = None

    @property
    def is_free(self) -> bool:
        return self.file_id is None


def parse_digits(text: str) -> List[int]:
    digits = text.strip()
    if not digits:
        raise ParseError("empty disk map")
    if not digits.isdigit() or not digits.isascii():
        raise ParseError("disk map must only contain digits")
    return [int(char) for char in digits]


def digits_to_fragments(counts: Sequence[int]) -> List[Fragment]:
    """Alternate file and free runs; file ids count up from zero."""

    return [
        Fragment(size=count, file_id=index // 2 if index % 2 == 0 else None)
        for index, count in enumerate(counts)
    ]


def fragments_to_blocks(fragments: Sequence[Fragment]) -> List[Block]:
    blocks: List[Block] = []
    for fragment in fragments:
        blocks.extend([fragment.file_id] * fragment.size)
    return blocks


def checksum(blocks: Sequence[Block]) -> int:
    return sum(index * file_id for index, file_id in enumerate(blocks) if file_id is not None)


def compact_blocks(blocks: Sequence[Block]) -> List[Block]:
    """Swap the leftmost free block with the rightmost file block until they meet."""

    blocks = list(blocks)
    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not FREE:
            left += 1
        while right >= 0 and blocks[right] is FREE:
            right -= 1
        if left >= right:
            return blocks
        blocks[left], blocks[right] = blocks[right], blocks[left]


def _move_file(fragments: List[Fragment], file_index: int) -> int:
    """Move the file at ``file_index`` left; return how many fragments were inserted."""

    file = fragments[file_index]
    for target_index in range(file_index):
        target = fragments[target_index]
        if not target.is_free or target.size < file.size:
            continue
        fragments[file_index] = Fragment(size=file.size)
        fragments[target_index] = file
        if target.size > file.size:
            fragments.insert(target_index + 1, Fragment(size=target.size - file.size))
            return 1
        return 0
    return 0


def compact_fragments(fragments: Sequence[Fragment]) -> List[Block]:
    """Move each file at most once to the leftmost free fragment that fits.

    Files are visited right to left, which is decreasing id order for every
    file that has not moved yet. Freed space is left unmerged: it always lies
    to the right of every file still waiting to move.
    """

    fragments = list(fragments)
    moved = set()
    index = len(fragments) - 1
    while index > 0:
        fragment = fragments[index]
        if not fragment.is_free and fragment.file_id not in moved:
            moved.add(fragment.file_id)
            # an insertion shifts the next candidate onto ``index``
            index += _move_file(fragments, index)
        index -= 1
    return fragments_to_blocks(fragments)


def solution(text: str, config: SolveConfig | None = None) -> Answer:
    fragments = digits_to_fragments(parse_digits(text))
    return Answer(
        part_1=checksum(compact_blocks(fragments_to_blocks(fragments))),
        part_2=checksum(compact_fragments(fragments)),
    )


__all__ = [
    "Block",
    "FREE",
    "Fragment",
    "parse_digits",
    "digits_to_fragments",
    "fragments_to_blocks",
    "checksum",
    "compact_blocks",
    "compact_fragments",
    "solution",
]
