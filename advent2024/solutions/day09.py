"""Day 9: compacting files on a fragmented disk."""

from __future__ import annotations

from typing import Optional, Sequence

from advent2024.day import Day
from advent2024.runner import run_day

_DIGITS = "0123456789"


def _disk_map(text: str) -> list[int]:
    text = text.rstrip()
    if not text:
        raise ValueError("expected a non-empty disk map")
    if any(ch not in _DIGITS for ch in text):
        raise ValueError("the disk map may hold only digits")
    return [int(ch) for ch in text]


def _block_sum(file_id: int, start: int, size: int) -> int:
    return file_id * sum(range(start, start + size))


def part_one(puzzle_input: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    sizes = _disk_map(puzzle_input)
    checksum = 0
    index = 0
    left = 0
    right = len(sizes) - 1
    needs_space = sizes[right]

    while left < right:
        checksum += _block_sum(left // 2, index, sizes[left])
        index += sizes[left]
        left += 1

        for _ in range(sizes[left]):
            if needs_space == 0:
                right -= 2
                if right <= left:
                    break
                needs_space = sizes[right]
            checksum += (right // 2) * index
            index += 1
            needs_space -= 1
        left += 1

    checksum += _block_sum(right // 2, index, needs_space)
    return checksum


def part_two(puzzle_input: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits them."""
    sizes = _disk_map(puzzle_input)

    starts = [0]
    for size in sizes[:-1]:
        starts.append(starts[-1] + size)

    checksum = 0
    for right in range(len(sizes) - 1, -1, -2):
        file_id = right // 2
        size = sizes[right]
        gap = next(
            (left for left in range(1, right, 2) if sizes[left] >= size), None
        )
        if gap is None:
            checksum += _block_sum(file_id, starts[right], size)
        else:
            checksum += _block_sum(file_id, starts[gap], size)
            sizes[gap] -= size
            starts[gap] += size
    return checksum


def main(argv: Optional[Sequence[str]] = None) -> None:
    run_day(Day(9), part_one, part_two, argv)


if __name__ == "__main__":
    main()