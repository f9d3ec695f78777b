"""Disk fragmenter checksums (2024, day 9)."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path


def checksum_run(file_id: int, start: int, size: int) -> int:
    """Checksum of `size` blocks of one file laid out from position `start`."""
    return file_id * (2 * start + size - 1) * size // 2


def _sizes(disk_map: str) -> list[int]:
    text = disk_map.strip()
    if not all("0" <= ch <= "9" for ch in text):
        raise ValueError(f"disk map must hold digits only: {text!r}")
    return [int(ch) for ch in text]


def part1(disk_map: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    sizes = _sizes(disk_map)
    result = 0
    position = 0
    start, end = 0, len(sizes) - 1
    while start <= end:
        if start % 2 == 0:
            result += checksum_run(start // 2, position, sizes[start])
            position += sizes[start]
            sizes[start] = 0
            start += 1
        elif end % 2 == 0:
            free, size = sizes[start], sizes[end]
            moved = min(free, size)
            result += checksum_run(end // 2, position, moved)
            position += moved
            if free < size:
                sizes[end] = size - free
                start += 1
            else:
                sizes[end] = 0
                sizes[start] = free - size
                if free > size:
                    end -= 2
                else:
                    start += 1
        else:
            end -= 1
    return result


@dataclass
class _Block:
    file_id: int
    size: int
    is_file: bool
    moved_in: list[tuple[int, int]] = field(default_factory=list)


def part2(disk_map: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits them."""
    blocks = [
        _Block(index // 2 if index % 2 == 0 else 0, size, index % 2 == 0)
        for index, size in enumerate(_sizes(disk_map))
    ]
    if len(blocks) % 2 == 0:
        raise ValueError("disk map must end with a file")
    s, e = 1, len(blocks) - 1
    while e > 0:
        if s > e:
            s = 1
            e -= 2
        moving = blocks[e]
        if moving.size == 0:
            e -= 2
            if e < 0:
                raise ValueError("malformed disk map")
        space = blocks[s]
        if moving.size <= space.size:
            space.moved_in.append((moving.file_id, moving.size))
            space.size -= moving.size
            blocks[e] = _Block(0, moving.size, False)
            e -= 2
            s = 1
        else:
            s += 2

    total = 0
    position = 0
    for block in blocks:
        for file_id, size in block.moved_in:
            total += checksum_run(file_id, position, size)
            position += size
        total += checksum_run(block.file_id, position, block.size)
        position += block.size
    return total


def part2_v2(disk_map: str) -> int:
    """Whole-file compaction computed directly from the remaining gap sizes."""
    sizes = _sizes(disk_map)
    original = list(sizes)
    total = 0
    for e in range(len(sizes) - 1, -1, -2):
        size = sizes[e]
        file_id = e // 2
        position = 0
        for s in range(e):
            free, initial = sizes[s], original[s]
            if s % 2 == 1 and free >= size:
                position += initial - free
                total += checksum_run(file_id, position, size)
                sizes[s] = free - size
                break
            position += initial
        else:
            total += checksum_run(file_id, position, size)
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Disk fragmenter checksums")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    disk_map = args.input.read_text()
    print(f"Part1: {part1(disk_map)}")
    print(f"Part2: {part2(disk_map)}")
    print(f"Part2v2: {part2_v2(disk_map)}")


if __name__ == "__main__":
    main()