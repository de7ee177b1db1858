"""Reconstruct a directory tree from a terminal session and measure directory sizes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

TOTAL_SPACE = 70_000_000
REQUIRED_FREE_SPACE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000

HOME = "/"
UP_ONE = ".."


@dataclass(frozen=True)
class DirListing:
    """A `dir <name>` line in the output of `ls`."""

    name: str


@dataclass(frozen=True)
class FileListing:
    """A `<size> <name>` line in the output of `ls`."""

    name: str
    size: int


Listing = Union[DirListing, FileListing]


@dataclass(frozen=True)
class ChangeDirectory:
    """A `cd` command; the target is `/`, `..` or a directory name."""

    target: str

    @property
    def is_home(self) -> bool:
        return self.target == HOME

    @property
    def is_up_one(self) -> bool:
        return self.target == UP_ONE


@dataclass
class ListDirectory:
    """An `ls` command together with the listings it printed."""

    listings: list[Listing] = field(default_factory=list)


Command = Union[ChangeDirectory, ListDirectory]


@dataclass
class File:
    """A file in the tree."""

    name: str
    size: int
    level: int = 0

    def __str__(self) -> str:
        return f"{'  ' * self.level}- {self.name} (file, size={self.size})\n"


@dataclass
class Directory:
    """A directory in the tree, holding files and subdirectories in listing order."""

    name: str
    parent: Optional[Directory] = field(default=None, compare=False, repr=False)
    children: list[Union[File, Directory]] = field(default_factory=list)
    level: int = 0

    def add_child(self, child: Union[File, Directory]) -> None:
        self.children.append(child)

    def find_child(self, name: str) -> Optional[Union[File, Directory]]:
        """Return the first child with the given name, or None."""
        return next((child for child in self.children if child.name == name), None)

    def subdirectories(self) -> Iterator[Directory]:
        return (child for child in self.children if isinstance(child, Directory))

    def __str__(self) -> str:
        header = f"{'  ' * self.level}- {self.name} (dir)\n"
        return header + "".join(str(child) for child in self.children)


def _parse_command(parts: list[str]) -> Command:
    if len(parts) < 2:
        raise ValueError(f"Invalid command: {' '.join(parts)}")
    name = parts[1]
    if name == "cd":
        if len(parts) != 3:
            raise ValueError(f"cd takes exactly one argument: {' '.join(parts)}")
        return ChangeDirectory(parts[2])
    if name == "ls":
        if len(parts) != 2:
            raise ValueError(f"ls takes no arguments: {' '.join(parts)}")
        return ListDirectory()
    raise ValueError(f"Invalid command: {name}")


def _parse_listing(parts: list[str]) -> Listing:
    if len(parts) != 2:
        raise ValueError(f"Invalid listing line: {' '.join(parts)}")
    first, name = parts
    if first == "dir":
        return DirListing(name)
    if not (first.isascii() and first.isdigit()):
        raise ValueError(f"Failed to parse file size: {first!r}")
    return FileListing(name, int(first))


def parse_commands(contents: str) -> list[Command]:
    """Parse a terminal session into commands, attaching `ls` output to its command."""
    commands: list[Command] = []
    for line in contents.split("\n"):
        if not line:
            continue
        parts = line.split(" ")
        if line.startswith("$"):
            commands.append(_parse_command(parts))
            continue
        listing = _parse_listing(parts)
        if not commands or not isinstance(commands[-1], ListDirectory):
            raise ValueError(f"Listing output without a preceding ls: {line!r}")
        commands[-1].listings.append(listing)
    return commands


def build_tree(commands: list[Command]) -> Directory:
    """Replay the commands and return the root directory of the tree they reveal."""
    root = Directory(HOME)
    current = root
    for command in commands:
        if isinstance(command, ChangeDirectory):
            if command.is_home:
                current = root
            elif command.is_up_one:
                if current.parent is not None:
                    current = current.parent
            else:
                target = current.find_child(command.target)
                if target is None:
                    raise ValueError(
                        f"Can't cd into {command.target!r}: not seen in a listing yet"
                    )
                if not isinstance(target, Directory):
                    raise ValueError(f"Can't cd into file {command.target!r}")
                current = target
        else:
            level = current.level + 1
            for listing in command.listings:
                if isinstance(listing, DirListing):
                    current.add_child(Directory(listing.name, parent=current, level=level))
                else:
                    current.add_child(File(listing.name, listing.size, level=level))
    return root


def directory_size(directory: Directory) -> int:
    """Total size of all files below the directory."""
    return sum(
        directory_size(child) if isinstance(child, Directory) else child.size
        for child in directory.children
    )


def all_directory_sizes(directory: Directory) -> list[tuple[str, int]]:
    """Name and size of the directory and every directory below it, in pre-order."""
    sizes = [(directory.name, directory_size(directory))]
    for child in directory.subdirectories():
        sizes.extend(all_directory_sizes(child))
    return sizes


def _sizes(contents: str) -> list[tuple[str, int]]:
    return all_directory_sizes(build_tree(parse_commands(contents)))


def part1(contents: str) -> str:
    total = sum(size for _, size in _sizes(contents) if size <= SMALL_DIRECTORY_LIMIT)
    return str(total)


def part2(contents: str) -> str:
    sizes = _sizes(contents)
    current_free_space = TOTAL_SPACE - sizes[0][1]
    space_to_free = REQUIRED_FREE_SPACE - current_free_space
    return str(min(size for _, size in sizes if size >= space_to_free))