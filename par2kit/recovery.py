"""Result codes, options and the recovery file count calculation."""

from __future__ import annotations

import enum


class Scheme(enum.IntEnum):
    """How recovery blocks are spread over recovery files."""

    UNKNOWN = 0
    VARIABLE = 1  # each file has twice as many blocks as the previous one
    LIMITED = 2  # no file larger than needed for the largest source file
    UNIFORM = 3  # all files the same size


class NoiseLevel(enum.IntEnum):
    """How much progress information to write."""

    UNKNOWN = 0
    SILENT = 1
    QUIET = 2
    NORMAL = 3
    NOISY = 4
    DEBUG = 5


class Result(enum.IntEnum):
    """Exit status of the create, verify and repair operations."""

    SUCCESS = 0
    REPAIR_POSSIBLE = 1
    REPAIR_NOT_POSSIBLE = 2
    INVALID_COMMAND_LINE_ARGUMENTS = 3
    INSUFFICIENT_CRITICAL_DATA = 4
    REPAIR_FAILED = 5
    FILE_IO_ERROR = 6
    LOGIC_ERROR = 7
    MEMORY_ERROR = 8


class RecoveryCountError(ValueError):
    """The number of recovery files cannot be determined."""


def compute_recovery_file_count(
    scheme: Scheme,
    recovery_block_count: int,
    largest_file_size: int,
    block_size: int,
    recovery_file_count: int = 0,
) -> int:
    """Return how many recovery files to create.

    A ``recovery_file_count`` of zero lets the variable and uniform
    schemes pick roughly log2 of the block count; the limited scheme
    always computes its own count.
    """
    if recovery_block_count == 0:
        return 0

    scheme = Scheme(scheme)
    if scheme is Scheme.UNKNOWN:
        raise RecoveryCountError("Scheme unspecified (create, verify, or repair).")

    if scheme in (Scheme.VARIABLE, Scheme.UNIFORM):
        count = recovery_file_count or recovery_block_count.bit_length()
        if count > recovery_block_count:
            raise RecoveryCountError("Too many recovery files specified.")
        return count

    if block_size <= 0:
        raise RecoveryCountError("Block size must be positive.")
    largest = -(-largest_file_size // block_size)
    if largest == 0:
        raise RecoveryCountError("The largest source file is empty.")
    whole = recovery_block_count // largest
    whole = whole - 1 if whole >= 1 else 0
    extra = recovery_block_count - whole * largest
    return whole + extra.bit_length()