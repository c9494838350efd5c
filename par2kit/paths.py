"""Path helpers: canonical names, splitting, existence, sizes and wildcard search."""

from __future__ import annotations

import heapq
import os
import stat

PATHSEP = "/"


def canonical_pathname(filename: str) -> str:
    """Return an absolute form of `filename` with ``/./`` and ``/../`` removed.

    Absolute and empty names are returned unchanged, as is the name when
    the current directory cannot be determined. A trailing ``.`` or
    ``..`` component is kept as it is.
    """
    if not filename or filename.startswith("/"):
        return filename

    try:
        curdir = os.getcwd()
    except OSError:
        return filename

    work = curdir if curdir.endswith("/") else curdir + "/"
    work += filename

    *inner, last = work.split("/")
    stack: list[str] = []
    for part in inner:
        if part == ".":
            continue
        if part == "..":
            # The leading root component is never removed.
            if len(stack) > 1:
                stack.pop()
            continue
        stack.append(part)
    stack.append(last)
    return "/".join(stack)


def _last_separator(filename: str) -> int:
    where = filename.rfind("/")
    if where == -1:
        where = filename.rfind("\\")
    return where


def split_filename(filename: str) -> tuple[str, str]:
    """Split `filename` into (directory with trailing separator, name).

    A name without any separator is placed in ``./``.
    """
    where = _last_separator(filename)
    if where == -1:
        return "." + PATHSEP, filename
    return filename[:where + 1], filename[where + 1:]


def split_relative_filename(filename: str, basepath: str) -> str:
    """Drop as many leading characters of `filename` as `basepath` is long."""
    return filename[len(basepath):]


def _lstat(filename: str) -> os.stat_result | None:
    try:
        return os.lstat(filename)
    except OSError:
        return None


def file_exists(filename: str) -> bool:
    """Whether `filename` names an existing regular file (not followed if a link)."""
    st = _lstat(filename)
    return st is not None and bool(st.st_mode & stat.S_IFREG)


def get_file_size(filename: str) -> int:
    """Size of the regular file `filename`, or 0 if it is not one."""
    st = _lstat(filename)
    if st is not None and st.st_mode & stat.S_IFREG:
        return st.st_size
    return 0


def _collect(fn: str, recursive: bool, matches: list[str]) -> list[str]:
    """Add `fn` to the matches if it is a file, or its contents if a directory."""
    st = _lstat(fn)
    if st is None:
        return matches
    if stat.S_ISDIR(st.st_mode) and recursive:
        found = find_files(fn, "*", True)
        return list(heapq.merge(matches, found))
    if stat.S_ISREG(st.st_mode):
        matches.append(fn)
    return matches


def _matches_single(name: str, wildcard: str) -> bool:
    return len(name) == len(wildcard) and all(
        w == "?" or w == n for w, n in zip(wildcard, name)
    )


def find_files(path: str, wildcard: str, recursive: bool) -> list[str]:
    """Return the files in `path` whose names match `wildcard`.

    The first ``*`` (or, failing that, the first ``?``) in the wildcard
    is the only one treated specially: with ``*`` the name must begin
    with the text before it, end with the text after it and be at least
    as long as the wildcard; with ``?`` every ``?`` matches one
    character. Matching directories are searched when `recursive` is set.
    """
    if not path.endswith("/"):
        path += "/"
    matches: list[str] = []

    where = wildcard.find("*")
    if where == -1:
        where = wildcard.find("?")

    if where == -1:
        return _collect(path + wildcard, recursive, matches)

    front = wildcard[:where]
    multiple = wildcard[where] == "*"
    back = wildcard[where + 1:]

    try:
        names = os.listdir(path)
    except OSError:
        return matches

    for name in names:
        if multiple:
            matched = (
                len(name) >= len(wildcard)
                and name[:where] == front
                and name[len(name) - len(back):] == back
            )
        else:
            matched = _matches_single(name, wildcard)
        if matched:
            matches = _collect(path + name, recursive, matches)

    return matches


class FileSizeCache:
    """Remembers file sizes so each file is looked up on disk only once."""

    def __init__(self) -> None:
        self._cache: dict[str, int] = {}

    def get(self, filename: str) -> int:
        """Size of `filename`, read from disk the first time it is asked for."""
        try:
            return self._cache[filename]
        except KeyError:
            size = get_file_size(filename)
            self._cache[filename] = size
            return size