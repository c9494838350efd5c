"""Files on disk that are read or written in pieces at given offsets."""

from __future__ import annotations

import os
from typing import BinaryIO

from par2kit.paths import file_exists, get_file_size

MAX_OFFSET = 0x7FFFFFFFFFFFFFFF
# Largest single read or write, kept 8-byte aligned.
MAX_LENGTH = 0xFFFFFFFF & ~7


class DiskFileError(OSError):
    """A disk file could not be created, opened, read, written, renamed or deleted."""


def _last_separator(pathname: str) -> int:
    where = pathname.rfind("/")
    if where == -1:
        where = pathname.rfind("\\")
    return where


class DiskFile:
    """A file that is read from or written to at arbitrary offsets."""

    def __init__(self) -> None:
        self._filename = ""
        self._filesize = 0
        self._file: BinaryIO | None = None
        self._offset = 0
        self._exists = False

    @property
    def filename(self) -> str:
        """The name of the file."""
        return self._filename

    @property
    def filesize(self) -> int:
        """The size of the file as far as this object knows."""
        return self._filesize

    @property
    def exists(self) -> bool:
        """Whether the file is known to exist on disk."""
        return self._exists

    @property
    def is_open(self) -> bool:
        """Whether the file is currently open."""
        return self._file is not None

    def _require_closed(self) -> None:
        if self._file is not None:
            raise DiskFileError(f"{self._filename} is already open")

    def _require_open(self) -> BinaryIO:
        if self._file is None:
            raise DiskFileError(f"{self._filename or 'file'} is not open")
        return self._file

    def create_parent_directory(self, pathname: str) -> None:
        """Make sure the directory that will hold `pathname` exists."""
        where = _last_separator(pathname)
        if where == -1:
            return
        path = pathname[:where]
        if not path:
            return
        try:
            os.stat(path)
            return  # the caller deals with non-directories
        except OSError:
            pass
        self.create_parent_directory(path)
        try:
            os.mkdir(path, 0o755)
        except OSError as exc:
            raise DiskFileError(
                f"Could not create the {path} directory: {exc.strerror}"
            ) from exc

    def create(self, filename: str, filesize: int) -> None:
        """Create a new file and extend it to `filesize` bytes."""
        self._require_closed()
        self._filename = filename
        self._filesize = filesize

        self.create_parent_directory(filename)

        if file_exists(filename):
            raise DiskFileError(f'Could not create "{filename}": File already exists.')

        try:
            handle = open(filename, "wb")
        except OSError as exc:
            raise DiskFileError(f"Could not create {filename}: {exc.strerror}") from exc

        if filesize > MAX_OFFSET:
            handle.close()
            os.remove(filename)
            raise DiskFileError(f"Requested file size for {filename} is too large.")

        if filesize > 0:
            try:
                handle.seek(filesize - 1)
                handle.write(bytes([filesize & 0xFF]))
                handle.flush()
            except OSError as exc:
                handle.close()
                os.remove(filename)
                raise DiskFileError(
                    f"Could not set end of file of {filename}: {exc.strerror}"
                ) from exc

        self._file = handle
        self._offset = filesize
        self._exists = True

    def write(self, offset: int, data, maxlength: int = MAX_LENGTH) -> None:
        """Write `data` at `offset`, at most `maxlength` bytes per call to the OS."""
        handle = self._require_open()
        view = memoryview(data).cast("B")
        length = len(view)

        if self._offset != offset:
            if offset > MAX_OFFSET:
                raise DiskFileError(
                    f"Could not write {length} bytes to {self._filename} at offset {offset}"
                )
            try:
                handle.seek(offset)
            except OSError as exc:
                raise DiskFileError(
                    f"Could not write {length} bytes to {self._filename} "
                    f"at offset {offset}: {exc.strerror}"
                ) from exc
            self._offset = offset

        pos = 0
        while pos < length:
            chunk = view[pos:pos + maxlength]
            try:
                wrote = handle.write(chunk)
            except OSError as exc:
                raise DiskFileError(
                    f"Could not write {length} bytes to {self._filename} "
                    f"at offset {offset}: {exc.strerror}"
                ) from exc
            if wrote != len(chunk):
                raise DiskFileError(
                    f"Could not write {length} bytes to {self._filename} at offset {offset}"
                )
            pos += wrote
            self._offset += wrote
            self._filesize = max(self._filesize, self._offset)

    def open(self, filename: str | None = None, filesize: int | None = None) -> None:
        """Open a file for reading.

        Without a name the current one is reopened; without a size the
        size is taken from the disk.
        """
        self._require_closed()
        if filename is None:
            filename = self._filename
        if filesize is None:
            filesize = get_file_size(filename)
        self._filename = filename
        self._filesize = filesize

        if filesize > MAX_OFFSET:
            raise DiskFileError(f"File size for {filename} is too large.")

        try:
            self._file = open(filename, "rb")
        except OSError as exc:
            raise DiskFileError(f'Could not open "{filename}": {exc.strerror}') from exc

        self._offset = 0
        self._exists = True

    def read(self, offset: int, length: int, maxlength: int = MAX_LENGTH) -> bytes:
        """Read exactly `length` bytes at `offset`."""
        handle = self._require_open()

        if self._offset != offset:
            if offset > MAX_OFFSET:
                raise DiskFileError(
                    f"Could not read {length} bytes from {self._filename} at offset {offset}"
                )
            try:
                handle.seek(offset)
            except OSError as exc:
                raise DiskFileError(
                    f"Could not read {length} bytes from {self._filename} "
                    f"at offset {offset}: {exc.strerror}"
                ) from exc
            self._offset = offset

        parts = []
        remaining = length
        while remaining > 0:
            want = min(remaining, maxlength)
            try:
                got = handle.read(want)
            except OSError as exc:
                raise DiskFileError(
                    f"Could not read {length} bytes from {self._filename} "
                    f"at offset {offset}: {exc.strerror}"
                ) from exc
            if len(got) != want:
                self._offset += len(got)
                raise DiskFileError(
                    f"Could not read {length} bytes from {self._filename} at offset {offset}"
                )
            parts.append(got)
            self._offset += want
            remaining -= want

        return b"".join(parts)

    def close(self) -> None:
        """Close the file if it is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def rename(self, filename: str | None = None) -> None:
        """Rename the closed file; without a name pick the first free ``name.N``."""
        self._require_closed()
        if filename is None:
            index = 1
            while os.path.lexists(f"{self._filename}.{index}"):
                index += 1
            filename = f"{self._filename}.{index}"
        try:
            os.rename(self._filename, filename)
        except OSError as exc:
            raise DiskFileError(
                f"{self._filename} cannot be renamed to {filename}"
            ) from exc
        self._filename = filename

    def delete(self) -> None:
        """Delete the closed file from disk."""
        self._require_closed()
        if not self._filename:
            raise DiskFileError("Cannot delete a file without a name")
        try:
            os.unlink(self._filename)
        except OSError as exc:
            raise DiskFileError(f"Cannot delete {self._filename}") from exc
        self._exists = False

    def __enter__(self) -> DiskFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class DiskFileMap:
    """Tracks which DiskFile stands for which file name, so none is processed twice."""

    def __init__(self) -> None:
        self._files: dict[str, DiskFile] = {}

    @staticmethod
    def _name_of(diskfile: DiskFile) -> str:
        if not diskfile.filename:
            raise ValueError("the disk file has no name")
        return diskfile.filename

    def insert(self, diskfile: DiskFile) -> bool:
        """Add `diskfile`; False if its name is already present."""
        name = self._name_of(diskfile)
        if name in self._files:
            return False
        self._files[name] = diskfile
        return True

    def remove(self, diskfile: DiskFile) -> None:
        """Forget the entry with `diskfile`'s name."""
        self._files.pop(self._name_of(diskfile), None)

    def find(self, filename: str) -> DiskFile | None:
        """The DiskFile registered under `filename`, or None."""
        if not filename:
            raise ValueError("filename must not be empty")
        return self._files.get(filename)

    def __len__(self) -> int:
        return len(self._files)