"""On-disk structures of PAR 1.0 files."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import ClassVar

from par2kit.md5 import MD5Hash

PAR1_MAGIC = b"PAR\0\0\0\0\0"

_HEADER_STRUCT = struct.Struct("<8sII16s16s6Q")
_ENTRY_STRUCT = struct.Struct("<3Q16s16s")


class FileEntryStatus(enum.IntFlag):
    """Status bits of a PAR 1.0 file list entry."""

    INPARITYVOLUME = 1
    CHECKED = 2


def is_par1_magic(data) -> bool:
    """Whether `data` starts with the PAR 1.0 magic bytes."""
    return bytes(data[:len(PAR1_MAGIC)]) == PAR1_MAGIC


@dataclass
class Par1FileHeader:
    """The fixed header at the start of a PAR 1.0 file."""

    SIZE: ClassVar[int] = _HEADER_STRUCT.size

    fileversion: int = 0
    programversion: int = 0
    controlhash: MD5Hash = field(default_factory=MD5Hash)
    sethash: MD5Hash = field(default_factory=MD5Hash)
    volumenumber: int = 0
    numberoffiles: int = 0
    filelistoffset: int = 0
    filelistsize: int = 0
    dataoffset: int = 0
    datasize: int = 0

    @classmethod
    def from_bytes(cls, data) -> Par1FileHeader:
        """Parse a header; raises ValueError if short or not PAR 1.0."""
        if len(data) < cls.SIZE:
            raise ValueError("data too short for a PAR 1.0 header")
        (magic, fileversion, programversion, controlhash, sethash,
         volumenumber, numberoffiles, filelistoffset, filelistsize,
         dataoffset, datasize) = _HEADER_STRUCT.unpack_from(bytes(data[:cls.SIZE]))
        if magic != PAR1_MAGIC:
            raise ValueError("not a PAR 1.0 header")
        return cls(
            fileversion=fileversion,
            programversion=programversion,
            controlhash=MD5Hash(controlhash),
            sethash=MD5Hash(sethash),
            volumenumber=volumenumber,
            numberoffiles=numberoffiles,
            filelistoffset=filelistoffset,
            filelistsize=filelistsize,
            dataoffset=dataoffset,
            datasize=datasize,
        )

    def to_bytes(self) -> bytes:
        """Serialise the header, magic included."""
        return _HEADER_STRUCT.pack(
            PAR1_MAGIC,
            self.fileversion,
            self.programversion,
            self.controlhash.digest,
            self.sethash.digest,
            self.volumenumber,
            self.numberoffiles,
            self.filelistoffset,
            self.filelistsize,
            self.dataoffset,
            self.datasize,
        )


@dataclass
class Par1FileEntry:
    """One entry of the file list in a PAR 1.0 file."""

    FIXED_SIZE: ClassVar[int] = _ENTRY_STRUCT.size

    status: FileEntryStatus = FileEntryStatus(0)
    filesize: int = 0
    hashfull: MD5Hash = field(default_factory=MD5Hash)
    hash16k: MD5Hash = field(default_factory=MD5Hash)
    name: str = ""

    @property
    def entrysize(self) -> int:
        """Size in bytes of the serialised entry."""
        return self.FIXED_SIZE + len(self.name.encode("utf-16-le"))

    @classmethod
    def from_bytes(cls, data) -> Par1FileEntry:
        """Parse one entry from the start of `data`."""
        if len(data) < cls.FIXED_SIZE:
            raise ValueError("data too short for a PAR 1.0 file entry")
        entrysize, status, filesize, hashfull, hash16k = _ENTRY_STRUCT.unpack_from(
            bytes(data[:cls.FIXED_SIZE])
        )
        if entrysize < cls.FIXED_SIZE or (entrysize - cls.FIXED_SIZE) % 2:
            raise ValueError("invalid PAR 1.0 file entry size")
        if len(data) < entrysize:
            raise ValueError("data too short for the PAR 1.0 file entry name")
        name = bytes(data[cls.FIXED_SIZE:entrysize]).decode("utf-16-le")
        return cls(
            status=FileEntryStatus(status),
            filesize=filesize,
            hashfull=MD5Hash(hashfull),
            hash16k=MD5Hash(hash16k),
            name=name,
        )

    def to_bytes(self) -> bytes:
        """Serialise the entry with its UTF-16LE name."""
        return _ENTRY_STRUCT.pack(
            self.entrysize,
            int(self.status),
            self.filesize,
            self.hashfull.digest,
            self.hash16k.digest,
        ) + self.name.encode("utf-16-le")