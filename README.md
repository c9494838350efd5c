# par2kit

`par2kit` is a pure Python library of the parts that PAR 1.0 and PAR 2.0
parity archives are made of. It needs no other packages.

## Modules

- `par2kit.md5`: `MD5Context` computes an MD5 hash in steps. Use `update(data)`
  to add bytes and `update_zeros(length)` to add a run of zero bytes without
  building a buffer for them. `final()` pads the message and returns an
  `MD5Hash`. `hash()` reads out the current state without padding. `reset()`
  starts the context again, and `bytes_processed` gives the number of bytes
  added so far.
  `MD5Hash` holds the 16-byte `digest`. Hashes are ordered with the last byte
  counting most, as a little-endian 128-bit number. `hex()` and `str()` give
  upper-case hex **last byte first**. For the usual digest order, use
  `h.digest.hex()`.
- `par2kit.galois`: `Galois8` (GF(2^8), generator 0x11D) and `Galois16`
  (GF(2^16), generator 0x1100B) are immutable field elements with these
  operations:
  - `+` and `-`, which are both XOR
  - `*` and `/`, where dividing by zero raises `ZeroDivisionError`
  - `pow()`, `**` and `^`, which all raise to an integer power
  - `log()` and `alog()`
  - `int()`

  Each field has its log and antilog tables in a `GaloisTable`.
- `par2kit.recovery`: the `Scheme`, `NoiseLevel` and `Result` enumerations.
  It also has `compute_recovery_file_count`, which decides how many recovery
  files a number of recovery blocks is spread over. It raises
  `RecoveryCountError` (a `ValueError`) in these cases:
  - the scheme is unknown
  - more files are asked for than there are blocks
  - the limited scheme is given a zero block size or an empty largest file
- `par2kit.par1format`: `Par1FileHeader` and `Par1FileEntry` read and write
  the binary records of PAR 1.0 files with `from_bytes` and `to_bytes`. Entry
  names are UTF-16LE. `FileEntryStatus` holds the entry status flags.
  `is_par1_magic` tests whether data starts with the PAR 1.0 magic bytes.
- `par2kit.paths`: helpers for file names and the file system, for
  `/`-separated paths:
  - `canonical_pathname` makes a name absolute and removes `/./` and `/../`.
  - `split_filename` returns a `(directory, name)` pair.
  - `split_relative_filename` removes a base path from the front of a name.
  - `file_exists` and `get_file_size` check regular files only, and do not
    follow symbolic links.
  - `find_files(path, wildcard, recursive)` returns a list of paths. Only the
    first `*` in the wildcard is special, or, if there is no `*`, the `?`
    characters.
  - `FileSizeCache` looks up each file's size on disk only once.
- `par2kit.diskfile`: `DiskFile` handles one file on disk:
  - `create(filename, filesize)` makes a new file of a set size, creating
    parent directories as needed.
  - `open(filename=None, filesize=None)` opens a file for reading.
  - `read(offset, length)` returns the data at an offset.
  - `write(offset, data)` writes data at an offset.
  - `close()` closes the file.
  - `rename(filename=None)` renames the closed file. With no name it picks the
    first free `name.N`.
  - `delete()` removes the closed file.

  Each of these raises `DiskFileError` (an `OSError`) when it fails. A
  `DiskFile` also works as a context manager, which closes the file on exit.
  `DiskFileMap` keeps one `DiskFile` per file name, so that no file is
  handled twice.

## Examples

```python
from par2kit.md5 import MD5Context

ctx = MD5Context()
ctx.update(b"hello ")
ctx.update(b"world")
digest = ctx.final()
print(digest.digest.hex())  # usual MD5 hex order
print(digest.hex())         # PAR2 order, last byte first
```

```python
from par2kit.galois import Galois16

a, b = Galois16(0x1234), Galois16(0xBEEF)
product = a * b
assert product / b == a
assert a + a == Galois16(0)
```

```python
from par2kit.recovery import Scheme, compute_recovery_file_count

# 64 recovery blocks, spread over files whose sizes double each time.
count = compute_recovery_file_count(Scheme.VARIABLE, 64, 4, 4, 0)
print(count)  # 7
```

```python
from par2kit.diskfile import DiskFile

with DiskFile() as f:
    f.create("out/data.bin", 11)
    f.write(0, b"hello world")

with DiskFile() as f:
    f.open("out/data.bin")
    assert f.read(6, 5) == b"world"
```

## What it does not do

`par2kit` supplies building blocks only. It has no command-line program, and
it does not create, verify or repair parity sets. It does not compute
Reed-Solomon recovery data or CRC checksums, and it does not read or write
PAR 2.0 packets.

## Tests

Install the test extra, then run pytest:

```
pip install -e .[test]
pytest
```