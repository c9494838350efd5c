import os
import random

import pytest

from par2kit.diskfile import DiskFile, DiskFileError, DiskFileMap

INPUT1 = b"diskfile_test test1 input1.txt"
INPUT2 = b"diskfile_test test3 input2.txt is longer"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_new_diskfile_state():
    diskfile = DiskFile()
    assert diskfile.is_open is False
    assert diskfile.exists is False
    assert diskfile.filename == ""


def test_open_and_read(workdir):
    (workdir / "input1.txt").write_bytes(INPUT1)
    diskfile = DiskFile()
    diskfile.open("input1.txt")
    assert diskfile.is_open
    assert diskfile.exists
    assert diskfile.filename == "input1.txt"
    assert diskfile.filesize == len(INPUT1)
    assert diskfile.read(0, len(INPUT1)) == INPUT1

    rng = random.Random(345087209)
    for _ in range(100):
        offset = rng.randrange(len(INPUT1) - 1)
        length = 1 + rng.randrange(len(INPUT1) - offset - 1) if len(INPUT1) - offset - 1 > 0 else 1
        assert diskfile.read(offset, length) == INPUT1[offset:offset + length]

    diskfile.close()
    assert diskfile.is_open is False
    diskfile.open()
    assert diskfile.is_open
    diskfile.close()
    assert diskfile.is_open is False


def test_open_missing_file_raises(workdir):
    diskfile = DiskFile()
    with pytest.raises(DiskFileError):
        diskfile.open("definitely_not_here")
    assert diskfile.exists is False


def test_read_past_end_raises(workdir):
    (workdir / "input1.txt").write_bytes(INPUT1)
    with DiskFile() as diskfile:
        diskfile.open("input1.txt")
        with pytest.raises(DiskFileError):
            diskfile.read(0, len(INPUT1) + 5)


def test_create_rename_delete(workdir):
    diskfile = DiskFile()
    diskfile.create("input2.txt", len(INPUT2))
    assert diskfile.is_open
    assert diskfile.exists
    assert diskfile.filesize == len(INPUT2)
    assert diskfile.filename == "input2.txt"
    diskfile.write(0, INPUT2)
    diskfile.close()
    assert diskfile.is_open is False

    diskfile.rename("input3.txt")
    assert not os.path.exists("input2.txt")
    assert diskfile.filename == "input3.txt"
    assert diskfile.exists
    assert (workdir / "input3.txt").read_bytes() == INPUT2

    diskfile.delete()
    assert diskfile.exists is False
    assert not os.path.exists("input3.txt")


def test_create_sets_size_on_disk(workdir):
    with DiskFile() as diskfile:
        diskfile.create("sized.bin", 1000)
        assert diskfile.filesize == 1000
    with DiskFile() as reopened:
        reopened.open("sized.bin")
        assert reopened.filesize == 1000
        assert len(reopened.read(0, 1000)) == 1000


def test_create_makes_parent_directories(workdir):
    with DiskFile() as diskfile:
        diskfile.create("a/b/c/file.bin", 4)
        diskfile.write(0, b"abcd")
    with DiskFile() as reopened:
        reopened.open("a/b/c/file.bin")
        assert reopened.filesize == 4
        assert reopened.read(0, 4) == b"abcd"


def test_create_existing_file_fails(workdir):
    (workdir / "input1.txt").write_bytes(INPUT1)
    diskfile = DiskFile()
    with pytest.raises(DiskFileError):
        diskfile.create("input1.txt", len(INPUT1))
    assert (workdir / "input1.txt").read_bytes() == INPUT1


def test_random_order_block_writes(workdir):
    rng = random.Random(23461119)
    blocksize = 1
    while blocksize < len(INPUT2):
        with DiskFile() as diskfile:
            diskfile.create("input2.txt", len(INPUT2))
            blockcount = (len(INPUT2) + blocksize - 1) // blocksize
            order = list(range(blockcount))
            rng.shuffle(order)
            for block in order:
                offset = blocksize * block
                diskfile.write(offset, INPUT2[offset:offset + blocksize])
        with DiskFile() as diskfile:
            diskfile.open("input2.txt", len(INPUT2))
            assert diskfile.read(0, len(INPUT2)) == INPUT2
        os.remove("input2.txt")
        blocksize *= 2


def test_small_maxlength_read_write(workdir):
    contents = b"diskfile_test test6 input1.txt"
    with DiskFile() as diskfile:
        diskfile.create("input1.txt", len(contents))
        diskfile.write(0, contents, 2)
    with DiskFile() as diskfile:
        diskfile.open("input1.txt")
        assert diskfile.read(0, len(contents), 2) == contents


def test_mid_file_writes_and_reads(workdir):
    contents = b"diskfile_test test6 input2.txt is longer"
    with DiskFile() as diskfile:
        diskfile.create("input2.txt", len(contents))
        midpoint = len(contents)
        diskfile.write(midpoint, contents[midpoint:], 3)
        diskfile.write(0, contents[:midpoint], 4)
    with DiskFile() as diskfile:
        diskfile.open("input2.txt")
        midpoint = len(contents) - 2
        tail = diskfile.read(midpoint, len(contents) - midpoint, 4)
        head = diskfile.read(0, midpoint, 3)
        assert head + tail == contents


def test_write_extends_filesize(workdir):
    with DiskFile() as diskfile:
        diskfile.create("grow.bin", 0)
        diskfile.write(0, b"hello")
        assert diskfile.filesize == 5
        diskfile.write(10, b"x")
        assert diskfile.filesize == 11


def test_rename_automatic_name(workdir):
    (workdir / "data.bin").write_bytes(b"z")
    (workdir / "data.bin.1").write_bytes(b"y")
    diskfile = DiskFile()
    diskfile.open("data.bin")
    diskfile.close()
    diskfile.rename()
    assert diskfile.filename == "data.bin.2"
    assert (workdir / "data.bin.2").read_bytes() == b"z"


def test_rename_while_open_raises(workdir):
    (workdir / "data.bin").write_bytes(b"z")
    diskfile = DiskFile()
    diskfile.open("data.bin")
    with pytest.raises(DiskFileError):
        diskfile.rename("other.bin")
    diskfile.close()


def test_delete_missing_raises(workdir):
    (workdir / "data.bin").write_bytes(b"z")
    diskfile = DiskFile()
    diskfile.open("data.bin")
    diskfile.close()
    os.remove("data.bin")
    with pytest.raises(DiskFileError):
        diskfile.delete()


def test_diskfile_map(workdir):
    (workdir / "input1.txt").write_bytes(b"diskfile_test test3 input1.txt")
    dfm = DiskFileMap()
    assert dfm.find("input1.txt") is None

    df1 = DiskFile()
    df1.open("input1.txt")
    assert dfm.insert(df1) is True
    assert dfm.find("input1.txt") is df1

    df2 = DiskFile()
    df2.open("input1.txt")
    assert dfm.insert(df2) is False
    assert dfm.find("input1.txt") is df1

    dfm.remove(df1)
    assert dfm.find("input1.txt") is None
    df1.close()
    df2.close()


def test_diskfile_map_rejects_unnamed():
    dfm = DiskFileMap()
    with pytest.raises(ValueError):
        dfm.insert(DiskFile())
    with pytest.raises(ValueError):
        dfm.find("")