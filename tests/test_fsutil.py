import os

import pytest

from hxlib.fsutil import basename, lock_write, set_blocking, set_close_on_exec


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/usr/local/bin/hx", "hx"),
        ("hx", "hx"),
        ("dir/", ""),
        ("/", ""),
        ("", ""),
        ("a/b/c.txt", "c.txt"),
    ],
)
def test_basename(path, expected):
    assert basename(path) == expected


@pytest.fixture
def pipe():
    r, w = os.pipe()
    yield r, w
    os.close(r)
    os.close(w)


def test_set_blocking_toggles(pipe):
    r, _ = pipe
    set_blocking(r, False)
    assert os.get_blocking(r) is False
    set_blocking(r, True)
    assert os.get_blocking(r) is True


def test_set_close_on_exec_on_clears_flag(pipe):
    r, _ = pipe
    set_close_on_exec(r, True)
    assert os.get_inheritable(r) is True
    set_close_on_exec(r, False)
    assert os.get_inheritable(r) is False


def test_set_blocking_bad_fd_raises(pipe):
    r, _ = pipe
    bad = r + 1000
    with pytest.raises(OSError):
        set_blocking(bad, True)


def test_lock_write_on_read_only_fd_raises(tmp_path):
    target = tmp_path / "pidfile"
    target.write_text("x")
    fd = os.open(target, os.O_RDONLY)
    try:
        with pytest.raises(OSError):
            lock_write(fd)
    finally:
        os.close(fd)


def test_lock_write_on_closed_fd_raises(tmp_path):
    target = tmp_path / "pidfile"
    fd = os.open(target, os.O_RDWR | os.O_CREAT, 0o600)
    os.close(fd)
    with pytest.raises(OSError):
        lock_write(fd)