import os
import stat

import pytest
from fsutils.xfile import (
    FileNotOpenError,
    LineFile,
    get_file_contents,
    get_last_line_from_file,
    remove_first_line_from_file,
)

LINES = ['First written line.', 'Second written line.', 'Third written line.']


@pytest.fixture
def lines_file(tmp_path):
    file_path = tmp_path / 'file.txt'
    with LineFile().open(file_path) as f:
        for line in LINES:
            f.write_line(line)
    return file_path


def test_write_lines_then_read_contents(lines_file):
    assert lines_file.read_bytes() == b'First written line.\nSecond written line.\nThird written line.\n'
    with LineFile().open(lines_file) as f:
        assert f.get_file_contents() == b'First written line.\nSecond written line.\nThird written line.'


def test_get_file_contents_trims_only_one_newline(tmp_path):
    file_path = tmp_path / 'file.txt'
    file_path.write_bytes(b'a\nb\n\n')
    assert get_file_contents(file_path) == b'a\nb\n'


def test_get_file_contents_of_empty_file(tmp_path):
    assert get_file_contents(tmp_path / 'new.txt') == b''
    assert (tmp_path / 'new.txt').exists()


def test_remove_first_line(lines_file):
    with LineFile().open(lines_file) as f:
        f.remove_first_line()
    # "Second written line.\nThird written line.\n"
    assert os.path.getsize(lines_file) == 41

    with LineFile().open(lines_file) as f:
        assert f.get_first_line() == b'Second written line.'
        assert f.get_file_contents() == b'Second written line.\nThird written line.'


def test_remove_first_line_keeps_handle_usable(lines_file):
    with LineFile().open(lines_file) as f:
        f.remove_first_line()
        f.write_line('Fourth written line.')
        assert f.get_first_line() == b'Second written line.'
        f.remove_first_line()
        assert f.get_file_contents() == b'Third written line.\nFourth written line.'


def test_remove_first_line_without_newline_empties_file(tmp_path):
    file_path = tmp_path / 'file.txt'
    file_path.write_bytes(b'only line')
    remove_first_line_from_file(file_path)
    assert file_path.read_bytes() == b''


def test_remove_first_line_from_file(tmp_path):
    file_path = tmp_path / 'file.txt'
    file_path.write_bytes(b'First written line.\nSecond written line.\nThird written line.')
    remove_first_line_from_file(file_path)
    assert get_file_contents(file_path) == b'Second written line.\nThird written line.'


def test_get_first_line_without_newline(tmp_path):
    file_path = tmp_path / 'file.txt'
    file_path.write_bytes(b'single line')
    with LineFile().open(file_path) as f:
        assert f.get_first_line() == b'single line'
        # reading again starts from the beginning
        assert f.get_first_line() == b'single line'


def test_get_first_line_of_empty_file(tmp_path):
    with LineFile().open(tmp_path / 'file.txt') as f:
        assert f.get_first_line() == b''


def test_get_last_line(lines_file):
    assert get_last_line_from_file(lines_file) == b'Third written line.'
    with LineFile().open(lines_file) as f:
        f.write_string('no terminator')
        assert f.get_last_line() == b'no terminator'


@pytest.mark.parametrize('content, expected', [
    (b'a\nb\n\n', b'b'),
    (b'a\nb\n\n\n', b'b'),
    (b'a\nb', b'b'),
    (b'\n\n', b''),
    (b'', b''),
])
def test_get_last_line_skips_trailing_blank_lines(tmp_path, content, expected):
    file_path = tmp_path / 'file.txt'
    file_path.write_bytes(content)
    assert get_last_line_from_file(file_path) == expected


def test_write_bytes_and_string(tmp_path):
    file_path = tmp_path / 'file.txt'
    with LineFile().open(file_path) as f:
        f.write_bytes(bytes([255, 255, 255]))
        f.write_string('\nNew line\n')
    assert os.path.getsize(file_path) == 13


def test_writes_always_append(tmp_path):
    file_path = tmp_path / 'file.txt'
    file_path.write_bytes(b'existing\n')
    with LineFile().open(file_path) as f:
        f.get_first_line()
        f.write_line('appended')
    assert file_path.read_bytes() == b'existing\nappended\n'


def test_open_permissions(tmp_path):
    file_path = tmp_path / 'private.txt'
    with LineFile().open(file_path, 0o600):
        pass
    assert stat.S_IMODE(os.stat(file_path).st_mode) == 0o600


def test_open_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        LineFile().open(tmp_path / 'missing' / 'file.txt')


def test_unopened_handle_raises():
    f = LineFile()
    assert not f.is_open()
    with pytest.raises(FileNotOpenError):
        f.write_line('line')
    with pytest.raises(FileNotOpenError):
        f.write_bytes(b'bytes')
    with pytest.raises(FileNotOpenError):
        f.get_file_contents()
    with pytest.raises(FileNotOpenError):
        f.get_first_line()
    with pytest.raises(FileNotOpenError):
        f.remove_first_line()
    with pytest.raises(FileNotOpenError):
        f.close()


def test_closed_handle_raises(tmp_path):
    f = LineFile().open(tmp_path / 'file.txt')
    f.close()
    with pytest.raises(FileNotOpenError):
        f.write_line('line')
    with pytest.raises(FileNotOpenError):
        f.close()


def test_open_twice_raises(tmp_path):
    with LineFile().open(tmp_path / 'file.txt') as f:
        with pytest.raises(RuntimeError):
            f.open(tmp_path / 'other.txt')


def test_context_manager_closes_on_error(tmp_path):
    f = LineFile()
    with pytest.raises(ValueError):
        with f.open(tmp_path / 'file.txt'):
            f.write_line('line')
            raise ValueError('boom')
    assert not f.is_open()
    assert (tmp_path / 'file.txt').read_bytes() == b'line\n'


def test_reopen_after_close(tmp_path):
    f = LineFile()
    f.open(tmp_path / 'file.txt')
    f.write_line('one')
    f.close()
    f.open(tmp_path / 'file.txt')
    f.write_line('two')
    assert f.get_file_contents() == b'one\ntwo'
    f.close()
