'''
Line oriented access to a single text file.

    with LineFile().open('/tmp/queue.txt') as f:
        f.write_line('job-1')
        f.write_line('job-2')
        first = f.get_first_line()   # b'job-1'
        f.remove_first_line()

Every read loads the whole file into memory, so LineFile is only meant
for files that comfortably fit in memory. There is no locking, a LineFile
must not be shared between threads or processes writing the same file.
'''
import logging
import os
from typing import BinaryIO, Optional

from .config import config

logger = logging.getLogger(__name__)


class FileNotOpenError(RuntimeError):
    pass


class LineFile:

    def __init__(self):
        self._file: Optional[BinaryIO] = None
        self.path = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.is_open():
            self.close()

    def is_open(self) -> bool:
        return self._file is not None

    def _opened_file(self, action: str) -> BinaryIO:
        if self._file is None:
            raise FileNotOpenError(f'There is no open file {action}.')
        return self._file

    def open(self, path, permissions: int = 0) -> 'LineFile':
        '''
        Open path for reading and appending, the file is created when missing.
        permissions only apply on creation, 0 means config.DEFAULT_FILE_MODE.
        '''
        if self.is_open():
            raise RuntimeError(f'{self.path} is still open, close it first.')
        if permissions == 0:
            permissions = config.DEFAULT_FILE_MODE

        def _opener(file_path, flags):
            return os.open(file_path, flags, permissions)

        self._file = open(path, 'a+b', opener=_opener)
        self.path = path
        logger.debug(f'opened {path}')
        return self

    def close(self):
        f = self._opened_file('to close')
        self._file = None
        f.close()
        logger.debug(f'closed {self.path}')

    def write_bytes(self, data: bytes):
        f = self._opened_file('for writing bytes to')
        f.write(data)
        f.flush()

    def write_string(self, text: str):
        f = self._opened_file('for writing strings to')
        f.write(text.encode('utf-8'))
        f.flush()

    def write_line(self, line: str):
        self._opened_file('for writing lines to')
        self.write_string(line + '\n')

    def _read_all(self, action: str) -> bytes:
        f = self._opened_file(action)
        f.flush()
        f.seek(0)
        data = f.read()
        f.seek(0)
        return data

    def get_file_contents(self) -> bytes:
        '''whole file, with at most one trailing newline removed'''
        data = self._read_all('for reading with')
        if data.endswith(b'\n'):
            return data[:-1]
        return data

    def get_first_line(self) -> bytes:
        '''first line without its terminator, the whole content when there is no newline'''
        data = self._read_all('for reading the first line of')
        index = data.find(b'\n')
        if index < 0:
            return data
        return data[:index]

    def get_last_line(self) -> bytes:
        '''last non-empty line, trailing blank lines are skipped'''
        data = self._read_all('for reading the last line of').rstrip(b'\n')
        return data[data.rfind(b'\n') + 1:]

    def remove_first_line(self):
        '''
        Drop the first line by rewriting the file: read everything, truncate,
        write back the rest. A file without a newline ends up empty.
        '''
        data = self._read_all('for removing the first line of')
        index = data.find(b'\n')
        remaining = data[index + 1:] if index >= 0 else b''
        f = self._file
        f.truncate(0)
        f.seek(0)
        f.write(remaining)
        f.flush()
        os.fsync(f.fileno())
        f.seek(0)
        logger.debug(f'removed first line of {self.path}, {len(remaining)} bytes left')


def get_file_contents(file_path) -> bytes:
    with LineFile().open(file_path) as f:
        return f.get_file_contents()


def get_last_line_from_file(file_path) -> bytes:
    with LineFile().open(file_path) as f:
        return f.get_last_line()


def remove_first_line_from_file(file_path):
    with LineFile().open(file_path) as f:
        f.remove_first_line()
