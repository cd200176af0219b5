import glob
import logging
import os
import platform
import re
import shutil
import stat

from .config import config
from .xpath import get_bare_directory_path

logger = logging.getLogger(__name__)


class NotRegularFileError(OSError):
    pass


def _is_disk_entry_exists(path) -> bool:
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError:
        # the entry is there, we just can't stat it
        return True
    return True


def is_file_exists(file_path) -> bool:
    return _is_disk_entry_exists(file_path)


def is_directory_exists(directory_path) -> bool:
    return _is_disk_entry_exists(directory_path)


def is_directory(path) -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def is_file(path) -> bool:
    '''True for a regular file. Raise OSError if path can not be stat'ed.'''
    return stat.S_ISREG(os.stat(path).st_mode)


def get_file_size(file_path) -> int:
    return os.stat(file_path).st_size


def _open_with_mode(path, flags, permissions):
    fd = os.open(path, flags, permissions)
    return os.fdopen(fd, 'ab' if flags & os.O_APPEND else 'wb')


def get_file_contents_as_bytes(file_path) -> bytes:
    with open(file_path, 'rb') as f:
        return f.read()


def write_bytes_to_file(file_path, data: bytes, permissions: int = 0):
    '''
    Create or truncate file_path and write data into it.
    permissions only apply when the file is created, 0 means config.DEFAULT_WRITE_MODE.
    '''
    if permissions == 0:
        permissions = config.DEFAULT_WRITE_MODE
    with _open_with_mode(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, permissions) as f:
        f.write(data)


def append_line_to_file(file_path, line: str, permissions: int = 0):
    '''
    Append line to the end of file_path as is, the caller decides about the line terminator.
    The file is created when missing, 0 permissions means config.DEFAULT_FILE_MODE.
    '''
    if permissions == 0:
        permissions = config.DEFAULT_FILE_MODE
    with _open_with_mode(file_path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, permissions) as f:
        f.write(line.encode('utf-8'))


def is_file_contains_text(file_path, pattern: str) -> bool:
    '''
    Check if any part of the file matches the regular expression.
    The whole file is loaded into memory, only use it on small files.
    '''
    regex = re.compile(pattern.encode('utf-8'))
    contents = get_file_contents_as_bytes(file_path)
    return regex.search(contents) is not None


def find_replace_in_file(file_path, pattern: str, replacement: str):
    '''
    Replace every match of the regular expression and rewrite the file.
    The whole file is loaded into memory, only use it on small files.
    '''
    regex = re.compile(pattern.encode('utf-8'))
    contents = get_file_contents_as_bytes(file_path)
    new_contents = regex.sub(replacement.encode('utf-8'), contents)
    with open(file_path, 'wb') as f:
        f.write(new_contents)


def create_directory(directory_path, permissions: int = 0):
    if permissions == 0:
        permissions = config.DEFAULT_DIR_MODE
    logger.debug(f'create directory {directory_path} mode={oct(permissions)}')
    os.makedirs(directory_path, mode=permissions, exist_ok=True)


def delete_file(file_path):
    '''remove a file, a symlink or an empty directory'''
    logger.debug(f'delete {file_path}')
    if os.path.isdir(file_path) and not os.path.islink(file_path):
        os.rmdir(file_path)
    else:
        os.remove(file_path)


def delete_files_matching_pattern(pattern: str):
    '''
    pattern is a shell glob like "/tmp/file*.txt", not a regular expression.
    Wildcards match dotfiles too. Matches are removed in sorted order with delete_file,
    the first failing removal is raised and the remaining matches are left in place.
    '''
    for file_path in sorted(glob.glob(pattern, include_hidden=True)):
        logger.debug(f'delete {file_path}, matched {pattern}')
        delete_file(file_path)


def delete_directory(directory_path):
    '''recursively remove directory_path, a missing path is not an error'''
    if not os.path.lexists(directory_path):
        return
    logger.debug(f'delete directory {directory_path}')
    if os.path.isdir(directory_path) and not os.path.islink(directory_path):
        shutil.rmtree(directory_path)
    else:
        os.remove(directory_path)


def rename_file(source_file, target_file):
    '''
    Rename source_file to target_file, an existing target is overwritten.
    The target is deleted explicitly instead of relying on os.rename overwrite
    behaviour, which differs between platforms.
    '''
    bare_source = get_bare_directory_path(source_file)
    bare_target = get_bare_directory_path(target_file)
    if bare_source == bare_target:
        return
    # windows is case insensitive, so go through a temporary name when only the case differs
    if platform.system() == 'Windows' and bare_source.lower() == bare_target.lower():
        temp_target = bare_target + '.tmp'
        logger.debug(f'rename {bare_source} -> {temp_target} -> {bare_target}')
        os.rename(bare_source, temp_target)
        os.rename(temp_target, bare_target)
        return
    # the case check above must happen before this, or we would delete the source on windows
    if is_file_exists(bare_target):
        delete_file(bare_target)
    logger.debug(f'rename {bare_source} -> {bare_target}')
    os.rename(bare_source, bare_target)


def move_file(source_file, target_file):
    rename_file(source_file, target_file)


def copy_file(source_file, target_file):
    '''copy the bytes of a regular file, permissions and times are not copied'''
    if not is_file(source_file):
        raise NotRegularFileError(f'{source_file} is not a regular file.')
    logger.debug(f'copy {source_file} -> {target_file}')
    shutil.copyfile(source_file, target_file)
