import logging
import os
import platform
import re
from typing import List

from .config import config
from .xpath import get_bare_directory_path, get_normalized_directory_path

logger = logging.getLogger(__name__)


def _compile_patterns(patterns):
    if isinstance(patterns, str):
        patterns = [patterns]
    return [re.compile(p) for p in patterns]


def _list_matching(directory_path, regexes, include_files, include_directories) -> List[str]:
    names = []
    with os.scandir(get_bare_directory_path(directory_path) or directory_path) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        for regex in regexes:
            if not regex.search(entry.name):
                continue
            is_dir = entry.is_dir(follow_symlinks=False)
            if is_dir and include_directories:
                names.append(entry.name + '/')
                break
            if not is_dir and include_files:
                names.append(entry.name)
                break
    return names


def get_list_of_directory_contents(directory_path,
                                   patterns,
                                   include_files: bool = True,
                                   include_directories: bool = True) -> List[str]:
    '''
    List the immediate children of directory_path whose name matches any of the
    regular expressions. Directories are returned with a trailing "/".
    Names are returned bare, sorted by name.
    '''
    regexes = _compile_patterns(patterns)
    return _list_matching(directory_path, regexes, include_files, include_directories)


def get_list_of_files(directory_path, pattern: str) -> List[str]:
    return get_list_of_directory_contents(directory_path, [pattern], True, False)


def get_list_of_directories(directory_path, pattern: str) -> List[str]:
    return get_list_of_directory_contents(directory_path, [pattern], False, True)


def find_matching_content(directory_path,
                          patterns,
                          include_files: bool = True,
                          include_directories: bool = True,
                          recursive: bool = False) -> List[str]:
    '''Like get_list_of_directory_contents, but results are fully qualified paths.'''
    regexes = _compile_patterns(patterns)
    if not recursive:
        prefix = get_normalized_directory_path(directory_path)
        names = _list_matching(directory_path, regexes, include_files, include_directories)
        return [prefix + name for name in names]

    def _raise(e):
        raise e

    results = []
    for root, dirs, _files in os.walk(directory_path, onerror=_raise):
        dirs.sort()
        prefix = get_normalized_directory_path(root)
        names = _list_matching(prefix, regexes, include_files, include_directories)
        results.extend(prefix + name for name in names)
    logger.debug(f'found {len(results)} entries under {directory_path}')
    return results


def is_directory_empty(directory_path) -> bool:
    with os.scandir(directory_path) as it:
        return next(it, None) is None


def get_working_directory() -> str:
    return os.getcwd()


def get_default_cache_directory() -> str:
    '''
    Directory for program data that is accessed often but can be regenerated.
    config.CACHE_DIR wins over the platform default.
    '''
    if config.CACHE_DIR:
        return config.CACHE_DIR
    home = os.path.expanduser('~')
    system = platform.system()
    if system == 'Linux':
        return os.path.join(home, '.cache')
    if system == 'Windows':
        return os.path.join(home, 'AppData', 'Local')
    if system == 'Darwin':
        return os.path.join(home, 'Library', 'Caches')
    raise OSError(f'could not determine cache directory on {system}')
