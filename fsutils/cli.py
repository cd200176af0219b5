#!/usr/bin/env python3
import logging

import fire

from fsutils.xdir import (
    find_matching_content,
    get_default_cache_directory,
    get_list_of_directory_contents,
)
from fsutils.xfile import LineFile, get_last_line_from_file
from fsutils.xfs import (
    copy_file,
    create_directory,
    delete_directory,
    delete_files_matching_pattern,
    find_replace_in_file,
    is_file_contains_text,
    move_file,
)
from fsutils.xhttp import download_file

logging.basicConfig(level=logging.INFO)


def download(url: str, file_path: str, user_agent: str = None):
    """Download url to file_path.

    Args:
        url: url to GET
        file_path: local destination
        user_agent: replaces the default browser like user agent
    """
    headers = {'User-Agent': user_agent} if user_agent else None
    download_file(url, file_path, headers)


def ls(directory_path: str = '.', *patterns, files: bool = True, dirs: bool = True):
    """List names in directory_path matching any regular expression (default: all)."""
    return get_list_of_directory_contents(directory_path, list(patterns) or ['.*'], files, dirs)


def find(directory_path: str = '.', *patterns, files: bool = True, dirs: bool = True, recursive: bool = True):
    """Like ls, but returns full paths and walks sub directories by default."""
    return find_matching_content(directory_path, list(patterns) or ['.*'], files, dirs, recursive)


def grep(file_path: str, pattern: str):
    return is_file_contains_text(file_path, pattern)


def head(file_path: str):
    """Print the first line of file_path."""
    with LineFile().open(file_path) as f:
        return f.get_first_line().decode('utf-8')


def tail(file_path: str):
    """Print the last line of file_path."""
    return get_last_line_from_file(file_path).decode('utf-8')


def pop(file_path: str):
    """Remove and print the first line of file_path."""
    with LineFile().open(file_path) as f:
        line = f.get_first_line()
        f.remove_first_line()
    return line.decode('utf-8')


def mkdir(directory_path: str, mode: str = ''):
    """Create directory_path recursively, mode is octal like 755."""
    create_directory(directory_path, int(str(mode), 8) if mode else 0)


def main():
    fire.Fire({
        'download': download,
        'copy': copy_file,
        'move': move_file,
        'rm': delete_files_matching_pattern,
        'rmdir': delete_directory,
        'mkdir': mkdir,
        'ls': ls,
        'find': find,
        'grep': grep,
        'replace': find_replace_in_file,
        'head': head,
        'tail': tail,
        'pop': pop,
        'cachedir': get_default_cache_directory,
    })


if __name__ == '__main__':
    main()
