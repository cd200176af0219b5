'''
Pure string helpers for paths. Nothing here touches the filesystem.
Both '/' and '\\' are treated as separators.
'''
import posixpath

_SEPARATORS = ('/', '\\')


def _last_separator_index(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPARATORS)


def get_normalized_directory_path(directory_path: str) -> str:
    '''make sure a directory path ends with exactly one trailing separator'''
    if directory_path.endswith(_SEPARATORS):
        return directory_path
    return directory_path + '/'


def get_bare_directory_path(directory_path: str) -> str:
    '''drop a trailing separator, if any'''
    bare_path = directory_path
    if bare_path.endswith('/'):
        bare_path = bare_path[:-1]
    if bare_path.endswith('\\'):
        bare_path = bare_path[:-1]
    return bare_path


def get_file_name_from_path(path: str) -> str:
    if path == '':
        return '.'
    stripped = path.rstrip(''.join(_SEPARATORS))
    if stripped == '':
        return '/'
    return stripped[_last_separator_index(stripped) + 1:]


def get_file_extension(path: str) -> str:
    '''"dir/my_file.eng.txt" -> ".txt", empty when the last element has no dot'''
    for i in range(len(path) - 1, -1, -1):
        if path[i] in _SEPARATORS:
            break
        if path[i] == '.':
            return path[i:]
    return ''


def get_base_file_name(path: str) -> str:
    '''file name without its directory and without its last extension'''
    file_name = get_file_name_from_path(get_bare_directory_path(path))
    extension = get_file_extension(file_name)
    if extension:
        return file_name[:-len(extension)]
    return file_name


def get_base_directory(path: str) -> str:
    '''"/tmp/source.txt" -> "/tmp/"'''
    bare_path = get_bare_directory_path(path)
    return bare_path[:_last_separator_index(bare_path) + 1]


def get_current_directory(directory_path: str) -> str:
    '''last segment of a path, e.g. "/tmp/a/b" -> "b"'''
    base_path = get_base_directory(directory_path)
    if base_path and directory_path.startswith(base_path):
        return directory_path[len(base_path):]
    return directory_path


def get_parent_directory(path: str) -> str:
    '''everything except the last element of the path'''
    normalized = path
    if normalized.endswith(_SEPARATORS):
        normalized = normalized[:-1]
    index = _last_separator_index(normalized)
    if index < 0:
        return '.'
    parent = normalized[:index + 1]
    if '\\' in parent:
        # windows style or mixed separators, keep the separator of a root like "C:\"
        stripped = parent.rstrip(''.join(_SEPARATORS))
        if not stripped or stripped.endswith(':'):
            return stripped + parent[len(stripped)]
        return stripped
    return posixpath.normpath(parent)
