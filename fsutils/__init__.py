from .config import Config, config
from .xdir import (
    find_matching_content,
    get_default_cache_directory,
    get_list_of_directories,
    get_list_of_directory_contents,
    get_list_of_files,
    get_working_directory,
    is_directory_empty,
)
from .xfile import (
    FileNotOpenError,
    LineFile,
    get_file_contents,
    get_last_line_from_file,
    remove_first_line_from_file,
)
from .xfs import (
    NotRegularFileError,
    append_line_to_file,
    copy_file,
    create_directory,
    delete_directory,
    delete_file,
    delete_files_matching_pattern,
    find_replace_in_file,
    get_file_contents_as_bytes,
    get_file_size,
    is_directory,
    is_directory_exists,
    is_file,
    is_file_contains_text,
    is_file_exists,
    move_file,
    rename_file,
    write_bytes_to_file,
)
from .xhttp import download_file
from .xpath import (
    get_bare_directory_path,
    get_base_directory,
    get_base_file_name,
    get_current_directory,
    get_file_extension,
    get_file_name_from_path,
    get_normalized_directory_path,
    get_parent_directory,
)

__all__ = [
    'Config',
    'config',
    'LineFile',
    'FileNotOpenError',
    'NotRegularFileError',
    'get_file_contents',
    'get_last_line_from_file',
    'remove_first_line_from_file',
    'append_line_to_file',
    'copy_file',
    'create_directory',
    'delete_directory',
    'delete_file',
    'delete_files_matching_pattern',
    'find_replace_in_file',
    'get_file_contents_as_bytes',
    'get_file_size',
    'is_directory',
    'is_directory_exists',
    'is_file',
    'is_file_contains_text',
    'is_file_exists',
    'move_file',
    'rename_file',
    'write_bytes_to_file',
    'find_matching_content',
    'get_default_cache_directory',
    'get_list_of_directories',
    'get_list_of_directory_contents',
    'get_list_of_files',
    'get_working_directory',
    'is_directory_empty',
    'download_file',
    'get_bare_directory_path',
    'get_base_directory',
    'get_base_file_name',
    'get_current_directory',
    'get_file_extension',
    'get_file_name_from_path',
    'get_normalized_directory_path',
    'get_parent_directory',
]
