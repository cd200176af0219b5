import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_USER_AGENT = 'Mozilla/5.0 (X11; Fedora; Linux x86_64; rv:52.0) Gecko/20100101 Firefox/52.0'


def _octal_env(name, default):
    return int(os.getenv(name, default), 8)


def _optional_float_env(name):
    value = os.getenv(name, '')
    if not value:
        return None
    return float(value)


@dataclass
class Config:
    # permission bits used when a caller passes 0
    DEFAULT_FILE_MODE: int = field(
        default_factory=lambda: _octal_env('FSUTILS_DEFAULT_FILE_MODE', '644'))
    DEFAULT_WRITE_MODE: int = field(
        default_factory=lambda: _octal_env('FSUTILS_DEFAULT_WRITE_MODE', '666'))
    DEFAULT_DIR_MODE: int = field(
        default_factory=lambda: _octal_env('FSUTILS_DEFAULT_DIR_MODE', '744'))

    # download configuration
    DOWNLOAD_USER_AGENT: str = field(
        default_factory=lambda: os.getenv('FSUTILS_DOWNLOAD_USER_AGENT', DEFAULT_USER_AGENT))
    DOWNLOAD_TIMEOUT: Optional[float] = field(
        default_factory=lambda: _optional_float_env('FSUTILS_DOWNLOAD_TIMEOUT'))
    DOWNLOAD_CHUNK_SIZE: int = field(
        default_factory=lambda: int(os.getenv('FSUTILS_DOWNLOAD_CHUNK_SIZE', '8192')))

    # empty means the platform default
    CACHE_DIR: str = field(
        default_factory=lambda: os.getenv('FSUTILS_CACHE_DIR', ''))


config = Config()
