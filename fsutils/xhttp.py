import logging
from typing import Mapping, Optional

import requests

from .config import config

logger = logging.getLogger(__name__)


def _default_headers():
    # a browser like user agent, some servers refuse the python-requests one
    return {'User-Agent': config.DOWNLOAD_USER_AGENT}


def download_file(url: str, file_path, headers: Optional[Mapping[str, str]] = None):
    '''
    Download url into file_path.

    Args:
        url: the url to GET
        file_path: local destination, overwritten if it exists
        headers: request headers, replace the default user agent header entirely when given

    Raises:
        requests.RequestException: connection errors, and non 2xx status codes.
            The destination file is not touched in that case.
        OSError: the destination can not be written.
    '''
    if headers is None:
        headers = _default_headers()
    logger.info(f'downloading {url} to {file_path}')
    with requests.get(url,
                      headers=dict(headers),
                      stream=True,
                      timeout=config.DOWNLOAD_TIMEOUT) as response:
        response.raise_for_status()
        size = 0
        with open(file_path, 'wb') as f:
            for chunk in response.iter_content(chunk_size=config.DOWNLOAD_CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
                    size += len(chunk)
    logger.info(f'downloaded {size} bytes from {url}')
