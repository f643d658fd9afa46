"""Loads JSON documents from local files or over HTTP.

Documents are parsed here and handed to the decoders as plain Python values.
Remote documents are fetched with ``requests``, retrying with exponential
backoff on rate limiting and transient network errors.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Union
from urllib.parse import urlparse

import requests

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def is_url(location: Union[str, Path]) -> bool:
    """Checks whether ``location`` is an http or https URL.

    Args:
        location (Union[str, Path]): A file path or URL.

    Returns:
        bool: True if the location should be fetched over HTTP.
    """
    return urlparse(str(location)).scheme in ("http", "https")


def fetch_document(url: str, timeout: int = 30, retries: int = 3) -> Any:
    """Fetches and parses a JSON document from ``url``.

    Args:
        url (str): The http or https URL of the document.
        timeout (int): The request timeout in seconds. Defaults to 30.
        retries (int): The number of attempts before giving up. Defaults to 3.

    Returns:
        Any: The parsed JSON value.

    Raises:
        ValueError: If the document does not exist (HTTP 404) or is not
            valid JSON.
        requests.RequestException: If the request fails after all retries.
    """
    logger.info(f"Fetching document from {url}")

    for attempt in range(retries):
        try:
            response = requests.get(url, timeout=timeout)
            if response.status_code == 429:  # Handle rate limiting
                sleep_time = 2 ** attempt
                logger.warning(f"Rate limited. Retrying in {sleep_time} seconds...")
                time.sleep(sleep_time)
                continue
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise ValueError(f"Document not found at {url}.") from e
            if attempt == retries - 1:
                raise
            continue
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request to {url} failed (attempt {attempt + 1}/{retries}): {e}")
            if attempt == retries - 1:
                raise
            time.sleep(2 ** attempt)
            continue
        try:
            return response.json()
        except ValueError as e:
            raise ValueError(f"Document at {url} is not valid JSON: {e}") from e
    raise requests.exceptions.RequestException(f"Failed to fetch {url} after {retries} attempts.")


def read_document(path: Union[str, Path]) -> Any:
    """Reads and parses a JSON document from a local file.

    Raises:
        ValueError: If the file does not exist, cannot be read, or is not
            valid JSON.
    """
    path = Path(path)
    logger.info(f"Reading document from {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ValueError(f"Document not found at {path}.") from e
    except OSError as e:
        raise ValueError(f"Could not read document at {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Document at {path} is not valid JSON: {e}") from e


def load_document(location: Union[str, Path], timeout: int = 30, retries: int = 3) -> Any:
    """Loads a JSON document from a URL or a local path.

    Args:
        location (Union[str, Path]): An http(s) URL or a file path.
        timeout (int): The request timeout for URLs, in seconds.
        retries (int): The number of attempts for URLs.

    Returns:
        Any: The parsed JSON value.
    """
    if is_url(location):
        return fetch_document(str(location), timeout=timeout, retries=retries)
    return read_document(location)
