"""Utility functions for loading Parse schemas.

This module provides functions for loading schemas from JSON files or a Parse
Server with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import SchemaEntry, convert_schema_entry
from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def _extract_results(data: Any, source: str) -> list[dict[str, Any]]:
    """Accept either a bare list of schemas or a `{"results": [...]}` envelope."""
    if isinstance(data, dict) and "results" in data:
        data = data["results"]

    if not isinstance(data, list):
        logger.error("Unexpected schema payload from %s: %s", source, type(data))
        raise SchemaLoaderError(
            f"Expected a list of schemas from {source}, got {type(data).__name__}"
        )
    return data


def parse_schema_entries(raw_schemas: list[Any]) -> list[SchemaEntry]:
    """Convert raw Parse schema objects to SchemaEntry instances.

    Args:
        raw_schemas: Objects in Parse REST schema format.

    Returns:
        Schema entries in input order.

    Raises:
        SchemaLoaderError: If an entry is malformed.
    """
    entries = []
    for index, raw in enumerate(raw_schemas):
        if isinstance(raw, SchemaEntry):
            entries.append(raw)
            continue
        try:
            entries.append(convert_schema_entry(raw))
        except ValueError as e:
            logger.error("Invalid schema entry at index %d: %s", index, e)
            raise SchemaLoaderError(f"Invalid schema entry at index {index}: {e}") from e
    return entries


def load_schemas_from_file(file_path: str | Path) -> tuple[str, list[dict[str, Any]]]:
    """Load raw Parse schemas from a local JSON file.

    Args:
        file_path: Path to the JSON file (a list, or an object with `results`).

    Returns:
        Tuple of (source description, raw schema list).

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load schemas from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e

    schemas = _extract_results(data, str(file_path))
    logger.info(f"Loaded {len(schemas)} schemas from {file_path}")
    return f"📄 {file_path}", schemas


def fetch_schemas(
    server_url: str | None,
    app_id: str | None,
    master_key: str | None,
    timeout: int = 30,
) -> tuple[str, list[dict[str, Any]]]:
    """Fetch all class schemas from a Parse Server.

    Args:
        server_url: Parse Server URL, e.g. ``https://example.com/parse``.
        app_id: Application ID.
        master_key: Master key (the schemas endpoint requires it).
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, raw schema list).

    Raises:
        SchemaLoaderError: If parameters are missing, the request fails, or
            the response isn't a valid schema list.
    """
    missing = [
        name
        for name, value in (
            ("server_url", server_url),
            ("app_id", app_id),
            ("master_key", master_key),
        )
        if not value
    ]
    if missing:
        logger.error("Missing required parameters: %s", ", ".join(missing))
        raise SchemaLoaderError(f"Missing required parameters: {', '.join(missing)}")

    parsed_url = urlparse(server_url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {server_url}")
        raise SchemaLoaderError(f"Invalid URL: {server_url}")

    url = f"{server_url.rstrip('/')}/schemas"
    headers = {
        "X-Parse-Application-Id": app_id,
        "X-Parse-Master-Key": master_key,
        "Content-Type": "application/json",
    }
    logger.debug(f"Fetching schemas from {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    schemas = _extract_results(data, url)
    logger.info(f"Fetched {len(schemas)} schemas from {url}")
    return f"🌐 {url}", schemas


def load_schemas(
    file_path: str | Path | None = None,
    server_url: str | None = None,
    app_id: str | None = None,
    master_key: str | None = None,
    timeout: int = 30,
) -> tuple[str, list[SchemaEntry]]:
    """Load schema entries from either a file or a Parse Server.

    Args:
        file_path: Path to local JSON file (mutually exclusive with server_url).
        server_url: Parse Server URL (mutually exclusive with file_path).
        app_id: Application ID, required with server_url.
        master_key: Master key, required with server_url.
        timeout: Request timeout in seconds (only used for servers).

    Returns:
        Tuple of (source description, schema entries).

    Raises:
        SchemaLoaderError: If neither or both sources are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not server_url:
        logger.error("Neither file_path nor server_url provided")
        raise SchemaLoaderError("Either file_path or server_url must be provided")

    if file_path and server_url:
        logger.error("Both file_path and server_url provided")
        raise SchemaLoaderError("Cannot specify both file_path and server_url")

    if file_path:
        source, raw = load_schemas_from_file(file_path)
    else:
        source, raw = fetch_schemas(server_url, app_id, master_key, timeout)

    return source, parse_schema_entries(raw)

