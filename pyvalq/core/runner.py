"""Runs documents through registered schemas.

This module discovers the `BaseSchema` implementations shipped in
`pyvalq.schemas`, loads documents from files or URLs, and collects the
validation outcome for each one.
"""

import dataclasses
import importlib
import inspect
import logging
import os
import pkgutil
from typing import Any, Dict, List, Type

from .base_schema import BaseSchema
from .config import Config
from .. import schemas as schemas_package
from ..utils.sources import load_document

# Initialize a logger for this module.
logger = logging.getLogger(__name__)


def discover_schemas() -> List[Type[BaseSchema]]:
    """Discovers all schema classes within the `pyvalq.schemas` package.

    Modules that fail to import are logged and skipped.

    Returns:
        List[Type[BaseSchema]]: The discovered schema classes, sorted by name.
    """
    found = {}
    path = os.path.dirname(schemas_package.__file__)

    for _, name, _ in pkgutil.iter_modules([path]):
        try:
            module = importlib.import_module(f"{schemas_package.__name__}.{name}")
        except ImportError as e:
            logger.warning(f"Could not import schema module {name}: {e}")
            continue
        for _, item in inspect.getmembers(module, inspect.isclass):
            if issubclass(item, BaseSchema) and item is not BaseSchema and not inspect.isabstract(item):
                found[item.__qualname__] = item
    return sorted(found.values(), key=lambda schema: schema.name)


def get_schema(name: str, config: Config) -> BaseSchema:
    """Instantiates the schema called ``name`` (case-insensitive).

    Raises:
        KeyError: If no enabled schema has that name.
    """
    for schema_class in discover_schemas():
        if schema_class.name.lower() == name.lower():
            if not config.is_schema_enabled(schema_class.name):
                raise KeyError(f"Schema '{name}' is disabled by configuration.")
            return schema_class(config)
    raise KeyError(f"Unknown schema '{name}'.")


def to_plain(value: Any) -> Any:
    """Converts validated values (dataclasses, tuples) into JSON-friendly data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def validate_document(location: str, schema: BaseSchema, config: Config) -> Dict[str, Any]:
    """Loads the document at ``location`` and validates it against ``schema``.

    Args:
        location (str): A file path or http(s) URL of a JSON document.
        schema (BaseSchema): The schema to validate against.
        config (Config): The application's configuration object.

    Returns:
        Dict[str, Any]: The schema result plus the document location.

    Raises:
        ValueError: If the document cannot be found or parsed.
        requests.RequestException: If a remote document cannot be fetched.
    """
    logger.info(f"Validating {location} against schema '{schema.name}'")
    document = load_document(location, timeout=config.get("timeout", 30), retries=config.get("retries", 3))
    result = schema.result(document)
    result["value"] = to_plain(result["value"])
    result["location"] = location
    logger.debug(f"{location}: valid={result['valid']}, issues={len(result['issues'])}")
    return result
