"""
Base schema class that all document schemas inherit from.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, TYPE_CHECKING, Union

from .validation import Err, Ok, Validator, accept, validate

if TYPE_CHECKING:
    from .config import Config


class BaseSchema(ABC):
    """Abstract base class for all document schemas.

    A schema knows how to build one validator for a whole decoded document.
    Subclasses implement `build`; the runner discovers them and looks them up
    by `name`.

    Attributes:
        name (str): The name used to select the schema on the command line.
        description (str): A brief explanation of what the schema accepts.
    """

    name: str = "unnamed"
    description: str = "No description provided"

    def __init__(self, config: "Config") -> None:
        """Initializes the schema with the application configuration.

        Args:
            config (Config): The application's configuration object, used
                for any tunable bounds.
        """
        self.config = config

    @abstractmethod
    def build(self) -> Validator[Any, Any, str]:
        """Builds the validator for a decoded document.

        Returns:
            Validator[Any, Any, str]: A validator whose issues are messages.
        """
        raise NotImplementedError("Subclasses must implement build()")

    def validate(self, document: Any) -> Union[Ok[Any], Err[str]]:
        """Runs the schema's validator once against ``document``."""
        return validate(accept(self.build(), document))

    def result(self, document: Any) -> Dict[str, Any]:
        """Validates ``document`` and returns the outcome as a plain dictionary.

        Returns:
            Dict[str, Any]: The schema name, whether the document is valid,
            the validated value (None on failure) and the issues, oldest first.
        """
        outcome = self.validate(document)
        if isinstance(outcome, Ok):
            return {"schema": self.name, "valid": True, "value": outcome.value, "issues": []}
        return {"schema": self.name, "valid": False, "value": None, "issues": list(outcome.issues)}
