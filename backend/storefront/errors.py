"""
Error kinds shared by the services and the routes.

NotFoundError and StoreError are raised; ValidationFailure is a value the
validation step hands back instead of a model.
"""

from dataclasses import dataclass, field
from typing import List


class StorefrontError(Exception):
    """Base class for storefront failures."""


class NotFoundError(StorefrontError):
    """A requested or derived record does not exist."""


class StoreError(StorefrontError):
    """The record store could not read or write a collection."""


@dataclass
class ValidationFailure:
    message: str
    fields: List[str] = field(default_factory=list)

    def describe(self) -> str:
        if not self.fields:
            return self.message
        return f"{self.message}: {', '.join(self.fields)}"
