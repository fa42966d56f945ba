"""
models/dog.py
-------------
Response shapes returned by the dog.ceo API.
"""

from dataclasses import dataclass
from typing import Any

from utils.errors import SchemaError

STATUS_SUCCESS = "success"


@dataclass(frozen=True)
class ImageResult:
    """
    Outcome of one image lookup.

    Attributes:
        message: Image URL on success, an error description otherwise.
        status: Status sentinel reported by the API ('success' | 'error').
    """
    message: str
    status: str

    def is_success(self) -> bool:
        """Returns True if the status sentinel reports success."""
        return self.status == STATUS_SUCCESS

    @classmethod
    def from_payload(cls, payload: Any) -> "ImageResult":
        """
        Build an ImageResult from a decoded JSON body.

        Raises:
            SchemaError: If the body is not ``{message: str, status: str}``.
        """
        if not isinstance(payload, dict):
            raise SchemaError(f"expected an object, got {type(payload).__name__}")
        message = payload.get("message")
        status = payload.get("status")
        if not isinstance(message, str) or not isinstance(status, str):
            raise SchemaError("image response needs string 'message' and 'status'")
        return cls(message=message, status=status)


@dataclass(frozen=True)
class BreedCatalog:
    """
    Full enumeration of breeds and their sub-breeds.

    Attributes:
        breeds: Breed name -> sub-breed names, in upstream order.
        status: Status sentinel reported by the API.
    """
    breeds: dict[str, list[str]]
    status: str

    def is_success(self) -> bool:
        """Returns True if the status sentinel reports success."""
        return self.status == STATUS_SUCCESS

    @classmethod
    def from_payload(cls, payload: Any) -> "BreedCatalog":
        """
        Build a BreedCatalog from a decoded JSON body.

        A non-success body carries a string message instead of a mapping;
        it is kept as an empty catalog so the status can still be inspected.

        Raises:
            SchemaError: If the body does not match the catalog shape.
        """
        if not isinstance(payload, dict):
            raise SchemaError(f"expected an object, got {type(payload).__name__}")
        status = payload.get("status")
        if not isinstance(status, str):
            raise SchemaError("catalog response needs a string 'status'")
        message = payload.get("message")
        if status != STATUS_SUCCESS:
            return cls(breeds={}, status=status)
        if not isinstance(message, dict):
            raise SchemaError("catalog 'message' must be an object")

        breeds: dict[str, list[str]] = {}
        for name, sub_breeds in message.items():
            if not isinstance(sub_breeds, list) or not all(isinstance(s, str) for s in sub_breeds):
                raise SchemaError(f"sub-breeds of '{name}' must be a list of strings")
            breeds[name] = list(sub_breeds)
        return cls(breeds=breeds, status=status)
