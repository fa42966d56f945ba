"""
models/command.py
-----------------
The closed set of commands the bot understands.
Each variant knows its chat command name and menu description.
"""

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class ShowRandomImage:
    name: ClassVar[str] = "doggo"
    description: ClassVar[str] = "Random dog"


@dataclass(frozen=True)
class ShowImageForBreed:
    """`breed` is the user's text as typed, e.g. 'Blue Heeler'."""
    name: ClassVar[str] = "breed"
    description: ClassVar[str] = "Random dog from the specified breed"

    breed: str


@dataclass(frozen=True)
class ListCatalog:
    name: ClassVar[str] = "breeds"
    description: ClassVar[str] = "List the breeds of dogs"


@dataclass(frozen=True)
class ShowPrice:
    name: ClassVar[str] = "euro"
    description: ClassVar[str] = "Get the value of EURO in USD"


Command = Union[ShowRandomImage, ShowImageForBreed, ListCatalog, ShowPrice]

# Menu order
COMMAND_TYPES: tuple[type, ...] = (ShowRandomImage, ShowImageForBreed, ListCatalog, ShowPrice)
