# quote_scribe\core\use_cases\__init__.py
"""
Core Use Cases (the Application Controller).

Each class is one user action. Use cases validate input, call the Entity
Store or the Generation Client, and turn a failed store write into a
StorageWriteError the driving adapter can show.
"""

from .quotes import SaveQuote, UpdateQuote, DeleteQuote
from .favorites import AddFavorite, RemoveFavorite, ToggleFavorite
from .reflections import SaveReflection, UpdateReflection, DeleteReflection
from .generate_quote import GenerateQuote
from .credentials import SaveCredential, TestCredential, DeleteCredential
from .data import ImportSnapshot, ResetStore, SetTheme

__all__ = [
    "SaveQuote",
    "UpdateQuote",
    "DeleteQuote",
    "AddFavorite",
    "RemoveFavorite",
    "ToggleFavorite",
    "SaveReflection",
    "UpdateReflection",
    "DeleteReflection",
    "GenerateQuote",
    "SaveCredential",
    "TestCredential",
    "DeleteCredential",
    "ImportSnapshot",
    "ResetStore",
    "SetTheme",
]
