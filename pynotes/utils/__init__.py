"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    IMAGE_FILE_FILTER,
    NOTE_FILE_FILTER,
    NOTES_DIR_NAME,
    PLACEHOLDER_NAME,
    SETTINGS_GEOMETRY,
    SETTINGS_LIST_HEADER,
    SETTINGS_SPLITTER,
    WELCOME_NOTE_NAME,
    WELCOME_TEXT,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "NOTES_DIR_NAME",
    "PLACEHOLDER_NAME",
    "WELCOME_NOTE_NAME",
    "WELCOME_TEXT",
    "NOTE_FILE_FILTER",
    "IMAGE_FILE_FILTER",
    "SETTINGS_GEOMETRY",
    "SETTINGS_SPLITTER",
    "SETTINGS_LIST_HEADER",
]
