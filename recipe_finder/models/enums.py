"""Enums for model fields."""

from enum import Enum


class Difficulty(str, Enum):
    """Preparation difficulty of a recipe."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class UserRole(str, Enum):
    """Account roles."""

    USER = "user"
    ADMIN = "admin"
