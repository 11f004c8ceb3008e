"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.
"""

from .feather_logic_script import LogicScript

__all__ = [
    "LogicScript",
]
