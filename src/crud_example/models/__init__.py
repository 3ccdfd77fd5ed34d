r"""
Centralized access to the domain models.

Example:

    from crud_example.models import Country, Person
"""

from .country import Country
from .person import Person

__all__ = [
    "Country",
    "Person",
]
