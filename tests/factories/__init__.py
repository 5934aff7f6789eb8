"""Test factories for creating test data."""

from tests.factories.contacts import DescriptorFactory, ParentFactory, StudentFactory

__all__ = [
    "DescriptorFactory",
    "ParentFactory",
    "StudentFactory",
]
