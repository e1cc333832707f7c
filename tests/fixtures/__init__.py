"""Test fixtures for FridgeChef."""

from tests.fixtures.mocks import MockClaudeService, candidate_recipe

__all__ = [
    "MockClaudeService",
    "candidate_recipe",
]
