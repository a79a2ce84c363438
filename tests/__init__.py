"""Test suite for Wags Tags.

This package contains test modules and fixtures for verifying the functionality
of the Wags Tags tool. It includes tests for:
- Tag validation and version increments
- Release planning
- Configuration handling
- Git operations and tag application
- The command line interface

The test suite uses pytest and provides fixtures for common test scenarios.
"""
