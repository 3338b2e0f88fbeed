"""Test suite for Base Image Versioner.

This package contains test modules and fixtures for verifying the functionality
of the Base Image Versioner tool. It includes tests for:
- Tag classification and version normalization
- Version selection strategies
- Matrix expansion
- Configuration handling
- The Docker Hub client and the command line entry point

The test suite uses pytest and provides fixtures for common test scenarios.
"""
