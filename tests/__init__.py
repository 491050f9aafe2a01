"""Test suite for dsfr-mcp."""
