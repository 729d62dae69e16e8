"""Tests for Proxihash module."""
