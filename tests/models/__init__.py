"""Tests for the models and their stored invariants."""
