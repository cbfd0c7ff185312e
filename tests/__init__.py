"""
Test suite for the drawstyle project.

This module contains all unit tests for the drawstyle package.
"""
