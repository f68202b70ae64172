"""
Test suite for TechMed.

Contains service-level and API tests for the application's functionality.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
