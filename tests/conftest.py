"""Pytest configuration for the simulator test suite."""

import os
import sys

# Modules live flat at the repository root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
