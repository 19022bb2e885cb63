"""
Pytest configuration for rxdconstants tests.

Puts the project root on the Python path so the tests run against the
source tree without installing the package.
"""

import sys
import os

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)
