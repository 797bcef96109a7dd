"""Bind the web feature files.

Step definitions are loaded by the web runner (``petspot-e2e web``).
"""

import pytest
from pytest_bdd import scenarios

pytestmark = pytest.mark.e2e

scenarios("../features/web")
