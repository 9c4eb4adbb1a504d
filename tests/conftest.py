import os
import sys

import pytest

# Ensure the project root is on the module search path when the package is not
# installed. This allows ``import loratxcurrent`` to succeed during test
# collection without requiring an editable installation.
ROOT_DIR = os.path.dirname(os.path.dirname(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)


@pytest.fixture
def write_ini(tmp_path):
    """Write an INI file in ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "radio.ini"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
