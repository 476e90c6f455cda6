"""Sphinx settings for the Pitchside API reference."""

from __future__ import annotations

import os
import sys
from datetime import datetime

# autodoc imports ``pitchside`` straight from the checkout.
REPO_ROOT = os.path.abspath(os.path.join(__file__, "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from pitchside import __version__  # noqa: E402

project = "Pitchside"
author = "WelshDragon"
copyright = f"{datetime.now():%Y}, {author}"
version = release = __version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

# Docstrings are numpydoc only.
napoleon_google_docstring = False
napoleon_numpy_docstring = True

autosummary_generate = True
autodoc_typehints = "description"
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

html_theme = "sphinx_rtd_theme"
templates_path = ["_templates"]
exclude_patterns = ["_build"]
