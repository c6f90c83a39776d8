import os
import sys

# Add the project root (one level up from docs/) to sys.path
sys.path.insert(0, os.path.abspath(".."))

from mexc_api import get_version

# -- Project information -----------------------------------------------------

project = "mexc_api"
copyright = "2025, mexc-api contributors"
author = "mexc-api contributors"

release = get_version()
if release == "0.0.0":
    raise RuntimeError(f"Package is not installed, unknown version {release=}")

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

# Decimal, datetime and aiohttp types appear in signatures
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "aiohttp": ("https://docs.aiohttp.org/en/stable", None),
}

# Napoleon settings
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# Endpoint types are re-exported from mexc_api and mexc_api.v3
suppress_warnings = ["ref.python"]

## Templates
templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

## HTML output
html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]

# Rendering
autodoc_default_options = {
    "members": True,
    "undoc-members": True,
    "show-inheritance": True,
}

# Params and outputs are dataclasses; keep fields in wire order
autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_class_signature = "separated"
