# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

import os
import sys
import sphinx_rtd_dark_mode

# Project root on sys.path so autodoc can import avoidance/, sim/, ui/, service/
sys.path.insert(0, os.path.abspath("../.."))

project = 'Foot-bot Obstacle Avoidance'
copyright = '2026, Foot-bot Team'
author = 'Foot-bot Team'
release = '0.1'

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",    # generate docs from docstrings
    "sphinx.ext.napoleon",   # parse NumPy style docstrings
    "sphinx.ext.viewcode",   # add links to source code
    "sphinx_rtd_dark_mode"
]

templates_path = ['_templates']
exclude_patterns = []

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
default_dark_mode = True
html_static_path = ['_static']

# -- Mock imports so the docs build without a display or a server stack --
autodoc_mock_imports = ["pygame", "uvicorn"]
