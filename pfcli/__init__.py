"""
PF-CLI

Generate Python types from a sample JSON API response, and run an
AI-assisted git add / commit / pull / push workflow.
"""

__version__ = "1.0.0"

DEFAULT_TYPE_NAME = "ApiTypes"

# Generated files are Pydantic v2 models, so they get a .py extension
TYPE_FILE_EXTENSION = ".py"

# Same rule as a Python class name, minus underscores
TYPE_NAME_PATTERN = r'^[A-Za-z][A-Za-z0-9]*$'
