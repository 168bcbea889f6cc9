# Sphinx configuration for the Tool WDL Generator API reference.

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent.parent / 'src'
sys.path.insert(0, str(SRC))

from tool_wdl_generator import __version__  # noqa: E402

project = 'Tool WDL Generator'
author = 'Tool WDL Generator developers'
copyright = f'2024, {author}'
version = '.'.join(__version__.split('.')[:2])
release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

root_doc = 'index'
exclude_patterns = ['_build']

html_theme = 'sphinx_rtd_theme'
html_title = f'{project} {release}'

# Models and handlers are documented in declaration order; pydantic internals
# (model_config, model_fields, ...) are left to the pydantic docs.
autodoc_member_order = 'bysource'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
    'exclude-members': 'model_config, model_fields, model_computed_fields',
}
autodoc_class_signature = 'separated'

# sphinx-autodoc-typehints
typehints_fully_qualified = False
always_document_param_types = False
typehints_defaults = 'comma'

# Docstrings use the Google style (Args:/Raises:)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_rtype = False

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'pydantic': ('https://docs.pydantic.dev/latest', None),
}
