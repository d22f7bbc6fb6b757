import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath('..'))

import xelon_sdk  # noqa: E402

project = 'xelon-sdk'
copyright = f'{datetime.now().year}, Xelon AG'
author = 'Xelon AG'

release = getattr(xelon_sdk, '__version__', '0.14.1')
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',         # Google style docstrings
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

autosummary_generate = True
autodoc_member_order = 'bysource'
autoclass_content = 'both'
autodoc_typehints = 'description'
autodoc_typehints_format = 'short'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
}

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', '_autosummary']

# Models and services are documented through their package pages.
_FLATTENED_PACKAGES = ('xelon_sdk.models.', 'xelon_sdk.services.')


def skip_submodules(app, what, name, obj, skip, options):
    if what == 'module' and name.startswith(_FLATTENED_PACKAGES):
        return True
    if name == '_extra_fields':
        return True
    return skip


def setup(app):
    app.connect('autodoc-skip-member', skip_submodules)


templates_path = ['_templates']
html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
html_title = f"{project} {release}"

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'requests': ('https://requests.readthedocs.io/en/latest/', None),
    'urllib3': ('https://urllib3.readthedocs.io/en/stable/', None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_admonition_for_examples = True
napoleon_use_ivar = True
napoleon_use_rtype = True
