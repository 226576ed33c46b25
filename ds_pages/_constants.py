"""Common literal values used across ds_pages.

These constants keep directory names, filenames, and fixed homepage copy
centralized so the renderer, the path resolver, and tests can import the same
values without drifting. Intended for internal use within the ds_pages
package.

Examples
--------
>>> from ds_pages import _constants
>>> _constants.RESERVED_ASSET_DIR
'public'
>>> f"{_constants.EXAMPLE_DIR}/components.button"
'example/components.button'
"""

RESERVED_ASSET_DIR = "public"
INDEX_FILENAME = "index.html"
EXAMPLE_DIR = "example"
DEVELOPMENT_ENVIRONMENT = "development"
PRODUCTION_ENVIRONMENT = "production"

DEFAULT_SITE_NAME = "CMS Design System"
DEFAULT_HOMEPAGE_TITLE = "CMS Design System | An open source design and front-end toolkit"
DEFAULT_HOMEPAGE_DESCRIPTION = (
    "A set of open source design and front-end development resources for "
    "creating Section 508 compliant, responsive, and consistent websites. It "
    "builds on the U.S. Web Design Standards and extends it to support "
    "additional CSS and React components, utility classes, and a grid framework"
)
