"""Default processing of example markup templates."""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    from ds_pages.catalog import Modifier

MODIFIER_PLACEHOLDER = re.compile(r"\{\{\s*modifier(?:_class)?\s*\}\}")


def process_example_markup(markup: str, modifier: Modifier | None = None) -> str:
    """Substitute the modifier class into ``{{ modifier }}`` placeholders.

    Without a modifier the placeholder is removed, leaving the base variant.

    Examples
    --------
    >>> from ds_pages.catalog import Modifier
    >>> process_example_markup('<a class="btn {{modifier}}">', Modifier(".btn--primary"))
    '<a class="btn btn--primary">'
    >>> process_example_markup('<a class="btn {{ modifier }}">')
    '<a class="btn ">'
    """
    class_name = modifier.class_name if modifier else ""
    return MODIFIER_PLACEHOLDER.sub(lambda _match: class_name, markup).strip()
