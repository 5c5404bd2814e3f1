"""
Template Configuration Service

Resolves partial template style configurations against the default set.
"""

from collections.abc import Mapping

from constants import LIVE_MENU_DEFAULTS


def resolve_template_config(partial, defaults=None):
    """
    Fill every unset style key of a template configuration with its default.

    Keys present in ``partial`` win even when falsy (show_prices=False stays
    False). A value of None counts as unset. Keys the defaults do not know
    about, such as background_image_url, are kept. Anything that is not a
    mapping resolves to the defaults alone.

    Returns a new dict; neither argument is modified.
    """
    if defaults is None:
        defaults = LIVE_MENU_DEFAULTS

    resolved = dict(defaults)
    if not isinstance(partial, Mapping):
        return resolved

    for key, value in partial.items():
        if value is None:
            continue
        resolved[key] = value
    return resolved

