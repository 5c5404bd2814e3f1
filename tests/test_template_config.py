"""Tests for resolving template configurations against defaults."""

from constants import LIVE_MENU_DEFAULTS, EDITOR_DEFAULTS, DEFAULT_TEMPLATES
from services import resolve_template_config


FULL_CONFIG = {
    'primary_color': '#111111',
    'secondary_color': '#222222',
    'accent_color': '#333333',
    'background_color': '#444444',
    'border_radius': '0px',
    'font_family_primary': 'Roboto',
    'font_family_secondary': 'Merriweather',
    'layout_style': 'grid',
    'card_style': 'bordered',
    'spacing': 'compact',
    'show_images': False,
    'show_descriptions': False,
    'show_prices': True,
    'header_style': 'left',
    'footer_style': 'none',
}


def test_fully_specified_config_is_unchanged():
    assert resolve_template_config(FULL_CONFIG) == FULL_CONFIG


def test_resolving_twice_is_the_same_as_once():
    once = resolve_template_config({'accent_color': '#ABCDEF'})
    assert resolve_template_config(once) == once


def test_empty_config_gives_the_full_default_set():
    assert resolve_template_config({}) == LIVE_MENU_DEFAULTS
    assert set(resolve_template_config({})) == set(FULL_CONFIG)


def test_falsy_override_is_kept():
    resolved = resolve_template_config({'show_prices': False})
    assert resolved['show_prices'] is False
    for key, value in LIVE_MENU_DEFAULTS.items():
        if key != 'show_prices':
            assert resolved[key] == value


def test_none_counts_as_unset():
    resolved = resolve_template_config({'primary_color': None, 'spacing': 'spacious'})
    assert resolved['primary_color'] == LIVE_MENU_DEFAULTS['primary_color']
    assert resolved['spacing'] == 'spacious'


def test_non_mapping_resolves_to_defaults():
    assert resolve_template_config(None) == LIVE_MENU_DEFAULTS
    assert resolve_template_config(['primary_color']) == LIVE_MENU_DEFAULTS


def test_extra_keys_are_kept():
    modern = DEFAULT_TEMPLATES[1]['config']
    resolved = resolve_template_config(modern)
    assert resolved['background_image_url'] == modern['background_image_url']
    assert resolved['layout_style'] == LIVE_MENU_DEFAULTS['layout_style']


def test_inputs_are_not_modified():
    partial = {'primary_color': '#000000'}
    resolved = resolve_template_config(partial)
    resolved['spacing'] = 'compact'
    assert partial == {'primary_color': '#000000'}
    assert LIVE_MENU_DEFAULTS['spacing'] == 'comfortable'


def test_custom_defaults():
    resolved = resolve_template_config({}, defaults=EDITOR_DEFAULTS)
    assert resolved['primary_color'] == '#F59E0B'
    assert resolved is not EDITOR_DEFAULTS
