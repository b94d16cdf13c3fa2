from concurrent.futures import ThreadPoolExecutor

import pytest

from indent_rainbow.color import Color, color_from_argb, darker
from indent_rainbow.config import IrConfig, PaletteType
from indent_rainbow.palette import (
    BUILTIN_PALETTES,
    DEFAULT,
    DEFAULT_ERROR_COLOR,
    NIGHTFALL,
    PASTEL,
    SPECTRUM,
    BuiltinPalette,
    CustomPalette,
    CustomPaletteFactory,
    PaletteSelector,
)
from indent_rainbow.palette.custom import CUSTOM_ERROR_KEY
from indent_rainbow.scheme import TextAttributes

from .conftest import DARK_BACKGROUND


@pytest.mark.parametrize(
    "palette, size",
    [(DEFAULT, 4), (PASTEL, 6), (SPECTRUM, 13), (NIGHTFALL, 10)],
)
def test_builtin_palette_sizes_and_translucency(palette, size):
    assert len(palette.indent_keys) == size
    assert len(palette.colors_base) == size + 1
    assert all(color.alpha < 255 for color in palette.colors_base.values())
    assert palette.error_color == color_from_argb(DEFAULT_ERROR_COLOR)


def test_builtin_keys_are_ordered_error_first():
    assert list(DEFAULT.colors_base) == [
        "INDENT_RAINBOW_ERROR",
        "INDENT_RAINBOW_COLOR_1",
        "INDENT_RAINBOW_COLOR_2",
        "INDENT_RAINBOW_COLOR_3",
        "INDENT_RAINBOW_COLOR_4",
    ]
    assert DEFAULT.indent_colors[0] == Color(0xFF, 0xFF, 0x40, 0x12)
    assert PASTEL.indent_colors[-1] == Color(0xFF, 0x9A, 0xA2, 0x26)
    assert SPECTRUM.indent_colors[-1] == Color(0x00, 0xCE, 0xD1, 0x12)
    assert NIGHTFALL.indent_colors[0] == Color(0x00, 0x52, 0xA2, 0x12)


def test_builtin_palette_requires_colors():
    with pytest.raises(ValueError):
        BuiltinPalette("empty", DEFAULT_ERROR_COLOR, [])


def test_derive_colors_is_opaque_and_skips_boost_for_error():
    plain = DEFAULT.derive_colors(DARK_BACKGROUND, 0.0)
    boosted = DEFAULT.derive_colors(DARK_BACKGROUND, 0.0, boost_light=True)
    assert list(plain) == list(DEFAULT.colors_base)
    assert all(color.alpha == 255 for color in plain.values())
    assert boosted[DEFAULT.error_key] == plain[DEFAULT.error_key]
    assert boosted[DEFAULT.indent_keys[0]] != plain[DEFAULT.indent_keys[0]]


def test_custom_palette_seeds_every_scheme(store, dark_scheme, light_scheme):
    palette = CustomPalette(3, store)
    assert palette.indent_keys == [
        "INDENT_RAINBOW_COLOR_1_CUSTOM",
        "INDENT_RAINBOW_COLOR_2_CUSTOM",
        "INDENT_RAINBOW_COLOR_3_CUSTOM",
    ]
    for scheme in (dark_scheme, light_scheme):
        assert scheme.background_of(CUSTOM_ERROR_KEY) == color_from_argb(DEFAULT_ERROR_COLOR)
        for key in palette.indent_keys:
            assert scheme.background_of(key) == darker(scheme.default_background)


def test_custom_palette_never_overwrites_existing_background(store, dark_scheme):
    custom_error = Color(1, 2, 3, 255)
    dark_scheme.set_attributes(
        CUSTOM_ERROR_KEY, TextAttributes(foreground=Color(9, 9, 9, 255), background=custom_error)
    )
    factory = CustomPaletteFactory(store)
    factory.build(4)
    count = dark_scheme.modification_count
    factory.build(4)

    assert dark_scheme.background_of(CUSTOM_ERROR_KEY) == custom_error
    assert dark_scheme.get_attributes(CUSTOM_ERROR_KEY).foreground == Color(9, 9, 9, 255)
    assert dark_scheme.modification_count == count


def test_factory_caches_by_number_of_colors(store):
    factory = CustomPaletteFactory(store)
    first = factory.get_or_build(4)
    assert factory.get_or_build(4) is first

    second = factory.get_or_build(6)
    assert second is not first
    assert second.number_colors == 6
    assert factory.get_or_build(6) is second


def test_factory_builds_once_under_concurrent_requests(store):
    factory = CustomPaletteFactory(store)
    with ThreadPoolExecutor(max_workers=8) as pool:
        palettes = list(pool.map(lambda _: factory.get_or_build(5), range(32)))
    assert all(p is palettes[0] for p in palettes)


def test_selector_without_config_uses_default(store):
    assert PaletteSelector(CustomPaletteFactory(store)).active_palette(None) is DEFAULT


@pytest.mark.parametrize("palette_type", list(BUILTIN_PALETTES))
def test_selector_returns_builtin_singletons(store, palette_type):
    selector = PaletteSelector(CustomPaletteFactory(store))
    config = IrConfig(palette_type=palette_type)
    assert selector.active_palette(config) is BUILTIN_PALETTES[palette_type]


def test_selector_builds_custom_palette(store):
    selector = PaletteSelector(CustomPaletteFactory(store))
    palette = selector.active_palette(
        IrConfig(palette_type=PaletteType.CUSTOM, custom_palette_number_colors=7)
    )
    assert isinstance(palette, CustomPalette)
    assert palette.number_colors == 7
    assert selector.active_palette(
        IrConfig(palette_type="custom", custom_palette_number_colors=7)
    ) is palette
