import pytest

from indent_rainbow.config import ConfigService, IrConfig
from indent_rainbow.depth import ERROR_DEPTH, DepthResolver
from indent_rainbow.palette import (
    DEFAULT,
    NIGHTFALL,
    PASTEL,
    SPECTRUM,
    CustomPaletteFactory,
    PaletteSelector,
)


@pytest.fixture
def selector(store):
    return PaletteSelector(CustomPaletteFactory(store))


@pytest.mark.parametrize("palette", [DEFAULT, PASTEL, SPECTRUM, NIGHTFALL])
def test_depths_wrap_around_palette(selector, palette):
    resolver = DepthResolver(selector, ConfigService(IrConfig(palette_type=palette.name)))
    size = len(palette.indent_keys)

    assert resolver.attribute_for(0) == palette.indent_keys[0]
    assert resolver.attribute_for(size) == resolver.attribute_for(0)
    for m in range(3 * size):
        assert resolver.attribute_for(size + m) == resolver.attribute_for(m % size)


@pytest.mark.parametrize("palette_type", ["default", "pastel", "spectrum", "nightfall", "custom"])
def test_error_sentinel_resolves_to_error_key(selector, palette_type):
    resolver = DepthResolver(selector, ConfigService(IrConfig(palette_type=palette_type)))
    assert resolver.attribute_for(ERROR_DEPTH) == resolver.palette.error_key
    assert resolver.error_attribute() == resolver.palette.error_key


def test_custom_palette_depths(selector):
    service = ConfigService(IrConfig(palette_type="custom", custom_palette_number_colors=2))
    resolver = DepthResolver(selector, service)
    assert resolver.attribute_for(0) == "INDENT_RAINBOW_COLOR_1_CUSTOM"
    assert resolver.attribute_for(3) == "INDENT_RAINBOW_COLOR_2_CUSTOM"
    assert resolver.attribute_for(-1) == "INDENT_RAINBOW_ERROR_CUSTOM"


def test_follows_config_updates(selector):
    service = ConfigService()
    resolver = DepthResolver(selector, service)
    assert resolver.attribute_for(4) == DEFAULT.indent_keys[0]

    service.update(palette_type="pastel")
    assert resolver.attribute_for(4) == PASTEL.indent_keys[4]


def test_without_config_service_uses_default(selector):
    resolver = DepthResolver(selector)
    assert resolver.palette is DEFAULT
    assert resolver.attribute_for(5) == DEFAULT.indent_keys[1]


def test_background_for_reads_scheme(selector, dark_scheme):
    resolver = DepthResolver(selector)
    assert resolver.background_for(dark_scheme, 0) is None
