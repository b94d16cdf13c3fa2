import argparse
import logging
import os

from .colors import IndentRainbowColors
from .config import ConfigService, IrConfig, PaletteType, load_config_from_json
from .errors import ConfigError
from .export import create_html_preview, export_json, print_palette, render_swatch_png
from .scheme import export_schemes_json, load_schemes_from_json


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Composite indent rainbow palettes into editor color schemes"
    )
    parser.add_argument(
        "schemes_path",
        help="Path to a schemes JSON file",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file)",
    )
    parser.add_argument(
        "--config",
        metavar="JSON",
        help="Load settings from a config JSON file (flags below override it)",
    )
    parser.add_argument(
        "--palette",
        choices=[t.value for t in PaletteType],
        default=None,
        help="Palette to apply",
    )
    parser.add_argument(
        "--opacity-multiplier",
        type=float,
        default=None,
        help="Opacity multiplier (-1.0 to 1.0)",
    )
    parser.add_argument(
        "--custom-colors",
        type=int,
        default=None,
        help="Number of colors of the custom palette",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every color change",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
    except ConfigError as e:
        parser.error(str(e))
    _run(args, config)


def _build_config(args):
    config = load_config_from_json(args.config) if args.config else IrConfig()
    data = config.to_dict()
    if args.palette is not None:
        data["palette_type"] = args.palette
    if args.opacity_multiplier is not None:
        data["opacity_multiplier"] = args.opacity_multiplier
    if args.custom_colors is not None:
        data["custom_palette_number_colors"] = args.custom_colors
    return IrConfig.from_dict(data)


def _run(args, config):
    """Sync the schemes of a JSON file and write previews."""
    schemes_path = args.schemes_path
    output_dir = args.output or os.path.dirname(schemes_path) or "."

    os.makedirs(output_dir, exist_ok=True)

    print(f"Loading schemes: {schemes_path}")
    store = load_schemes_from_json(schemes_path)
    colors = IndentRainbowColors(store, ConfigService(config))
    palette = colors.current_palette
    print(f"Palette: {palette.name} ({len(palette.indent_keys)} colors)")

    colors.refresh_editor_indent_colors()

    for scheme in store.all_schemes:
        print_palette(scheme, palette)

    json_path = os.path.join(output_dir, "schemes-synced.json")
    report_path = os.path.join(output_dir, "indent-report.json")
    html_path = os.path.join(output_dir, "indent_preview.html")
    export_schemes_json(store, json_path)
    export_json(store, palette, report_path, config=config)
    create_html_preview(store, colors.resolver, html_path)
    swatch_paths = [
        render_swatch_png(
            scheme, colors.resolver, os.path.join(output_dir, f"swatch-{_slug(scheme.name)}.png")
        )
        for scheme in store.all_schemes
    ]

    changed = [scheme.name for scheme in store.dirty_schemes()]

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {json_path}")
    print(f"  - {report_path}")
    print(f"  - {html_path}")
    for path in swatch_paths:
        print(f"  - {path}")
    print(f"\nChanged schemes: {', '.join(changed) if changed else 'none'}")
    print("=" * 60)
    store.mark_saved()
    return changed


def _slug(name):
    return "".join(c if c.isalnum() else "_" for c in name.lower())


if __name__ == "__main__":
    main()
