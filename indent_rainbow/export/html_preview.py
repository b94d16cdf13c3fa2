from html import escape

from .common import depth_color, display_color, palette_keys, preview_depths

SAMPLE_LINE = "value = compute(item)"
ERROR_LINE = "   misaligned = True"


def create_html_preview(scheme_store, resolver, output_path):
    """Create an HTML page previewing indent colors in every scheme.

    Args:
        scheme_store: SchemeStore whose schemes are rendered
        resolver: DepthResolver picking the attribute key per depth
        output_path: Output HTML path
    """
    palette = resolver.palette
    sections = "\n".join(
        _scheme_section(scheme, palette, resolver) for scheme in scheme_store.all_schemes
    )
    html = f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Indent Rainbow Preview ({escape(palette.name)})</title>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{ font-family: sans-serif; padding: 24px; background: #808080; }}
        .scheme {{ margin-bottom: 24px; padding: 16px; border-radius: 8px; }}
        .scheme h2 {{ font-size: 16px; margin-bottom: 12px; }}
        .code {{ font-family: monospace; font-size: 14px; white-space: pre; }}
        .line {{ display: flex; height: 20px; align-items: center; }}
        .indent {{ display: inline-block; width: 4ch; height: 100%; }}
        .swatches {{ display: flex; flex-wrap: wrap; gap: 8px; margin-top: 12px; }}
        .swatch {{ width: 120px; font-size: 11px; }}
        .swatch div {{ height: 32px; border-radius: 4px; margin-bottom: 4px; }}
    </style>
</head>
<body>
{sections}
</body>
</html>"""

    with open(output_path, "w") as f:
        f.write(html)


def _scheme_section(scheme, palette, resolver):
    text_color = "#ffffff" if scheme.is_dark else "#000000"
    lines = []
    for depth in preview_depths(palette):
        if depth == -1:
            color = depth_color(scheme, resolver, depth)
            lines.append(
                f'<div class="line" style="background: {color.hex}">{escape(ERROR_LINE)}</div>'
            )
            continue
        indents = "".join(
            f'<span class="indent" style="background: '
            f'{depth_color(scheme, resolver, level).hex}"></span>'
            for level in range(depth + 1)
        )
        lines.append(f'<div class="line">{indents}{escape(SAMPLE_LINE)}</div>')

    swatches = "".join(
        f'<div class="swatch"><div style="background: {display_color(scheme, key).hex}"></div>'
        f"{escape(key)}<br>{display_color(scheme, key).hex}</div>"
        for key in palette_keys(palette)
    )
    code = "".join(lines)
    return f"""<div class="scheme" style="background: {scheme.default_background.hex}; color: {text_color}">
    <h2>{escape(scheme.name)}</h2>
    <div class="code">{code}</div>
    <div class="swatches">{swatches}</div>
</div>"""
