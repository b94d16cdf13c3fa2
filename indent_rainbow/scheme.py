"""In-memory editor color schemes.

A scheme owns an opaque default background and a mapping from attribute key
to TextAttributes. Only the background slot of an attribute is touched by the
palette code; the other fields are carried through untouched.
"""

import json
import logging
from collections import namedtuple

from .color import color_from_hex, is_color_light

logger = logging.getLogger(__name__)

TextAttributes = namedtuple(
    "TextAttributes", ["foreground", "background", "effect_color"], defaults=(None, None, None)
)

EMPTY_ATTRIBUTES = TextAttributes()


class ColorScheme:
    def __init__(self, name, default_background, attributes=None):
        self.name = name
        self.default_background = default_background
        self._attributes = dict(attributes or {})
        self.save_needed = False
        self.modification_count = 0

    def __repr__(self):
        return f"ColorScheme({self.name!r}, background={self.default_background.hex})"

    @property
    def is_dark(self):
        return not is_color_light(self.default_background)

    @property
    def attribute_keys(self):
        return list(self._attributes)

    def get_attributes(self, key):
        return self._attributes.get(key, EMPTY_ATTRIBUTES)

    def set_attributes(self, key, attributes):
        self._attributes[key] = attributes
        self.modification_count += 1

    def background_of(self, key):
        return self.get_attributes(key).background

    def mark_dirty(self):
        self.save_needed = True


class SchemeStore:
    """All schemes known to the host, plus the currently active one."""

    def __init__(self, schemes=(), current=None):
        self._schemes = {}
        for scheme in schemes:
            self.add(scheme)
        self._current = current
        self._refresh_listeners = []

    @property
    def all_schemes(self):
        return list(self._schemes.values())

    @property
    def current(self):
        if self._current is not None:
            return self._schemes[self._current]
        schemes = self.all_schemes
        return schemes[0] if schemes else None

    def add(self, scheme):
        self._schemes[scheme.name] = scheme

    def get(self, name):
        return self._schemes.get(name)

    def switch_to(self, name):
        if name not in self._schemes:
            raise KeyError(f"Unknown scheme: {name}")
        self._current = name

    def dirty_schemes(self):
        return [s for s in self._schemes.values() if s.save_needed]

    def mark_saved(self):
        for scheme in self._schemes.values():
            scheme.save_needed = False

    def add_refresh_listener(self, callback):
        self._refresh_listeners.append(callback)

    def scheme_changed_or_switched(self, scheme=None):
        """Tell the editor side that scheme colors must be repainted."""
        for callback in self._refresh_listeners:
            callback(scheme)


def load_schemes_from_json(json_path):
    """Load color schemes from a JSON file.

    The file maps scheme names to ``{"background": "#rrggbb", "attributes":
    {KEY: "#rrggbb[aa]"}}``. Top level keys starting with ``_`` are metadata.

    Args:
        json_path: Path to schemes JSON file

    Returns:
        SchemeStore: Store holding every scheme in file order
    """
    with open(json_path) as f:
        data = json.load(f)

    store = SchemeStore()
    for name, entry in data.items():
        # Skip metadata keys
        if name.startswith("_"):
            continue

        attributes = {
            key: TextAttributes(background=color_from_hex(value))
            for key, value in entry.get("attributes", {}).items()
        }
        scheme = ColorScheme(name, color_from_hex(entry["background"]), attributes)
        store.add(scheme)
        logger.debug("Loaded scheme %s with %d attributes", scheme, len(attributes))

    current = data.get("_current")
    if current:
        store.switch_to(current)
    return store


def scheme_to_dict(scheme, keys=None):
    keys = scheme.attribute_keys if keys is None else keys
    attributes = {}
    for key in keys:
        background = scheme.background_of(key)
        if background is not None:
            attributes[key] = background.hex
    return {"background": scheme.default_background.hex, "attributes": attributes}


def export_schemes_json(scheme_store, json_path):
    """Write every scheme with all of its attribute backgrounds.

    The output is the format load_schemes_from_json reads.
    """
    data = {scheme.name: scheme_to_dict(scheme) for scheme in scheme_store.all_schemes}
    current = scheme_store.current
    if current is not None:
        data["_current"] = current.name

    with open(json_path, "w") as f:
        json.dump(data, f, indent=2)
