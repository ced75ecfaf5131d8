"""
IR Enums — Output type tags and their families.

Output tags are namespaced strings ("js/module", "js/script", "asset/png").
The family is derived from the prefix, so tags this table has never seen
still classify without error.
"""

from enum import Enum

JS_PREFIX = "js/"
SCRIPT_PREFIX = "js/script"


class OutputFamily(str, Enum):
    """Closed set of output families."""

    JS = "js"          # Compiled JS, registered or executed by the bundle
    ASSET = "asset"    # Binary or text assets
    OTHER = "other"    # Anything else (source maps, unknown tags)


class OutputKind(str, Enum):
    """
    Known output tags.

    Open catalogue: tags missing from here are still valid outputs.
    """

    JS_MODULE = "js/module"
    JS_MODULE_ASSET = "js/module/asset"
    JS_SCRIPT = "js/script"
    JS_SCRIPT_VIRTUAL = "js/script/virtual"
    JS_SCRIPT_POLYFILL = "js/script/polyfill"

    @property
    def family(self) -> OutputFamily:
        return classify_type_tag(self.value)

    @property
    def is_script(self) -> bool:
        return is_script_type(self.value)


def is_js_type(type_tag: str) -> bool:
    """True for any tag in the JS family."""
    return type_tag.startswith(JS_PREFIX)


def is_script_type(type_tag: str) -> bool:
    """True for JS outputs that execute directly at load time."""
    return type_tag.startswith(SCRIPT_PREFIX)


def classify_type_tag(type_tag: str) -> OutputFamily:
    """Map a type tag to its family. Never raises."""
    if is_js_type(type_tag):
        return OutputFamily.JS
    if type_tag.startswith("asset/") or type_tag == "asset":
        return OutputFamily.ASSET
    return OutputFamily.OTHER
