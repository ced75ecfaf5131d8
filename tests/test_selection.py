"""
Tests for JS output selection and module classification.

The selector requires exactly one JS output with a finite line count; the
classifier only asks whether any JS output exists. Both contracts are tested
separately on the same inputs.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

import pytest

from jsmodwrap.core.errors import (
    UNKNOWN_MODULE,
    InvalidLineCount,
    ModuleOutputError,
    WrongOutputCount,
)
from jsmodwrap.selection import get_js_output, is_finite_line_count, is_js_module, is_js_output


# =============================================================================
# Mock Objects for Testing
# =============================================================================

@dataclass
class MockData:
    code: str = "__d(function() {})"
    line_count: Any = 1


@dataclass
class MockOutput:
    type: str
    data: MockData = field(default_factory=MockData)


@dataclass
class MockModule:
    output: list
    path: Optional[str] = None
    dependencies: dict = field(default_factory=dict)


# =============================================================================
# Output Selector
# =============================================================================

class TestGetJsOutput:
    """Tests for get_js_output."""

    def test_returns_the_single_js_output(self, make_module, make_output):
        js = make_output("js/module")
        module = make_module(outputs=[js])
        assert get_js_output(module) is js

    def test_ignores_non_js_outputs(self, make_module, make_output):
        js = make_output("js/module")
        module = make_module(outputs=[make_output("asset/png"), js, make_output("other/map")])
        assert get_js_output(module) is js

    def test_script_output_is_selected_too(self, make_module, make_output):
        script = make_output("js/script/virtual", code="var x = 1;")
        assert get_js_output(make_module(outputs=[script])) is script

    def test_zero_js_outputs(self, make_module, make_output):
        module = make_module(outputs=[make_output("asset/png")])
        with pytest.raises(WrongOutputCount) as exc:
            get_js_output(module)
        assert exc.value.count == 0
        assert exc.value.expected == 1
        assert exc.value.module_path == "/root/src/foo.js"

    def test_empty_output_list(self, make_module):
        with pytest.raises(WrongOutputCount) as exc:
            get_js_output(make_module(outputs=[]))
        assert exc.value.count == 0

    def test_two_js_outputs(self, make_module, make_output):
        module = make_module(outputs=[make_output("js/module"), make_output("js/script")])
        with pytest.raises(WrongOutputCount) as exc:
            get_js_output(module)
        assert exc.value.count == 2
        assert "has 2 JS outputs" in str(exc.value)

    def test_missing_path_reports_unknown_module(self):
        module = MockModule(output=[])
        with pytest.raises(WrongOutputCount) as exc:
            get_js_output(module)
        assert exc.value.module_path == UNKNOWN_MODULE
        assert "unknown module has 0 JS outputs" in str(exc.value)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf"), None, "12", True])
    def test_invalid_line_count(self, make_module, make_output, bad):
        module = make_module(outputs=[make_output("js/module", line_count=bad)])
        with pytest.raises(InvalidLineCount) as exc:
            get_js_output(module)
        assert exc.value.output_type == "js/module"
        assert exc.value.module_path == "/root/src/foo.js"
        if isinstance(bad, float) and math.isnan(bad):
            assert math.isnan(exc.value.value)
        else:
            assert exc.value.value == bad

    def test_infinity_is_carried_literally(self, make_module, make_output):
        module = make_module(outputs=[make_output("js/script", line_count=float("inf"))])
        with pytest.raises(InvalidLineCount) as exc:
            get_js_output(module)
        assert exc.value.value == float("inf")
        assert exc.value.output_type == "js/script"
        assert "inf" in str(exc.value)

    def test_zero_line_count_is_valid(self, make_module, make_output):
        js = make_output(line_count=0)
        assert get_js_output(make_module(outputs=[js])) is js

    def test_float_line_count_is_valid(self, make_module, make_output):
        js = make_output(line_count=3.0)
        assert get_js_output(make_module(outputs=[js])) is js

    def test_errors_share_a_base_class(self, make_module):
        with pytest.raises(ModuleOutputError):
            get_js_output(make_module(outputs=[]))

    def test_count_checked_before_line_count(self, make_module, make_output):
        module = make_module(outputs=[
            make_output("js/module", line_count=float("nan")),
            make_output("js/module", line_count=float("nan")),
        ])
        with pytest.raises(WrongOutputCount):
            get_js_output(module)

    def test_duck_typed_records(self):
        out = MockOutput(type="js/module")
        module = MockModule(output=[MockOutput(type="asset/png"), out], path="/p/a.js")
        assert get_js_output(module) is out

    def test_mapping_records(self):
        js = {"type": "js/module", "data": {"code": "__d(function(){})", "lineCount": 4}}
        module = {"path": "/p/a.js", "output": [js]}
        assert get_js_output(module) is js

    def test_mapping_record_without_line_count(self):
        module = {"path": "/p/a.js", "output": [{"type": "js/module", "data": {"code": ""}}]}
        with pytest.raises(InvalidLineCount) as exc:
            get_js_output(module)
        assert exc.value.value is None

    def test_repeated_calls_agree(self, foo_module):
        assert get_js_output(foo_module) is get_js_output(foo_module)


class TestIsFiniteLineCount:

    @pytest.mark.parametrize("value", [0, 1, 250, 2.0])
    def test_finite(self, value):
        assert is_finite_line_count(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), None, "3", False, [1]])
    def test_not_finite(self, value):
        assert not is_finite_line_count(value)


# =============================================================================
# Module Classifier
# =============================================================================

class TestIsJsModule:
    """Tests for is_js_module."""

    def test_single_js_output(self, foo_module):
        assert is_js_module(foo_module) is True

    def test_asset_only_module(self, make_module, make_output):
        module = make_module(outputs=[make_output("asset/png"), make_output("asset/svg")])
        assert is_js_module(module) is False

    def test_no_outputs(self, make_module):
        assert is_js_module(make_module(outputs=[])) is False

    def test_tolerates_multiple_js_outputs(self, make_module, make_output):
        """The selector rejects this module; the classifier still accepts it."""
        module = make_module(outputs=[make_output("js/module"), make_output("js/script")])
        assert is_js_module(module) is True
        with pytest.raises(WrongOutputCount):
            get_js_output(module)

    def test_ignores_line_count(self, make_module, make_output):
        module = make_module(outputs=[make_output(line_count=float("nan"))])
        assert is_js_module(module) is True

    def test_unknown_js_tag_counts(self, make_module, make_output):
        assert is_js_module(make_module(outputs=[make_output("js/experimental")])) is True

    def test_prefix_must_include_slash(self, make_module, make_output):
        assert is_js_module(make_module(outputs=[make_output("json/data")])) is False

    def test_is_js_output(self, make_output):
        assert is_js_output(make_output("js/module/asset"))
        assert not is_js_output(make_output("asset/png"))

    def test_repeated_calls_agree(self, foo_module):
        assert is_js_module(foo_module) == is_js_module(foo_module)
