"""Tests for inline numeric input declaration and value rules."""

import math
import random

import pytest
from htmltools import tags

from tangle.assets import STATIC_DIR, inline_dependency
from tangle.controls import (
    InlineNumericInput,
    constrain,
    format_display,
    format_initial,
    inline_numeric_input,
    parse_display,
    quantize,
)
from tangle.controls.quantize import clamp, round_half_up, to_fixed_1
from tangle.exceptions import InvalidBoundsError, InvalidStepError


class TestQuantize:
    """Tests for clamping and step quantization."""

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.4) == 2

    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(100) == 100
        assert clamp(-100, None, 3) == -100

    def test_quantize_to_tenths(self):
        assert quantize(7.37, 0.1) == pytest.approx(7.4)
        assert quantize(7.34, 0.1) == pytest.approx(7.3)

    def test_quantize_to_whole_steps(self):
        assert quantize(12.6, 5) == 15
        assert quantize(12.4, 5) == 10

    def test_constrain_matches_law_for_aligned_bounds(self):
        rng = random.Random(0)
        lo, hi, step = -5.0, 5.0, 0.5
        for _ in range(200):
            v = rng.uniform(-20, 20)
            expected = math.floor(min(hi, max(lo, v)) / step + 0.5) * step
            result = constrain(v, step, lo, hi)
            assert result == pytest.approx(expected)
            assert lo <= result <= hi

    def test_constrain_stays_inside_unaligned_max(self):
        # 0.25 quantizes up to 0.3, which is past the max
        assert constrain(0.9, 0.1, 0.0, 0.25) == pytest.approx(0.2)

    def test_constrain_stays_inside_unaligned_min(self):
        # 0.04 quantizes down to 0.0, which is below the min
        assert constrain(-3, 0.1, 0.04, 1) == pytest.approx(0.1)

    def test_constrain_without_a_fitting_multiple(self):
        assert 0.2 <= constrain(10, 1, 0.2, 0.4) <= 0.4

    def test_constrain_unbounded(self):
        assert constrain(123.456, 0.1) == pytest.approx(123.5)


class TestDisplayFormatting:
    """Tests for the text shown inside the field."""

    def test_integer_step_shows_integer(self):
        assert format_display(7.0, 1) == "7"
        assert format_display(6.5, 1) == "7"

    def test_fractional_step_shows_one_decimal(self):
        assert format_display(7.4000000000000004, 0.1) == "7.4"
        assert format_display(5, 0.1) == "5.0"

    def test_other_steps_show_one_decimal(self):
        # only a step of exactly 1 gets integer display
        assert format_display(10, 5) == "10.0"

    def test_to_fixed_rounds_halves_away_from_zero(self):
        assert to_fixed_1(0.25) == "0.3"
        assert to_fixed_1(-0.25) == "-0.3"

    def test_initial_integral_value_and_step(self):
        assert format_initial(5, 1) == "5"
        assert format_initial(49, 1.0) == "49"

    def test_initial_keeps_a_decimal(self):
        assert format_initial(5, 0.1) == "5.0"
        assert format_initial(3.1, 1) == "3.1"
        assert format_initial(3.14159, 0.1) == "3.14159"

    def test_parse_display(self):
        assert parse_display("7.4") == 7.4
        assert parse_display(" -3") == -3
        assert parse_display("12abc") == 12

    def test_parse_display_defaults_to_zero(self):
        assert parse_display("") == 0
        assert parse_display("abc") == 0
        assert parse_display(None) == 0


class TestInlineNumericInput:
    """Tests for declaring controls."""

    def test_defaults(self):
        control = inline_numeric_input("x")
        assert control.value == 0
        assert control.step == 0.1
        assert control.sensitivity == 0.1
        assert control.min is None and control.max is None
        assert not control.bounded

    def test_values_are_floats(self):
        control = inline_numeric_input("n", 5, min=0, max=10, step=1)
        assert isinstance(control.value, float)
        assert control.display_value == "5"

    def test_min_greater_than_max(self):
        with pytest.raises(InvalidBoundsError):
            inline_numeric_input("x", 1, min=5, max=1)

    def test_equal_bounds_allowed(self):
        control = inline_numeric_input("x", 1, min=1, max=1)
        assert control.bounded

    @pytest.mark.parametrize("field", ["step", "sensitivity"])
    def test_non_positive_rates(self, field):
        with pytest.raises(InvalidStepError):
            inline_numeric_input("x", **{field: 0})

    def test_element_attributes(self):
        html = str(inline_numeric_input("side_a", 5, min=0.1, max=20).to_tag())
        assert html.startswith("<input")
        assert 'type="number"' in html
        assert 'id="side_a"' in html
        assert 'class="inline-interactive-number"' in html
        assert 'value="5.0"' in html
        assert 'min="0.1"' in html
        assert 'max="20"' in html
        assert 'step="0.1"' in html
        assert 'data-sensitivity="0.1"' in html

    def test_unbounded_omits_min_and_max(self):
        html = str(inline_numeric_input("x", 2).to_tag())
        assert " min=" not in html
        assert " max=" not in html

    def test_attaches_shared_dependency(self):
        fragment = inline_numeric_input("x").tagify()
        rendered = fragment.render()
        assert [d.name for d in rendered["dependencies"]] == ["inline-interactive"]
        assert 'id="x"' in rendered["html"]

    def test_dependency_included_once_per_page(self):
        page = tags.div(
            tags.p(inline_numeric_input("a", 1), inline_numeric_input("b", 2)),
            tags.p(inline_numeric_input("c", 3)),
        )
        names = [d.name for d in page.render()["dependencies"]]
        assert names.count("inline-interactive") == 1

    def test_dependency_files(self):
        dep = inline_dependency()
        assert dep.name == "inline-interactive"
        assert (STATIC_DIR / "inline.js").is_file()
        assert (STATIC_DIR / "inline.css").is_file()

    def test_to_dict(self):
        d = InlineNumericInput("x", 1.0, min=0.0).to_dict()
        assert d["input_id"] == "x"
        assert d["min"] == 0.0
        assert d["max"] is None
