# tests/core/types/test_classify.py
"""
Testes da variante responsiva (Scalar / PerBreakpoint / Opaque) e do enum Breakpoint.
"""

import pytest

from flexstyle.core.exceptions import UnknownBreakpointError
from flexstyle.core.types import (
    BREAKPOINTS,
    Breakpoint,
    Opaque,
    PerBreakpoint,
    Scalar,
    classify_spacing,
    classify_value,
    coerce_breakpoint,
)


def test_breakpoint_order_and_thresholds():
    assert [bp.value for bp in BREAKPOINTS] == ["sm", "md", "lg"]
    assert Breakpoint.SM.min_width is None
    assert Breakpoint.MD.min_width == 980
    assert Breakpoint.LG.min_width == 1280


def test_breakpoint_media_queries():
    assert Breakpoint.SM.media_query is None
    assert Breakpoint.MD.media_query == "@media (min-width: 980px)"
    assert Breakpoint.LG.media_query == "@media (min-width: 1280px)"


def test_coerce_breakpoint_accepts_tags_and_members():
    assert coerce_breakpoint("md") is Breakpoint.MD
    assert coerce_breakpoint(Breakpoint.LG) is Breakpoint.LG


def test_coerce_breakpoint_rejects_unknown_tag():
    with pytest.raises(UnknownBreakpointError) as info:
        coerce_breakpoint("xl")
    assert isinstance(info.value, ValueError)
    assert info.value.details["allowed"] == ["sm", "md", "lg"]


def test_classify_value_variants():
    assert classify_value(None) is None
    assert classify_value(2) == Scalar(2)
    assert classify_value("row") == Scalar("row")
    assert isinstance(classify_value({"md": 1}), PerBreakpoint)
    assert isinstance(classify_value([1]), Opaque)


def test_scalar_counts_only_at_sm():
    value = Scalar("row")
    assert value.at(Breakpoint.SM) == "row"
    assert value.at(Breakpoint.MD) is None
    assert value.at(Breakpoint.LG) is None


def test_per_breakpoint_does_not_inherit():
    value = PerBreakpoint({"sm": 1, "lg": 3})
    assert value.at(Breakpoint.SM) == 1
    assert value.at(Breakpoint.MD) is None
    assert value.at(Breakpoint.LG) == 3


def test_classify_spacing_variants():
    assert classify_spacing(None) is None
    assert classify_spacing(3) == Scalar(3)
    assert classify_spacing({"all": 3}) == Scalar({"all": 3})
    assert isinstance(classify_spacing({"lg": {"all": 3}}), PerBreakpoint)
    assert isinstance(classify_spacing("3"), Opaque)
    assert isinstance(classify_spacing(True), Opaque)
