"""
Unit tests for asyncshield.styles - Return Styles.
"""

import pytest

from asyncshield.styles import RETURN_STYLES, ReturnStyle, coerce_return_style


def test_wire_values():
    assert RETURN_STYLES == {
        "FALSE_STYLE": "false-style",
        "TRUE_STYLE": "true-style",
        "GO_STYLE": "goStyle",
        "ERROR_STYLE": "errorStyle",
        "ONLY_ERROR": "only-error",
        "BOOLEAN": "boolean",
    }


def test_return_styles_is_read_only():
    with pytest.raises(TypeError):
        RETURN_STYLES["NEW"] = "new"  # type: ignore[index]


@pytest.mark.parametrize("style", list(ReturnStyle))
def test_coerce_known(style: ReturnStyle):
    assert coerce_return_style(style) is style
    assert coerce_return_style(style.value) is style


def test_coerce_unknown_kept_as_string():
    assert coerce_return_style("go-style") == "go-style"
    assert coerce_return_style(7) == "7"


def test_coerce_none_is_default():
    assert coerce_return_style(None) is ReturnStyle.GO_STYLE
