import pytest

from spinapp.keys import InvalidTemplateError
from spinapp.template import Expr, Literal, Template


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("a", [Literal("a")]),
        ("a-{{ expr }}-b", [Literal("a-"), Expr("expr"), Literal("-b")]),
        ("{{ expr1 }}{{ expr2 }}", [Expr("expr1"), Expr("expr2")]),
    ],
)
def test_template_parts(text, expected):
    assert list(Template(text)) == expected


def test_template_parts_bad():
    with pytest.raises(InvalidTemplateError):
        Template("{{ matched }} {{ unmatched")


def test_template_str_normalises_expressions():
    assert str(Template("x{{y}}z")) == "x{{ y }}z"


def test_template_str_round_trip():
    template = Template("a-{{ expr }}-b")
    assert Template(str(template)) == template


def test_template_equality():
    assert Template("{{ a }}") == Template("{{a}}")
    assert Template("a") != Template("b")