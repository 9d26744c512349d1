import pytest

from spinapp.keys import ConfigError, InvalidPathError, InvalidSchemaError, Key
from spinapp.template import Template
from spinapp.tree import Slot, Tree, TreePath


@pytest.mark.parametrize("path", ["x", "x.y", "a.b_c.d", "f.a1.x_1"])
def test_paths_good(path):
    assert str(TreePath(path)) == path


@pytest.mark.parametrize("path", ["", "_x", "a._x", "a..b"])
def test_paths_bad(path):
    with pytest.raises(ConfigError):
        TreePath(path)


def test_empty_path_is_invalid_path():
    with pytest.raises(InvalidPathError):
        TreePath("")


def test_path_keys():
    assert list(TreePath("a").keys()) == [Key("a")]
    assert list(TreePath("a.b_c.d").keys()) == [Key("a"), Key("b_c"), Key("d")]


def test_path_size():
    assert TreePath("a").size() == 1
    assert TreePath("a.b_c.d").size() == 3


@pytest.mark.parametrize(
    ("rel", "expected"), [(".x", "a.b.x"), ("..x", "a.x"), ("...x", "x")]
)
def test_path_resolve_relative(rel, expected):
    assert str(TreePath("a.b.c").resolve_relative(rel)) == expected


@pytest.mark.parametrize("rel", ["", "x", "....x"])
def test_path_resolve_relative_bad(rel):
    with pytest.raises(InvalidPathError):
        TreePath("a.b.c").resolve_relative(rel)


def test_path_display():
    assert f"{TreePath('a.b.c')}" == "a.b.c"


def test_path_add():
    assert TreePath("a") + TreePath("b.c") == TreePath("a.b.c")
    assert TreePath("a") + Key("d") == TreePath("a.d")


def test_path_ordering():
    assert sorted([TreePath("b"), TreePath("a.z"), TreePath("a")]) == [
        TreePath("a"),
        TreePath("a.z"),
        TreePath("b"),
    ]


def test_slot_debug_secret():
    slot = Slot(default=Template("sesame"))
    assert "sesame" in repr(slot)
    slot.secret = True
    assert "sesame" not in repr(slot)
    assert "<SECRET>" in repr(slot)


def test_tree_from_mapping():
    tree = Tree.from_mapping(
        {
            "required_key": {"required": True},
            "secret_default": {"default": "TOP-SECRET", "secret": True},
        }
    )
    assert tree.get(TreePath("required_key")) == Slot(default=None)
    assert tree.get(TreePath("secret_default")) == Slot(
        default=Template("TOP-SECRET"), secret=True
    )


def test_invalid_slot():
    with pytest.raises(InvalidSchemaError):
        Tree.from_mapping({"not_required_or_default": {"secret": True}})


def test_get_missing_path():
    with pytest.raises(InvalidPathError) as info:
        Tree().get(TreePath("nope"))
    assert "no slot at path: nope" in str(info.value)


def test_slot_raw_round_trip():
    slot = Slot(default=Template("x {{ y }}"), secret=True)
    raw = slot.to_raw()
    assert raw == {"default": "x {{ y }}", "required": False, "secret": True}
    assert Slot.from_raw(raw) == slot
    required = Slot()
    assert Slot.from_raw(required.to_raw()) == required


def test_merge_defaults_and_duplicates():
    tree = Tree()
    tree.merge_defaults(TreePath("child"), {"a": "one", "b": "{{ .a }}"})
    assert tree.get(TreePath("child.b")).default == Template("{{ .a }}")
    assert len(tree) == 2
    with pytest.raises(InvalidPathError) as info:
        tree.merge_defaults(TreePath("child"), [("a", "again")])
    assert "duplicate key at path: child.a" in str(info.value)


def test_merge_defaults_bad_key():
    with pytest.raises(ConfigError):
        Tree().merge_defaults(TreePath("child"), {"Bad": "x"})


def test_merge_tree():
    tree = Tree.from_mapping({"top": {"default": "t"}})
    other = Tree.from_mapping({"x": {"default": "1"}, "y": {"required": True}})
    tree.merge(TreePath("sub"), other)
    assert list(tree) == [TreePath("sub.x"), TreePath("sub.y"), TreePath("top")]
    assert tree.get(TreePath("sub.x")).default == Template("1")