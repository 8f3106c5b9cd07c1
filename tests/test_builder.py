"""Tests for tree construction and name validation."""

import pytest

from cmdtree_lib import Builder, BuildError, CommanderBuildError
from cmdtree_lib.tree import Action, SubClass, check_names


def noop(out, args):
    return None


class TestSubClass:
    """Tests for node construction."""

    def test_name_is_lowercased(self):
        sc = SubClass("NAME", "Help Message")
        assert sc.name == "name"
        assert sc.help == "Help Message"

    def test_action_name_is_lowercased(self):
        action = Action("DoIt", "help", noop)
        assert action.name == "doit"

    def test_freeze_converts_children_to_tuples(self):
        root = SubClass("root")
        child = SubClass("child")
        child.actions.append(Action("act", "", noop))
        root.classes.append(child)
        root.freeze()
        assert isinstance(root.classes, tuple)
        assert isinstance(root.actions, tuple)
        assert isinstance(child.actions, tuple)


class TestCheckNames:
    """Tests for check_names."""

    def test_free_name(self):
        sc = SubClass("name", "adsf")
        assert check_names("name1", sc) is None

    def test_existing_class(self):
        sc = SubClass("name", "adsf")
        sc.classes.append(SubClass("sub-name", "asdf"))
        assert check_names("name1", sc) is None
        assert check_names("sub-name", sc) is BuildError.NAME_EXISTS_AS_CLASS

    def test_existing_action(self):
        sc = SubClass("name", "adsf")
        sc.actions.append(Action("name1", "adf", noop))
        assert check_names("name1", sc) is BuildError.NAME_EXISTS_AS_ACTION

    def test_case_insensitive(self):
        sc = SubClass("name", "adsf")
        sc.classes.append(SubClass("sub-name", "asdf"))
        assert check_names("SUB-Name", sc) is BuildError.NAME_EXISTS_AS_CLASS

    def test_empty_name_accepted(self):
        assert check_names("", SubClass("root")) is None

    @pytest.mark.parametrize("word", ["help", "cancel", "c", "exit", "HELP", "Exit"])
    def test_reserved_words(self, word):
        assert check_names(word, SubClass("root")) is BuildError.NAME_EXISTS_AS_ACTION


class TestBuilder:
    """Tests for the chained Builder."""

    def test_reserved_word_class_fails(self):
        builder = Builder("adf").begin_class("help", "shouldn't work")
        assert builder.error is BuildError.NAME_EXISTS_AS_ACTION
        assert not builder.ok

    def test_duplicate_action_fails(self):
        builder = Builder("root").add_action("a", "", noop).add_action("A", "", noop)
        assert builder.error is BuildError.NAME_EXISTS_AS_ACTION

    def test_action_named_like_class_fails(self):
        builder = Builder("root").begin_class("a", "").end_class().add_action("a", "", noop)
        assert builder.error is BuildError.NAME_EXISTS_AS_CLASS

    def test_same_name_allowed_in_different_classes(self):
        cmdr = (
            Builder("root")
            .add_action("path", "", noop)
            .begin_class("nested", "")
                .add_action("path", "", noop)
            .into_commander()
        )
        assert cmdr.root.find_action("path") is not None
        assert cmdr.root.find_class("nested").find_action("path") is not None

    def test_end_class_at_root_fails(self):
        builder = Builder("root").end_class()
        assert builder.error is BuildError.NO_PARENT

    def test_failure_short_circuits_chain(self):
        builder = (
            Builder("root")
            .end_class()
            .begin_class("a", "")
            .add_action("b", "", noop)
        )
        assert builder.error is BuildError.NO_PARENT
        assert builder.parents == []
        assert builder.current.name == "root"
        assert list(builder.current.classes) == []
        assert list(builder.current.actions) == []

    def test_first_error_is_kept(self):
        builder = Builder("root").begin_class("exit", "").end_class().end_class()
        assert builder.error is BuildError.NAME_EXISTS_AS_ACTION

    def test_into_commander_raises_on_error(self):
        with pytest.raises(CommanderBuildError) as exc_info:
            Builder("root").begin_class("c", "").into_commander()
        assert exc_info.value.error is BuildError.NAME_EXISTS_AS_ACTION

    def test_root_closes_open_classes(self):
        builder = (
            Builder("root")
            .begin_class("adsf", "adf")
            .begin_class("adsf", "adsf")
            .begin_class("asdf", "adsf")
            .root()
        )
        assert builder.ok
        assert builder.parents == []
        assert builder.current.name == "root"

    def test_into_commander_at_root(self):
        cmdr = Builder("Root").begin_class("a", "").begin_class("b", "").into_commander()
        assert cmdr.path == "root"
        assert cmdr.current is cmdr.root
        assert cmdr.at_root

    def test_open_and_closed_scopes_converge(self):
        left = Builder("r").begin_class("a", "").begin_class("b", "").into_commander()
        right = Builder("r").begin_class("a", "").begin_class("b", "").end_class().end_class().into_commander()
        assert left.root == right.root

    def test_default_root_help(self):
        cmdr = Builder("r").into_commander()
        assert cmdr.root.help == "base class of commander tree"

    def test_names_are_lowercase_and_unique(self, example_cmdr):
        stack = [example_cmdr.root]
        while stack:
            node = stack.pop()
            names = [c.name for c in node.classes] + [a.name for a in node.actions]
            assert all(name == name.lower() for name in names)
            assert len(names) == len(set(names))
            stack.extend(node.classes)

    def test_tree_is_frozen(self, example_cmdr):
        assert isinstance(example_cmdr.root.classes, tuple)
        with pytest.raises(AttributeError):
            example_cmdr.root.classes.append(SubClass("x"))
