"""Shared fixtures for cmdtree tests."""

import io

import pytest

from cmdtree_lib import Builder


def noop(out, args):
    return None


@pytest.fixture
def sink():
    """Output sink capturing help, diagnostics and action output."""
    return io.StringIO()


@pytest.fixture
def calls():
    """Records (action, args) for every recording action call."""
    return []


@pytest.fixture
def base_cmdr(calls):
    """base -> one -> two -> action three."""
    def three(out, args):
        calls.append(("three", list(args)))
        return "three-called"

    return (
        Builder("base")
        .begin_class("one", "class one")
            .begin_class("two", "class two")
                .add_action("three", "action three", three)
            .end_class()
        .end_class()
        .into_commander()
    )


@pytest.fixture
def example_cmdr():
    """Tree with nested classes and a root-level action."""
    return (
        Builder("cmdtree-example")
        .begin_class("class1", "")
            .begin_class("inner-class1", "")
                .add_action("name", "print class name", noop)
            .end_class()
        .end_class()
        .begin_class("print", "")
            .add_action("echo", "", noop)
            .add_action("countdown", "", noop)
        .end_class()
        .add_action("clone", "", noop)
        .into_commander()
    )
