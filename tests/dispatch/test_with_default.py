import pytest

from scribere.dispatch import WithDefault, with_default
from scribere.models import CodeBlock, Event


def _blk(content):
    return CodeBlock(lang="", content=content)


def test_patches_first_event_only():
    events = [
        Event.new_none(_blk("1")),
        Event.new_none(_blk("2")),
        Event.new_some("c", _blk("3")),
    ]
    assert list(with_default(events, "b")) == [
        Event.new_some("b", _blk("1")),
        Event.new_none(_blk("2")),
        Event.new_some("c", _blk("3")),
    ]


@pytest.mark.parametrize("default", ["default", "other", "given"])
def test_passthrough_when_first_event_has_target(default):
    events = [
        Event.new_some("given", _blk("1")),
        Event.new_none(_blk("2")),
        Event.new_some("change", _blk("3")),
        Event.new_none(_blk("4")),
    ]
    assert list(with_default(events, default)) == events


def test_applying_twice_keeps_first_default():
    base = [Event.new_none(_blk("1")), Event.new_none(_blk("2"))]
    once = list(with_default(base, "x"))
    twice = list(with_default(with_default(base, "x"), "y"))
    assert twice == once
    assert once[0].target == "x"


def test_empty_stream():
    assert list(with_default([], "x")) == []


class _Flaky:
    """Raises on the first pull, then yields a target-less event."""

    def __init__(self):
        self.calls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("flaky")
        if self.calls == 2:
            return Event.new_none(_blk("late"))
        raise StopIteration


def test_failing_first_pull_spends_the_default():
    wd = with_default(_Flaky(), "x")
    with pytest.raises(RuntimeError, match="flaky"):
        next(wd)
    assert next(wd).target is None


def test_last_target_supports_splicing():
    first = WithDefault([Event.new_none(_blk("1")), Event.new_some("b", _blk("2")), Event.new_none(_blk("3"))], "a")
    head = list(first)
    assert first.last_target == "b"

    # The second half starts without a target; carry over where the first ended.
    tail = list(with_default([Event.new_none(_blk("4"))], first.last_target))
    assert [e.target for e in head + tail] == ["a", "b", None, "b"]
