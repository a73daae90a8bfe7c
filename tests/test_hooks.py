"""Tests for the HookRegistry."""

import pytest

from hookfetch.exceptions import ConfigurationError
from hookfetch.hooks import HookRegistry, as_hook_list


def before_a(url, request):
    pass


def before_b(url, request):
    pass


def after_a(response, data):
    pass


def test_add_hooks_preserves_order_and_chains():
    """Test hooks are appended in order and add_* returns the registry."""
    registry = HookRegistry()
    result = registry.add_before_hook(before_a).add_before_hook(before_b)

    assert result is registry
    assert registry.before_hooks == (before_a, before_b)


def test_same_hook_added_twice_is_registered_twice():
    """Test there is no deduplication on add."""
    registry = HookRegistry().add_before_hook(before_a).add_before_hook(before_a)
    assert registry.before_hooks == (before_a, before_a)


def test_remove_drops_every_identical_registration():
    """Test removal by identity drops all registrations of that callable."""
    registry = HookRegistry(before=[before_a, before_b, before_a])

    registry.remove_before_hook(before_a)

    assert registry.before_hooks == (before_b,)


def test_remove_matches_identity_not_equality():
    """Test an equal-but-distinct callable is not removed."""

    class Tagger:
        def __call__(self, url, request):
            pass

        def __eq__(self, other):
            return isinstance(other, Tagger)

        __hash__ = object.__hash__

    registered = Tagger()
    registry = HookRegistry(before=[registered])

    registry.remove_before_hook(Tagger())

    assert registry.before_hooks == (registered,)


def test_remove_absent_hook_is_noop():
    """Test removing an unknown hook does not raise."""
    registry = HookRegistry(after=[after_a])

    assert registry.remove_after_hook(before_a) is registry
    assert registry.after_hooks == (after_a,)


def test_clear_hooks_empties_both_lists():
    """Test clear_hooks removes before- and after-hooks."""
    registry = HookRegistry(before=[before_a], after=[after_a])

    assert registry.clear_hooks() is registry
    assert registry.before_hooks == ()
    assert registry.after_hooks == ()


def test_snapshot_is_not_affected_by_later_registration():
    """Test the before_hooks tuple is a snapshot of the list."""
    registry = HookRegistry(before=[before_a])
    snapshot = registry.before_hooks

    registry.add_before_hook(before_b)

    assert snapshot == (before_a,)


def test_non_callable_hook_raises_configuration_error():
    """Test registering something that is not callable fails fast."""
    with pytest.raises(ConfigurationError, match="Before hook must be callable"):
        HookRegistry().add_before_hook("not a hook")
    with pytest.raises(ConfigurationError, match="After hook must be callable"):
        HookRegistry(after=[42])


@pytest.mark.parametrize(
    ("hooks", "expected"),
    [
        (None, []),
        (before_a, [before_a]),
        ([before_a, before_b], [before_a, before_b]),
        ((before_b,), [before_b]),
    ],
)
def test_as_hook_list(hooks, expected):
    """Test a single hook, a sequence or None is normalized to a list."""
    assert as_hook_list(hooks) == expected
