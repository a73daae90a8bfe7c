"""Ordered registry of before-request and after-response hooks."""

from collections.abc import Callable, Iterable
from typing import Any, Self

from .exceptions import ConfigurationError
from .log_config import logger
from .types import AfterHook, BeforeHook


def _hook_name(hook: Callable[..., Any]) -> str:
    return getattr(hook, "__name__", type(hook).__name__)


def as_hook_list(
    hooks: Callable[..., Any] | Iterable[Callable[..., Any]] | None,
) -> list[Callable[..., Any]]:
    """Normalize a single hook, a sequence of hooks, or None into a list."""
    if hooks is None:
        return []
    if callable(hooks):
        return [hooks]
    return list(hooks)


class HookRegistry:
    """Holds the before- and after-hooks of one Fetcher instance.

    Hooks run in registration order. Adding the same callable twice registers
    it twice; removal matches on identity and drops every registration of
    that callable.
    """

    def __init__(
        self,
        before: Iterable[BeforeHook] = (),
        after: Iterable[AfterHook] = (),
    ):
        self._before: list[BeforeHook] = []
        self._after: list[AfterHook] = []
        for hook in before:
            self.add_before_hook(hook)
        for hook in after:
            self.add_after_hook(hook)

    @property
    def before_hooks(self) -> tuple[BeforeHook, ...]:
        return tuple(self._before)

    @property
    def after_hooks(self) -> tuple[AfterHook, ...]:
        return tuple(self._after)

    @staticmethod
    def _check(hook: Any, kind: str) -> None:
        if not callable(hook):
            raise ConfigurationError(
                f"{kind} hook must be callable, got {type(hook).__name__}"
            )

    def add_before_hook(self, hook: BeforeHook) -> Self:
        self._check(hook, "Before")
        self._before.append(hook)
        logger.debug(f"Registered before-hook {_hook_name(hook)}")
        return self

    def add_after_hook(self, hook: AfterHook) -> Self:
        self._check(hook, "After")
        self._after.append(hook)
        logger.debug(f"Registered after-hook {_hook_name(hook)}")
        return self

    def remove_before_hook(self, hook: BeforeHook) -> Self:
        self._before = [h for h in self._before if h is not hook]
        return self

    def remove_after_hook(self, hook: AfterHook) -> Self:
        self._after = [h for h in self._after if h is not hook]
        return self

    def clear_hooks(self) -> Self:
        """Remove every before- and after-hook."""
        self._before = []
        self._after = []
        logger.debug("Cleared all hooks")
        return self
