"""Declarative per-device values.

`ResponsiveValue` stores phone/tablet/desktop alternatives and resolves them
against a breakpoint or spacing profile. `responsive_switch` does the same
for content that is either ready (`Direct`) or built on demand (`Lazy`), so
a view only constructs the branch that is actually shown.

Resolution order is always desktop, tablet, phone, fallback. A branch is
taken only when its device predicate holds and its value is not None; a
phone breakpoint with only a desktop value supplied yields the fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from .breakpoints import Breakpoint
from .profile import SpacingProfile

T = TypeVar("T")

__all__ = ["ResponsiveValue", "Direct", "Lazy", "SwitchContent", "responsive_switch"]


def _select(
    target: Union[Breakpoint, SpacingProfile],
    phone: Optional[T],
    tablet: Optional[T],
    desktop: Optional[T],
    fallback: T,
) -> T:
    if isinstance(target, SpacingProfile):
        target = target.breakpoint
    if target.is_desktop and desktop is not None:
        return desktop
    if target.is_tablet and tablet is not None:
        return tablet
    if target.is_phone and phone is not None:
        return phone
    return fallback


@dataclass(frozen=True)
class ResponsiveValue(Generic[T]):
    fallback: T
    phone: Optional[T] = None
    tablet: Optional[T] = None
    desktop: Optional[T] = None

    def __call__(self, target: Union[Breakpoint, SpacingProfile]) -> T:
        return _select(target, self.phone, self.tablet, self.desktop, self.fallback)


@dataclass(frozen=True)
class Direct(Generic[T]):
    """Content that already exists."""

    value: T

    def resolve(self) -> T:
        return self.value


@dataclass(frozen=True)
class Lazy(Generic[T]):
    """Content produced by a zero-argument callable when selected."""

    producer: Callable[[], T]

    def resolve(self) -> T:
        return self.producer()


SwitchContent = Union[Direct[T], Lazy[T]]


def responsive_switch(
    profile: SpacingProfile,
    phone: Optional[SwitchContent] = None,
    tablet: Optional[SwitchContent] = None,
    desktop: Optional[SwitchContent] = None,
    *,
    fallback: SwitchContent,
):
    """Select the content variant for the profile's device class and resolve it."""
    chosen = _select(profile, phone, tablet, desktop, fallback)
    return chosen.resolve()
