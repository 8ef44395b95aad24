from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Iterator, Tuple, cast

from boundednumbers import clamp
from numpy import ndarray

from ..types.color_types import ColorModelName, Uint16Quad
from ..types.depth import OPAQUE_16


class ColorBase(ABC):
    """
    Immutable color value.

    Subclasses declare their channel names and per-channel maxima. Channels are
    coerced with ``int()`` and clamped into ``[0, maximum]`` on construction.
    Every subclass implements :meth:`rgba`, the canonical 16-bit
    alpha-premultiplied expansion.
    """

    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    channels:   ClassVar[Tuple[str, ...]]
    mode:       ClassVar[ColorModelName]
    maxima:     ClassVar[Tuple[int, ...]]
    # def color_convert(self: ColorBase, to_space: ColorModelName) -> ColorBase:
    convert: Callable[[ColorBase, ColorModelName], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *value: Any) -> None:
        # Accept both Color(1, 2, 3) and Color((1, 2, 3))
        if len(value) == 1 and isinstance(value[0], (tuple, list, ndarray)):
            value = tuple(cast(Tuple[Any, ...], value[0]))

        if len(value) != len(self.channels):
            raise ValueError(
                f"{self.mode} expects {len(self.channels)} channels {self.channels}, got {len(value)}"
            )

        coerced = []
        for name, v, m in zip(self.channels, value, self.maxima):
            if isinstance(v, (str, bytes)) or v is None:
                raise TypeError(f"{self.mode} channel {name} must be numeric, got {type(v).__name__}")
            coerced.append(clamp(int(v), 0, m))

        self._value = tuple(coerced)

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[int, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color model carries an alpha channel."""
        return 'a' in self.channels

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == cast(ColorBase, other)._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v}" for n, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    @abstractmethod
    def rgba(self) -> Uint16Quad:
        """
        Expand to 16-bit-per-channel, alpha-premultiplied (r, g, b, a).

        Each channel is in [0, 0xffff].
        """


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    channels: ClassVar[Tuple[str, ...]]
    maxima: ClassVar[Tuple[int, ...]]
    value: Tuple[int, ...]

    @property
    def alpha(self) -> int:
        return self.value[-1]

    def with_alpha(self, alpha: int):
        """Return a new instance with the alpha channel replaced (clamped)."""
        return self.__class__(self.value[:-1] + (alpha,))  # type: ignore


def premultiply(channel16: int, alpha16: int) -> int:
    """Scale a 16-bit channel by a 16-bit alpha."""
    if alpha16 == OPAQUE_16:
        return channel16
    return channel16 * alpha16 // OPAQUE_16


def build_registry(*classes: type[ColorBase]):
    return {cls.mode: cls for cls in classes}
