"""Fluent CSS selector builder.

A compound selector is written in a fixed part order:

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class may repeat. Compound selectors are joined
with the combinators " ", "+", "~" and ">" via ``combine``.

    css_selector_builder.id("main").class_("container").stringify()
    => "#main.container"
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

from kata_toolkit.core.errors import SelectorError


ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)

# Part rank in rendering order.
ELEMENT, ID, CLASS, ATTR, PSEUDO_CLASS, PSEUDO_ELEMENT = range(1, 7)

UNIQUE_PARTS: frozenset[int] = frozenset({ELEMENT, ID, PSEUDO_ELEMENT})


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


@dataclass(frozen=True)
class CssSelector:
    text: str = ""
    last_rank: int = 0
    used: frozenset[int] = frozenset()

    def element(self, value: str) -> CssSelector:
        return self._append(ELEMENT, value)

    def id(self, value: str) -> CssSelector:
        return self._append(ID, f"#{value}")

    def class_(self, value: str) -> CssSelector:
        return self._append(CLASS, f".{value}")

    def attr(self, value: str) -> CssSelector:
        return self._append(ATTR, f"[{value}]")

    def pseudo_class(self, value: str) -> CssSelector:
        return self._append(PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> CssSelector:
        return self._append(PSEUDO_ELEMENT, f"::{value}")

    def stringify(self) -> str:
        return self.text

    def _append(self, rank: int, fragment: str) -> CssSelector:
        if rank < self.last_rank:
            raise SelectorError(code="E_SELECTOR_ORDER", message=ORDER_MESSAGE, source=self.text)
        if rank in UNIQUE_PARTS and rank in self.used:
            raise SelectorError(
                code="E_SELECTOR_DUPLICATE", message=DUPLICATE_MESSAGE, source=self.text
            )
        return replace(
            self,
            text=self.text + fragment,
            last_rank=rank,
            used=self.used | {rank},
        )


@dataclass(frozen=True)
class CombinedSelector:
    left: Stringifiable
    combinator: str
    right: Stringifiable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"


class CssSelectorBuilder:
    """Facade: each method starts a fresh selector."""

    def element(self, value: str) -> CssSelector:
        return CssSelector().element(value)

    def id(self, value: str) -> CssSelector:
        return CssSelector().id(value)

    def class_(self, value: str) -> CssSelector:
        return CssSelector().class_(value)

    def attr(self, value: str) -> CssSelector:
        return CssSelector().attr(value)

    def pseudo_class(self, value: str) -> CssSelector:
        return CssSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CssSelector:
        return CssSelector().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = CssSelectorBuilder()
