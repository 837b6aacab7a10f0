"""Style sheet model: rules, selectors, specificity and properties."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from csslite.errors import ParserError


@dataclass(frozen=True, order=True)
class Specificity:
    """CSS precedence tuple: (ids, classes, tags).

    Addition is element-wise with ``Specificity.empty()`` as identity.
    Ordering compares ids first, then classes, then tags.
    """

    ids: int = 0
    classes: int = 0
    tags: int = 0

    @classmethod
    def empty(cls) -> Specificity:
        return cls(0, 0, 0)

    def __add__(self, other: Specificity) -> Specificity:
        if not isinstance(other, Specificity):
            return NotImplemented
        return Specificity(
            self.ids + other.ids,
            self.classes + other.classes,
            self.tags + other.tags,
        )

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.ids, self.classes, self.tags)

    def __str__(self) -> str:
        return f"({self.ids}, {self.classes}, {self.tags})"


@dataclass(frozen=True)
class Selector:
    """One compound selector.

    Only ``tag_name`` is filled in by the parser. ``id`` and ``class_names``
    are kept so the model can describe ``#id`` and ``.class`` selectors once
    the grammar supports them.
    """

    id: str | None = None
    tag_name: str | None = None
    class_names: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.id is None and self.tag_name is None and not self.class_names

    def specificity(self) -> Specificity:
        return Specificity(
            1 if self.id is not None else 0,
            len(self.class_names),
            1 if self.tag_name is not None else 0,
        )

    def __str__(self) -> str:
        parts = [self.tag_name or ""]
        if self.id is not None:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.class_names)
        return "".join(parts) or "*"


@dataclass(frozen=True)
class SelectorGroup:
    """Whitespace-separated selectors; later selectors are descendants."""

    selectors: list[Selector] = field(default_factory=list)

    def specificity(self) -> Specificity:
        return sum((s.specificity() for s in self.selectors), Specificity.empty())

    def __iter__(self) -> Iterator[Selector]:
        return iter(self.selectors)

    def __len__(self) -> int:
        return len(self.selectors)

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.selectors)


@dataclass(frozen=True)
class Keyword:
    value: str

    def __str__(self) -> str:
        return self.value


# Only keywords are modelled so far.
DataType = Keyword


@dataclass(frozen=True)
class Property:
    name: str
    value: DataType

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass(frozen=True)
class Rule:
    """A selector list paired with the declarations of its block."""

    selectors: list[SelectorGroup]
    properties: list[Property]

    def specificity(self) -> Specificity:
        """Highest specificity among the rule's selector groups."""
        return max((g.specificity() for g in self.selectors), default=Specificity.empty())

    def __str__(self) -> str:
        selectors = ", ".join(str(g) for g in self.selectors)
        body = " ".join(f"{p};" for p in self.properties)
        return f"{selectors} {{ {body} }}" if body else f"{selectors} {{ }}"


@dataclass(frozen=True)
class StyleSheet:
    """Result of one parse.

    Attributes:
        rules: Well-formed rules in source order.
        errors: Failures of rule attempts that produced no rule.
        flagged: Every error recorded while lexing and parsing.
    """

    rules: list[Rule]
    errors: list[ParserError] = field(default_factory=list)
    flagged: list[ParserError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and not self.flagged
