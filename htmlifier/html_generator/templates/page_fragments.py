"""
Immutable accumulator for the pieces of a page computed by the feature steps
"""

from dataclasses import dataclass, replace
from typing import Dict, Tuple


@dataclass(frozen=True)
class PageFragments:
    """
    CSS classes, inline style declarations and placeholder values for one page

    Every ``with_*`` method returns a new instance. Classes are distinct and kept
    in insertion order; a style or substitution set twice keeps its first
    position and takes the latest value.
    """
    classes: Tuple[str, ...] = ()
    styles: Tuple[Tuple[str, str], ...] = ()
    substitutions: Tuple[Tuple[str, str], ...] = ()

    def with_class(self, name: str) -> 'PageFragments':
        if name in self.classes:
            return self
        return replace(self, classes=self.classes + (name,))

    def with_style(self, prop: str, value: str) -> 'PageFragments':
        return replace(self, styles=_set_pair(self.styles, prop, value))

    def with_substitution(self, placeholder: str, value: str) -> 'PageFragments':
        return replace(self, substitutions=_set_pair(self.substitutions, placeholder, value))

    @property
    def style_map(self) -> Dict[str, str]:
        return dict(self.styles)

    @property
    def substitution_map(self) -> Dict[str, str]:
        return dict(self.substitutions)


def _set_pair(pairs: Tuple[Tuple[str, str], ...], key: str, value: str) -> Tuple[Tuple[str, str], ...]:
    if any(existing == key for existing, _ in pairs):
        return tuple((existing, value if existing == key else old) for existing, old in pairs)
    return pairs + ((key, value),)
