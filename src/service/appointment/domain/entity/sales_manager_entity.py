from typing import Iterable, List

import attrs

from src.service.appointment.domain.entity.slot_entity import SlotEntity


def _to_tag_set(value: Iterable[str]) -> frozenset[str]:
    return frozenset(value)


@attrs.define(frozen=True)
class SalesManagerEntity:
    """
    A seller offering appointments.

    Tag sets are built once when the entity is created so eligibility checks
    are plain membership tests.
    """

    id: int
    name: str = ''
    languages: frozenset[str] = attrs.field(factory=frozenset, converter=_to_tag_set)
    products: frozenset[str] = attrs.field(factory=frozenset, converter=_to_tag_set)
    customer_ratings: frozenset[str] = attrs.field(factory=frozenset, converter=_to_tag_set)
    slots: List[SlotEntity] = attrs.field(factory=list, repr=False)

    def speaks(self, language: str) -> bool:
        return language in self.languages

    def sells_all(self, products: Iterable[str]) -> bool:
        return all(product in self.products for product in products)

    def accepts_rating(self, rating: str) -> bool:
        return rating in self.customer_ratings
