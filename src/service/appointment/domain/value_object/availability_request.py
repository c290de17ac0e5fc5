from typing import List

import attrs


@attrs.define(frozen=True)
class AvailabilityRequest:
    """What a customer asks for; presence of every field is checked by the caller."""

    date: str
    products: List[str] = attrs.field(converter=list)
    language: str
    rating: str
