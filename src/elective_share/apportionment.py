"""Pro rata apportionment of the elective share among responsible parties."""

from decimal import Decimal
from typing import Iterable

from .models import ApportionmentEntry, ResponsiblePartyBucket
from .normalize import ZERO

HUNDRED = Decimal("100")


def apportion(
    buckets: Iterable[ResponsiblePartyBucket],
    elective_share: Decimal,
) -> list[ApportionmentEntry]:
    """Split the elective share in proportion to each party's holdings.

    Entries follow the order of ``buckets``. No rounding correction is
    applied. Returns an empty list when the holdings total exactly zero.
    """
    buckets = list(buckets)
    total = sum((b.value for b in buckets), ZERO)
    if total == 0:
        return []

    entries = []
    for bucket in buckets:
        fraction = bucket.value / total
        entries.append(
            ApportionmentEntry(
                name=bucket.name,
                party_type=bucket.party_type,
                value=bucket.value,
                dollar_share=fraction * elective_share,
                percent_of_liability=fraction * HUNDRED,
            )
        )
    return entries
