"""Card Queries — load, upsert, and delete rank card customizations.

Invariants:
    - get_customizations never fails for a missing row: absent layers are skipped
    - update_card touches only the fields it is given (None clears a field)
    - Writes commit in the same session they were made in
"""

import logging
from dataclasses import fields

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from xpd_slash.core.card_customization import (
    CardCustomization, layer_customizations,
)
from xpd_slash.models.custom_card import CustomCardRecord

logger = logging.getLogger(__name__)

_FIELDS = tuple(f.name for f in fields(CardCustomization))


def _to_customization(record: CustomCardRecord) -> CardCustomization:
    return CardCustomization(**{name: getattr(record, name) for name in _FIELDS})


async def get_customizations(
    db: AsyncSession, ids: list[int],
) -> CardCustomization:
    """Effective card for `ids`, highest priority first (e.g. [user, guild])."""
    result = await db.execute(
        select(CustomCardRecord).where(CustomCardRecord.id.in_(ids)),
    )
    records = {record.id: record for record in result.scalars()}
    layers = [_to_customization(records[i]) for i in reversed(ids) if i in records]
    return layer_customizations(layers)


async def update_card(
    db: AsyncSession, card_id: int, changes: dict[str, str | None],
) -> None:
    record = await db.get(CustomCardRecord, card_id)
    if record is None:
        record = CustomCardRecord(id=card_id)
        db.add(record)
    for name, value in changes.items():
        setattr(record, name, value)
    await db.commit()
    logger.info(f"Updated card {card_id}: {sorted(changes)}")


async def delete_card(db: AsyncSession, card_id: int) -> None:
    await db.execute(delete(CustomCardRecord).where(CustomCardRecord.id == card_id))
    await db.commit()
