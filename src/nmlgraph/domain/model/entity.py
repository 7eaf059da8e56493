"""
Base building blocks:
identity and entity_type contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from nmlgraph.domain.model.enums import EntityType
    from nmlgraph.domain.model.primitives import EntityId


@dataclass(eq=False, kw_only=True)
class Entity:
    """Identity is the entity's position in its owning collection."""

    id: EntityId

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE
