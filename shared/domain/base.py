"""
Domain Building Blocks

Entities are compared by id, value objects by their attributes.
Aggregates record domain events while a request runs; the service that
drove the aggregate pulls them afterwards and logs them.
"""

from abc import ABC
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4


@dataclass
class Entity(ABC):
    """Identity plus created/updated timestamps."""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def touch(self):
        self.updated_at = datetime.now()


@dataclass(frozen=True)
class ValueObject(ABC):
    """Immutable; subclasses validate themselves in __post_init__."""


@dataclass(eq=False)
class Aggregate(Entity):
    _events: List['DomainEvent'] = field(default_factory=list, repr=False, init=False)

    def add_event(self, event: 'DomainEvent'):
        self._events.append(event)

    @property
    def events(self) -> List['DomainEvent']:
        return list(self._events)

    def clear_events(self):
        self._events.clear()

    def pull_events(self) -> List['DomainEvent']:
        """Return the recorded events and forget them."""
        events, self._events = self._events, []
        return events


@dataclass
class DomainEvent:
    """
    Something that happened to an aggregate.

    Subclass fields need defaults because the base fields have them.
    to_dict() includes every subclass field, so events log flat.
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=datetime.now)
    aggregate_id: Optional[UUID] = None

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict:
        data = {'event_type': self.event_type}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, UUID):
                value = str(value)
            elif isinstance(value, datetime):
                value = value.isoformat()
            data[f.name] = value
        return data
