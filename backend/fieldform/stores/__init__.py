"""In-memory entity stores."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from fieldform.config import Settings
from fieldform.models.base import utcnow
from fieldform.stores.base import InMemoryStore, SequentialIdGenerator, UuidIdGenerator
from fieldform.stores.forms import FormStore, reindex_fields
from fieldform.stores.submissions import SubmissionStore
from fieldform.stores.users import UserStore
from fieldform.stores.tasks import TaskStore
from fieldform.stores.work_orders import WorkOrderStore
from fieldform.stores.sessions import Session, SessionRegistry


@dataclass
class Stores:
    """Every store the application uses, built once per application."""
    forms: FormStore
    submissions: SubmissionStore
    users: UserStore
    tasks: TaskStore
    work_orders: WorkOrderStore
    sessions: SessionRegistry = field(default_factory=SessionRegistry)


def create_stores(settings: Settings, clock: Callable[[], datetime] = utcnow) -> Stores:
    """Build a fresh set of stores, seeding templates when configured."""
    generator = UuidIdGenerator if settings.id_strategy == "uuid" else SequentialIdGenerator
    
    def build(store_type):
        return store_type(id_generator=generator(store_type.prefix), clock=clock)
    
    stores = Stores(
        forms=build(FormStore),
        submissions=build(SubmissionStore),
        users=build(UserStore),
        tasks=build(TaskStore),
        work_orders=build(WorkOrderStore),
    )
    
    if settings.seed_templates:
        from fieldform.services.templates import seed_templates
        seed_templates(stores.forms)
    
    return stores


__all__ = [
    "InMemoryStore",
    "SequentialIdGenerator",
    "UuidIdGenerator",
    "FormStore",
    "reindex_fields",
    "SubmissionStore",
    "UserStore",
    "TaskStore",
    "WorkOrderStore",
    "Session",
    "SessionRegistry",
    "Stores",
    "create_stores",
]
