"""Store registry and request dependencies."""

from fastapi import Depends, Request

from fieldform.config import Settings
from fieldform.stores import (
    Stores,
    FormStore,
    SubmissionStore,
    UserStore,
    TaskStore,
    WorkOrderStore,
    SessionRegistry,
)


def get_app_settings(request: Request) -> Settings:
    """Dependency that provides the settings the application was built with."""
    return request.app.state.settings


def get_stores(request: Request) -> Stores:
    """Dependency that provides the application's stores."""
    return request.app.state.stores


def get_form_store(stores: Stores = Depends(get_stores)) -> FormStore:
    return stores.forms


def get_submission_store(stores: Stores = Depends(get_stores)) -> SubmissionStore:
    return stores.submissions


def get_user_store(stores: Stores = Depends(get_stores)) -> UserStore:
    return stores.users


def get_task_store(stores: Stores = Depends(get_stores)) -> TaskStore:
    return stores.tasks


def get_work_order_store(stores: Stores = Depends(get_stores)) -> WorkOrderStore:
    return stores.work_orders


def get_session_registry(stores: Stores = Depends(get_stores)) -> SessionRegistry:
    return stores.sessions


def get_notifier(request: Request):
    """Dependency that provides the notification service."""
    return request.app.state.notifier
