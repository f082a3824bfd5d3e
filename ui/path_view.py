from dataclasses import dataclass
from typing import Callable, List

import streamlit as st

from server.models.learning_path import LearningModule, LearningPath, ModuleStatus

STATUS_ORDER = (ModuleStatus.NOT_STARTED, ModuleStatus.IN_PROGRESS, ModuleStatus.COMPLETED)


@dataclass(frozen=True)
class StatusControl:
    label: str
    status: ModuleStatus
    active: bool


def status_marker(status: ModuleStatus) -> str:
    match status:
        case ModuleStatus.COMPLETED:
            return "✅"
        case ModuleStatus.IN_PROGRESS:
            return "🔵"
        case ModuleStatus.NOT_STARTED:
            return "⚪"
        case _:
            return "⚪"


def status_label(status: ModuleStatus) -> str:
    match status:
        case ModuleStatus.COMPLETED:
            return "Completed"
        case ModuleStatus.IN_PROGRESS:
            return "In Progress"
        case ModuleStatus.NOT_STARTED:
            return "Not Started"
        case _:
            return "Not Started"


def status_controls(module: LearningModule, is_saved: bool) -> List[StatusControl]:
    """One control per status for saved paths, none at all otherwise."""
    if not is_saved:
        return []
    return [
        StatusControl(label=status_label(status), status=status, active=module.status == status)
        for status in STATUS_ORDER
    ]


def render_module(module: LearningModule, on_status_change: Callable[[str, ModuleStatus], None],
                  is_saved: bool, container=st) -> None:
    card = container.container(border=True)
    header, actions = card.columns([3, 2])
    header.subheader(f"{status_marker(module.status)} {module.title}")
    header.caption(f"Estimated time: {module.estimated_hours:g} hours · {status_label(module.status)}")

    for control in status_controls(module, is_saved):
        actions.button(
            control.label,
            key=f"status-{module.id}-{control.status.value}",
            type="primary" if control.active else "secondary",
            on_click=on_status_change,
            args=(module.id, control.status),
        )

    card.markdown(module.description)
    card.markdown("**Recommended Resources:**")
    for resource in module.resources:
        card.markdown(f"`{resource.type.value}` [{resource.title}]({resource.url})")


def render_path(path: LearningPath, on_status_change: Callable[[str, ModuleStatus], None], container=st) -> None:
    """Render a path header and its modules in order. Status controls depend on
    the path being saved, not on who is signed in."""
    container.header(path.title)
    container.markdown(path.description)

    for module in path.modules:
        render_module(module, on_status_change, path.is_saved, container=container)
