import pytest

from server.models.learning_path import LearningModule, ModuleStatus
from ui.path_view import render_path, status_controls, status_label, status_marker


@pytest.mark.parametrize(
    ("status", "marker"),
    [
        (ModuleStatus.NOT_STARTED, "⚪"),
        (ModuleStatus.IN_PROGRESS, "🔵"),
        (ModuleStatus.COMPLETED, "✅"),
        ("in-progress", "🔵"),
    ],
)
def test_status_marker_covers_every_status(status, marker: str) -> None:
    assert status_marker(status) == marker


def test_unknown_status_falls_back_to_neutral_marker() -> None:
    assert status_marker("archived") == status_marker(ModuleStatus.NOT_STARTED)
    assert status_label("archived") == "Not Started"


def test_controls_absent_for_unsaved_path() -> None:
    module = LearningModule(id="m1", title="t", description="d")
    assert status_controls(module, is_saved=False) == []


def test_controls_mark_only_the_current_status_active() -> None:
    module = LearningModule(id="m1", title="t", description="d", status=ModuleStatus.IN_PROGRESS)
    controls = status_controls(module, is_saved=True)

    assert [control.label for control in controls] == ["Not Started", "In Progress", "Completed"]
    assert [control.active for control in controls] == [False, True, False]


def test_render_saved_path(path_factory, streamlit_recorder) -> None:
    changes = []
    path = path_factory(is_saved=True)

    render_path(path, lambda module_id, status: changes.append((module_id, status)), container=streamlit_recorder)

    assert streamlit_recorder.of("header") == [(("Python Foundations",), {})]
    subheaders = [args[0] for args, _ in streamlit_recorder.of("subheader")]
    assert subheaders == ["⚪ Syntax", "🔵 Control Flow"]
    captions = [args[0] for args, _ in streamlit_recorder.of("caption")]
    assert captions[0].startswith("Estimated time: 6 hours")
    assert captions[1].startswith("Estimated time: 8.5 hours")

    buttons = streamlit_recorder.of("button")
    assert len(buttons) == 6
    m1_buttons = [kwargs for _, kwargs in buttons if kwargs["args"][0] == "m1"]
    assert [kwargs["type"] for kwargs in m1_buttons] == ["primary", "secondary", "secondary"]

    _, completed = buttons[2]
    completed["on_click"](*completed["args"])
    assert changes == [("m1", ModuleStatus.COMPLETED)]


def test_render_unsaved_path_has_no_status_controls(path_factory, streamlit_recorder) -> None:
    render_path(path_factory(is_saved=False, path_id=None), lambda *_: None, container=streamlit_recorder)

    assert streamlit_recorder.of("button") == []
    assert len(streamlit_recorder.of("subheader")) == 2


def test_resources_render_in_insertion_order(path_factory, streamlit_recorder) -> None:
    render_path(path_factory(), lambda *_: None, container=streamlit_recorder)

    links = [args[0] for args, _ in streamlit_recorder.of("markdown") if args[0].startswith("`")]
    assert links == [
        "`article` [Tutorial](https://docs.python.org/3/tutorial/)",
        "`video` [Intro video](https://example.com/intro)",
    ]
