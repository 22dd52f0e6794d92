"""Streamlit interface for the profile form."""

import streamlit as st
from pydantic import ValidationError
from profile_form.config import get_settings
from profile_form.models.form_models import FieldId, TEXT_FIELDS
from profile_form.models.layout_models import FieldDefinition, FormLayout, WidgetKind
from profile_form.services.form_controller import FormStateController
from profile_form.services.history_renderer import HistoryRenderer
from profile_form.services.layout_loader import get_layout_loader
from profile_form.utils.logger import get_logger

SKILL_INPUT_KEY = "skill_input"
EXPERIENCE_KEY = "has_experience"

# Page configuration
st.set_page_config(
    page_title="Profile Form",
    page_icon="✨",
    layout="centered"
)

# Custom CSS
st.markdown("""
<style>
    .submitted-table table {
        width: 100%;
        border-collapse: collapse;
    }
    .submitted-table th, .submitted-table td {
        border-bottom: 1px solid #e0e0e0;
        padding: 0.5rem;
        text-align: left;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def configure_logging() -> None:
    """Apply the configured level to the package logger once per server."""
    get_logger("profile_form", get_settings().log_level)


@st.cache_resource
def load_layout() -> FormLayout:
    return get_layout_loader().load_layout()


@st.cache_resource
def get_renderer() -> HistoryRenderer:
    return HistoryRenderer()


def get_controller() -> FormStateController:
    """One controller (and submission history) per browser session."""
    if "form_controller" not in st.session_state:
        st.session_state.form_controller = FormStateController()
        st.session_state.file_widget_generation = 0
    return st.session_state.form_controller


def widget_key(field_id: str) -> str:
    return f"field_{field_id}"


def file_widget_key() -> str:
    return f"file_upload_{st.session_state.file_widget_generation}"


def on_field_change(field_id: str) -> None:
    get_controller().set_field(field_id, st.session_state[widget_key(field_id)])


def on_skill_commit() -> None:
    controller = get_controller()
    controller.commit_skill(st.session_state[SKILL_INPUT_KEY])
    st.session_state[SKILL_INPUT_KEY] = controller.skill_buffer


def on_experience_toggle() -> None:
    get_controller().toggle_experience(st.session_state[EXPERIENCE_KEY])


def on_file_change() -> None:
    uploaded = st.session_state.get(file_widget_key())
    get_controller().select_file(uploaded.name if uploaded is not None else None)


def on_submit() -> None:
    """Submit and, when accepted, clear every widget for the next entry."""
    controller = get_controller()
    if controller.attempt_submit() is None:
        return
    for field_id in TEXT_FIELDS:
        key = widget_key(field_id)
        if key in st.session_state:
            st.session_state[key] = None if field_id == FieldId.GENDER.value else ""
    st.session_state[SKILL_INPUT_KEY] = ""
    st.session_state[EXPERIENCE_KEY] = False
    # File uploaders cannot be reset through session state; use a fresh widget
    st.session_state.file_widget_generation += 1


def show_error(controller: FormStateController, field_id: str) -> None:
    message = controller.visible_errors().get(field_id)
    if message:
        st.caption(f":red[{message}]")


def render_field(controller: FormStateController, definition: FieldDefinition) -> None:
    key = widget_key(definition.id)
    if definition.kind == WidgetKind.RADIO:
        labels = {option.value: option.label for option in definition.options}
        st.radio(
            definition.label,
            options=list(labels),
            format_func=lambda value: labels.get(value, value),
            index=None,
            horizontal=True,
            key=key,
            help=definition.help,
            on_change=on_field_change,
            args=(definition.id,)
        )
    elif definition.kind == WidgetKind.TEXTAREA:
        st.text_area(
            definition.label,
            placeholder=definition.placeholder,
            height=100,
            key=key,
            help=definition.help,
            on_change=on_field_change,
            args=(definition.id,)
        )
    else:
        st.text_input(
            definition.label,
            placeholder=definition.placeholder,
            type="password" if definition.kind == WidgetKind.PASSWORD else "default",
            key=key,
            help=definition.help,
            on_change=on_field_change,
            args=(definition.id,)
        )
    show_error(controller, definition.id)


def render_skills(controller: FormStateController, layout: FormLayout) -> None:
    if controller.skills:
        columns = st.columns(min(len(controller.skills), 4))
        for index, skill in enumerate(controller.skills):
            columns[index % len(columns)].button(
                f"✕ {skill}",
                key=f"remove_skill_{index}_{skill}",
                on_click=controller.remove_skill,
                args=(skill,)
            )
    # Inside a form only Enter or the button commits; losing focus does not
    with st.form("skill_form", border=False):
        st.text_input(
            "Skills",
            placeholder=layout.skill_placeholder,
            key=SKILL_INPUT_KEY
        )
        st.form_submit_button("Add skill", key="add_skill", on_click=on_skill_commit)
    show_error(controller, FieldId.SKILLS.value)


def main():
    """Main Streamlit app."""
    try:
        configure_logging()
    except ValidationError as e:
        st.error(f"Invalid profile form settings: {e}")
        st.stop()

    try:
        layout = load_layout()
    except (FileNotFoundError, ValueError) as e:
        st.error(f"Could not load the form layout: {e}")
        st.stop()

    controller = get_controller()

    st.header(f"✨ {layout.title}")

    for definition in layout.fields:
        if definition.id == FieldId.EXPERIENCE_DETAILS.value:
            continue
        render_field(controller, definition)

    render_skills(controller, layout)

    st.checkbox(
        layout.experience_label,
        key=EXPERIENCE_KEY,
        on_change=on_experience_toggle
    )
    if controller.has_experience:
        render_field(controller, layout.field(FieldId.EXPERIENCE_DETAILS.value))

    st.file_uploader("Attach a file", key=file_widget_key(), on_change=on_file_change)
    if controller.file_name:
        st.write(f"Selected: {controller.file_name}")

    st.button(
        layout.submit_label,
        type="primary",
        use_container_width=True,
        disabled=not controller.is_valid,
        on_click=on_submit
    )

    history_html = get_renderer().generate_html(controller.history)
    if history_html:
        st.divider()
        st.markdown(history_html, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
