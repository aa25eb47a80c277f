from datetime import date

from src.app.core.domain.models import Client, ClientForm, FormMode, Gender
from src.app.core.services.form_controller import ADD_LABEL, SAVE_LABEL


def create_client() -> Client:
    return Client(
        id=10,
        full_name="Ana Silva",
        age=29,
        gender=Gender.PREFER_NOT_TO_SAY,
        email="ana@x.com",
        phone="55119876543",
        goal="Build muscle",
        start_date=date(2030, 1, 15),
        end_date=None,
    )


def test_starts_in_add_mode(form_controller):
    assert form_controller.mode == FormMode.ADD
    assert form_controller.editing_id is None
    assert form_controller.submit_label == ADD_LABEL
    assert form_controller.cancel_visible is False
    assert form_controller.fields == ClientForm()


def test_enter_edit_mode_prefills_every_field(form_controller):
    # Act
    form_controller.enter_edit_mode(create_client())

    # Assert
    assert form_controller.mode == FormMode.EDIT
    assert form_controller.editing_id == 10
    assert form_controller.submit_label == SAVE_LABEL
    assert form_controller.fields == ClientForm(
        full_name="Ana Silva",
        age="29",
        gender="prefer_not_to_say",
        email="ana@x.com",
        phone="55119876543",
        goal_choice="",
        goal_free="Build muscle",
        start_date="2030-01-15",
        end_date="",
    )


def test_enter_add_mode_clears_edit_state(form_controller):
    form_controller.enter_edit_mode(create_client())

    form_controller.enter_add_mode()

    assert form_controller.mode == FormMode.ADD
    assert form_controller.fields == ClientForm()


def test_write_fields_copies_input(form_controller):
    form = ClientForm(full_name="Typed")

    form_controller.write_fields(form)
    form.full_name = "Changed later"

    assert form_controller.fields.full_name == "Typed"


def test_read_validated_uses_injected_today(form_controller, fixed_today):
    form_controller.write_fields(
        ClientForm(
            full_name="Ana Silva",
            email="ana@x.com",
            phone="55119876543",
            goal_choice="Build muscle",
            start_date=fixed_today.isoformat(),
            end_date=date(fixed_today.year + 1, 1, 1).isoformat(),
        )
    )

    fields = form_controller.read_validated()

    assert fields.start_date == fixed_today
    assert fields.goal == "Build muscle"
