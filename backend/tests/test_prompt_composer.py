"""
Tests for prompt composition with and without patient context.
"""
from medrelay.api.models.profile import PatientProfile
from medrelay.services.prompts import compose_prompt, format_patient_context


def test_no_profile_returns_trimmed_prompt():
    assert compose_prompt("  What helps with a cough?\n ", None) == "What helps with a cough?"


def test_missing_fields_render_as_none():
    profile = PatientProfile(medical_history="Asthma", allergies=None, current_medication="Albuterol")

    result = compose_prompt("Can I exercise outdoors?", profile)

    assert result == (
        "Can I exercise outdoors?\n\n"
        "Patient Context:\n"
        "- Medical History: Asthma\n"
        "- Allergies: None\n"
        "- Current Medication: Albuterol"
    )


def test_empty_string_fields_render_as_none():
    block = format_patient_context(PatientProfile(medical_history="", allergies="", current_medication=""))

    assert "- Medical History: None" in block
    assert "- Allergies: None" in block
    assert "- Current Medication: None" in block


def test_profile_with_no_fields_still_adds_context_block():
    result = compose_prompt("Hello", PatientProfile())
    assert result.startswith("Hello\n\nPatient Context:")
    assert result.endswith("- Current Medication: None")


def test_missing_prompt_is_treated_as_empty():
    assert compose_prompt(None, None) == ""
    assert compose_prompt(None, PatientProfile(allergies="Penicillin")).startswith("Patient Context:")
