"""Tests for the validation engine."""

import pytest
from profile_form.models.form_models import FieldId, initial_values
from profile_form.services.validation_engine import ValidationEngine


def valid_values(**overrides):
    values = {
        "name": "Asha",
        "email": "a@b.com",
        "mobile": "9876543210",
        "password": "Abcd123@",
        "confirmPassword": "Abcd123@",
        "gender": "female",
        "location": "Pune",
        "education": "BSc",
        "skills": ["Go", "SQL"],
        "experienceDetails": "",
        "hasExperience": False,
    }
    values.update(overrides)
    return values


def test_valid_values_pass_every_rule():
    """Test a complete, well-formed value set is valid."""
    engine = ValidationEngine()
    result = engine.validate(valid_values())
    
    assert result.is_valid
    assert result.failing_fields() == []
    assert engine.is_valid(valid_values())


def test_initial_values_fail_required_fields():
    """Test every required field reports a message for an empty form."""
    result = ValidationEngine().validate(initial_values())
    
    assert result.error_for("name") == "Name is required"
    assert result.error_for("email") == "Email is required"
    assert result.error_for("mobile") == "Mobile number is required"
    assert result.error_for("password") == "Password is required"
    assert result.error_for("confirmPassword") == "Confirm your password"
    assert result.error_for("gender") == "Gender is required"
    assert result.error_for("location") == "Location is required"
    assert result.error_for("education") == "Education is required"
    assert result.error_for("skills") == "Please enter at least one skill"
    assert result.error_for("experienceDetails") is None


def test_whitespace_only_counts_as_missing():
    """Test required text fields are checked after trimming."""
    engine = ValidationEngine()
    
    assert engine.validate_field("name", valid_values(name="   ")) == "Name is required"
    assert engine.validate_field("location", valid_values(location="\t")) == "Location is required"


@pytest.mark.parametrize("email", ["ab.com", "a@b", "a b@c.com", "@b.com", "a@b.com\n"])
def test_invalid_email_format(email):
    """Test malformed email addresses."""
    assert ValidationEngine().validate_field("email", valid_values(email=email)) == "Invalid email"


@pytest.mark.parametrize("mobile", ["12345", "5876543210", "98765432100", "98765-4321", "987654321a", "9876543210\n"])
def test_invalid_mobile(mobile):
    """Test mobile numbers that are not 10 digits starting with 6-9."""
    message = ValidationEngine().validate_field("mobile", valid_values(mobile=mobile))
    
    assert message == "Enter valid 10-digit number"


@pytest.mark.parametrize("mobile", ["6000000000", "7123456789", "8999999999", "9876543210"])
def test_valid_mobile(mobile):
    """Test accepted mobile numbers."""
    assert ValidationEngine().validate_field("mobile", valid_values(mobile=mobile)) is None


@pytest.mark.parametrize("password, message", [
    ("Ab1@", "Min 8 characters"),
    ("abcd123@", "At least one uppercase"),
    ("ABCD123@", "At least one lowercase"),
    ("Abcdefg@", "At least one number"),
    ("Abcd1234", "At least one special character"),
    ("Abcd123,", "At least one special character"),
])
def test_password_strength_messages(password, message):
    """Test the first failing password rule is reported."""
    values = valid_values(password=password, confirmPassword=password)
    
    assert ValidationEngine().validate_field("password", values) == message


@pytest.mark.parametrize("special", list("@_$#&*"))
def test_password_accepts_each_special_character(special):
    """Test every allowed special character satisfies the rule."""
    password = f"Abcd123{special}"
    values = valid_values(password=password, confirmPassword=password)
    
    assert ValidationEngine().validate_field("password", values) is None


def test_confirm_password_must_match_exactly():
    """Test the cross-field password confirmation."""
    engine = ValidationEngine()
    
    assert engine.validate_field("confirmPassword", valid_values(confirmPassword="Abcd123@ ")) == "Passwords must match"
    assert engine.validate_field("confirmPassword", valid_values(confirmPassword="abcd123@")) == "Passwords must match"
    assert engine.validate_field("confirmPassword", valid_values(confirmPassword="")) == "Confirm your password"


def test_gender_must_be_known_option():
    """Test gender is limited to the offered options."""
    engine = ValidationEngine()
    
    assert engine.validate_field("gender", valid_values(gender="other")) == "Select a valid gender"
    assert engine.validate_field("gender", valid_values(gender="male")) is None


def test_skills_rules():
    """Test skills need at least one non-blank entry."""
    engine = ValidationEngine()
    
    assert engine.validate_field("skills", valid_values(skills=[])) == "Please enter at least one skill"
    assert engine.validate_field("skills", valid_values(skills=["Go", "  "])) == "Skill cannot be empty"
    assert engine.validate_field("skills", valid_values(skills=("Go",))) is None


def test_experience_details_required_only_with_experience():
    """Test the conditional experience details rule."""
    engine = ValidationEngine()
    
    assert engine.validate_field("experienceDetails", valid_values(hasExperience=False, experienceDetails="")) is None
    assert engine.validate_field("experienceDetails", valid_values(hasExperience=True, experienceDetails=" ")) == "Experience details required"
    assert engine.validate_field("experienceDetails", valid_values(hasExperience=True, experienceDetails="3 years")) is None


def test_dependents_of():
    """Test the explicit re-validation trigger list."""
    engine = ValidationEngine()
    
    assert engine.dependents_of(FieldId.PASSWORD) == ("confirmPassword",)
    assert engine.dependents_of("hasExperience") == ("experienceDetails",)
    assert engine.dependents_of("name") == ()


def test_revalidate_password_updates_confirmation():
    """Test changing password re-derives the confirmation outcome."""
    engine = ValidationEngine()
    values = valid_values()
    result = engine.validate(values)
    
    values["password"] = "Wxyz987#"
    result = engine.revalidate("password", values, result)
    
    assert result.error_for("password") is None
    assert result.error_for("confirmPassword") == "Passwords must match"


def test_revalidate_experience_flag_updates_details():
    """Test toggling the experience flag re-derives the details outcome."""
    engine = ValidationEngine()
    values = valid_values()
    result = engine.validate(values)
    
    values["hasExperience"] = True
    result = engine.revalidate("hasExperience", values, result)
    assert result.error_for("experienceDetails") == "Experience details required"
    
    values["hasExperience"] = False
    result = engine.revalidate("hasExperience", values, result)
    assert result.error_for("experienceDetails") is None


def test_revalidate_leaves_other_fields_alone():
    """Test only the changed field and its dependents are recomputed."""
    engine = ValidationEngine()
    values = valid_values()
    result = engine.validate(values)
    
    values["name"] = ""
    values["mobile"] = "12345"
    updated = engine.revalidate("name", values, result)
    
    assert updated.error_for("name") == "Name is required"
    assert updated.error_for("mobile") is None
    assert result.error_for("name") is None


def test_unknown_field_raises():
    """Test an unknown field identifier is rejected."""
    with pytest.raises(ValueError):
        ValidationEngine().validate_field("nickname", valid_values())
