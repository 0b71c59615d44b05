from user_onboarding.utils.validators import InputValidator


class TestNameValidation:
    """Test name step validation."""

    def test_valid_names(self):
        """Any non-empty name should pass."""
        for name in ["Alex", "A", "Mary Jane", "李"]:
            valid, msg = InputValidator.validate_name(name)
            assert valid == True, f"{name} should be valid"

    def test_empty_name_invalid(self):
        """Empty name should be rejected with the alert text."""
        valid, msg = InputValidator.validate_name("")
        assert valid == False
        assert msg == "Please enter your name!"

    def test_whitespace_name_not_trimmed(self):
        """Whitespace-only names pass because no trimming is done."""
        valid, msg = InputValidator.validate_name("   ")
        assert valid == True


class TestGenderValidation:
    """Test gender step validation."""

    def test_options_valid(self):
        """Every picker option should pass."""
        for gender in ["Male", "Female", "Non-binary", "Prefer not to say"]:
            valid, msg = InputValidator.validate_gender(gender)
            assert valid == True

    def test_empty_and_single_character_invalid(self):
        """Values of length one or less count as unselected."""
        for gender in ["", "M", " "]:
            valid, msg = InputValidator.validate_gender(gender)
            assert valid == False
            assert msg == "Please Select your gender!"

    def test_two_characters_pass_threshold(self):
        """The check is a length threshold, not membership."""
        valid, msg = InputValidator.validate_gender("Xy")
        assert valid == True

    def test_is_gender_option(self):
        """Only exact picker values are options."""
        assert InputValidator.is_gender_option("Non-binary")
        assert not InputValidator.is_gender_option("male")
        assert not InputValidator.is_gender_option("")
