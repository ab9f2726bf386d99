"""Tests for rendering options and their bit-flag form."""

import dataclasses

import pytest

from html2rawtext import OptionFlag, RenderOptions, ValidationError


@pytest.mark.unit
class TestRenderOptions:
    """Test RenderOptions defaults and cloning."""

    def test_defaults_are_off(self):
        """Both toggles default to off."""
        options = RenderOptions()
        assert options.keep_link_text is False
        assert options.mastodon is False

    def test_create_updated_returns_new_instance(self):
        """create_updated leaves the original untouched."""
        options = RenderOptions()
        updated = options.create_updated(mastodon=True)

        assert updated.mastodon is True
        assert updated.keep_link_text is False
        assert options.mastodon is False

    def test_options_are_frozen(self):
        """Options cannot be changed after construction."""
        options = RenderOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.mastodon = True  # type: ignore[misc]


@pytest.mark.unit
class TestOptionFlags:
    """Test conversion between flags and options."""

    def test_flag_values(self):
        """Flag bits keep their historical values."""
        assert OptionFlag.KEEP_LINK_TEXT == 1
        assert OptionFlag.MASTODON == 4

    def test_from_single_flag(self):
        """A single flag enables only its option."""
        options = RenderOptions.from_flags(OptionFlag.MASTODON)
        assert options == RenderOptions(mastodon=True)

    def test_from_combined_flags(self):
        """Flags combine freely."""
        options = RenderOptions.from_flags(OptionFlag.KEEP_LINK_TEXT | OptionFlag.MASTODON)
        assert options == RenderOptions(keep_link_text=True, mastodon=True)

    def test_from_plain_int(self):
        """Plain integers are accepted."""
        assert RenderOptions.from_flags(1) == RenderOptions(keep_link_text=True)
        assert RenderOptions.from_flags(0) == RenderOptions()

    @pytest.mark.parametrize("flags", [0, 1, 4, 5])
    def test_flags_round_trip(self, flags):
        """Options built from flags report the same flags."""
        assert RenderOptions.from_flags(flags).flags == flags

    @pytest.mark.parametrize("flags", [2, 8, 7, -1])
    def test_unknown_flags_rejected(self, flags):
        """Bits without a matching option are a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            RenderOptions.from_flags(flags)
        assert exc_info.value.parameter_name == "flags"
        assert exc_info.value.parameter_value == flags
