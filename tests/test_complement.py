"""Unit tests for complementary color functions."""

import pytest

from colorcomp.complement import hsv_complement, rgb_complement
from colorcomp.models import Color


class TestRgbComplement:
    """Test rgb_complement."""

    @pytest.mark.unit
    def test_red(self, red):
        """Test that red inverts to cyan."""
        complement = rgb_complement(red)
        assert complement.to_rgb() == (0, 255, 255)
        assert complement.to_hex() == "#00FFFF"

    @pytest.mark.unit
    def test_coral(self, coral):
        """Test per-channel inversion of a mixed color."""
        assert rgb_complement(coral).to_rgb() == (0, 168, 204)

    @pytest.mark.unit
    def test_black_and_white(self):
        """Test that black and white swap."""
        assert rgb_complement(Color(r=0, g=0, b=0)) == Color(r=255, g=255, b=255)
        assert rgb_complement(Color(r=255, g=255, b=255)) == Color(r=0, g=0, b=0)

    @pytest.mark.unit
    def test_returns_new_instance(self, coral):
        """Test that the input color is left unchanged."""
        rgb_complement(coral)
        assert coral.to_rgb() == (255, 87, 51)


class TestHsvComplement:
    """Test hsv_complement."""

    @pytest.mark.unit
    def test_red_matches_rgb_complement(self, red):
        """Test that for saturated red both complements are cyan."""
        assert red.to_hsv() == (0.0, 1.0, 1.0)
        assert hsv_complement(red) == Color(r=0, g=255, b=255)
        assert hsv_complement(red) == rgb_complement(red)

    @pytest.mark.unit
    def test_coral(self, coral):
        """Test hue rotation of a partially saturated color."""
        assert hsv_complement(coral).to_rgb() == (51, 219, 255)

    @pytest.mark.unit
    def test_keeps_saturation_and_value(self, coral):
        """Test that only the hue changes."""
        _, saturation, value = coral.to_hsv()
        _, new_saturation, new_value = hsv_complement(coral).to_hsv()
        assert new_saturation == pytest.approx(saturation, abs=0.01)
        assert new_value == pytest.approx(value)

    @pytest.mark.unit
    def test_hue_wraps_past_360(self):
        """Test that hues above 180 rotate back through 0."""
        blue = Color(r=0, g=0, b=255)
        assert hsv_complement(blue).to_rgb() == (255, 255, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize("grey", [0, 64, 128, 255])
    def test_greys_are_fixed_points(self, grey):
        """Test that achromatic colors have themselves as complement."""
        color = Color(r=grey, g=grey, b=grey)
        assert hsv_complement(color) == color

    @pytest.mark.unit
    def test_differs_from_rgb_complement_for_unsaturated(self, coral):
        """Test that the two notions disagree in general."""
        assert hsv_complement(coral) != rgb_complement(coral)
