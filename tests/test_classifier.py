"""
Tests for the harmony classifier.

Voices are passed as pitch classes in SATB order: root, soprano, alto, tenor, bass.
"""

import pytest

from chuk_mcp_harmony.constants import Voice
from chuk_mcp_harmony.core import HarmonicFunction, PitchClass
from chuk_mcp_harmony.harmony import (
    IncompleteHarmonicFunction,
    InvalidBassFunction,
    InvalidDoubling,
    InvalidVoiceCount,
    NoRootPresent,
    Sonority,
    classify,
    is_legal,
)

C, D, E, F, G, A, B = 0, 2, 4, 5, 7, 9, 11
Bb = 10


class TestRootPosition:
    """Tests for root-position triads."""

    def test_major_triad(self) -> None:
        """C major with doubled root."""
        result = classify(C, E, C, G, C)
        assert result.sonority == Sonority.ROOT_POSITION_TRIAD
        assert result.root == PitchClass.C
        assert result.bass_function == HarmonicFunction.ROOT

    def test_function_assignment(self) -> None:
        """Each voice is labelled by its distance above the root."""
        result = classify(C, E, C, G, C)
        assert result.functions == {
            Voice.BASS: HarmonicFunction.ROOT,
            Voice.TENOR: HarmonicFunction.FIFTH,
            Voice.ALTO: HarmonicFunction.ROOT,
            Voice.SOPRANO: HarmonicFunction.THIRD,
        }
        assert list(result.pitch_classes) == [C, E, G]

    def test_minor_triad(self) -> None:
        """A minor: A C E with doubled root."""
        assert classify(A, E, C, A, A).sonority == Sonority.ROOT_POSITION_TRIAD

    @pytest.mark.parametrize(
        ("soprano", "alto", "tenor"),
        [
            (G, E, C),
            (E, G, C),
            (E, C, G),
            (G, C, E),
            (C, E, G),
            (C, G, E),
        ],
    )
    def test_any_upper_arrangement(self, soprano: int, alto: int, tenor: int) -> None:
        """Root, third and fifth may sit in any upper voice."""
        result = classify(C, soprano, alto, tenor, C)
        assert result.sonority == Sonority.ROOT_POSITION_TRIAD
        assert list(result.functions.values()).count(HarmonicFunction.ROOT) == 2

    def test_root_doubled_in_tenor(self) -> None:
        """Bass and tenor share the root, third in alto, fifth in soprano."""
        result = classify(C, G, E, C, C)
        assert result.functions == {
            Voice.BASS: HarmonicFunction.ROOT,
            Voice.TENOR: HarmonicFunction.ROOT,
            Voice.ALTO: HarmonicFunction.THIRD,
            Voice.SOPRANO: HarmonicFunction.FIFTH,
        }

    def test_root_not_doubled(self) -> None:
        """Doubling the third instead of the root is rejected."""
        with pytest.raises(InvalidDoubling):
            classify(C, E, G, E, C)

    def test_fifth_doubled(self) -> None:
        """Doubling the fifth instead of the root is rejected."""
        with pytest.raises(InvalidDoubling, match="root"):
            classify(C, G, E, G, C)

    def test_root_tripled_without_fifth(self) -> None:
        """Three roots and a third are a root-and-third sonority, not a triad."""
        assert classify(C, E, C, C, C).sonority == Sonority.ROOT_AND_THIRD

    def test_root_tripled_without_third(self) -> None:
        """Three roots and a fifth lack the third."""
        with pytest.raises(IncompleteHarmonicFunction, match="third"):
            classify(C, G, C, C, C)

    def test_missing_third(self) -> None:
        """A non-chord tone in place of the third."""
        with pytest.raises(IncompleteHarmonicFunction, match="third"):
            classify(C, G, D, G, C)


class TestFirstInversion:
    """Tests for first-inversion triads."""

    def test_major_triad(self) -> None:
        """C major over E, root doubled."""
        result = classify(C, C, G, C, E)
        assert result.sonority == Sonority.FIRST_INVERSION_TRIAD
        assert result.bass_function == HarmonicFunction.THIRD

    def test_third_doubled(self) -> None:
        """Doubling the bass third is forbidden."""
        with pytest.raises(InvalidDoubling, match="must not double the third"):
            classify(C, E, G, C, E)

    def test_diminished_triad(self) -> None:
        """B diminished over D with the third doubled."""
        result = classify(B, D, F, B, D)
        assert result.sonority == Sonority.FIRST_INVERSION_DIMINISHED_TRIAD

    def test_diminished_triad_without_doubled_third(self) -> None:
        """A diminished first inversion must double the third."""
        with pytest.raises(InvalidDoubling, match="must double the third"):
            classify(B, B, F, B, D)


class TestSecondInversion:
    """Tests for second-inversion triads."""

    def test_major_triad(self) -> None:
        """C major over G with the fifth doubled."""
        result = classify(C, G, E, C, G)
        assert result.sonority == Sonority.SECOND_INVERSION_TRIAD
        assert result.bass_function == HarmonicFunction.FIFTH

    def test_fifth_not_doubled(self) -> None:
        """Doubling the root in a second inversion is rejected."""
        with pytest.raises(InvalidDoubling, match="must double the fifth"):
            classify(C, C, E, C, G)


class TestInvalidBass:
    """Tests for triads with an illegal bass."""

    def test_non_chord_tone_in_bass(self) -> None:
        """D under a C chord."""
        with pytest.raises(InvalidBassFunction) as exc_info:
            classify(C, E, C, E, D)
        assert exc_info.value.voice == Voice.BASS
        assert exc_info.value.location == "bass"

    def test_seventh_in_bass_of_triad(self) -> None:
        """A seventh in the bass of a three-class chord."""
        with pytest.raises(InvalidBassFunction):
            classify(C, E, C, E, Bb)


class TestOtherCounts:
    """Tests for two and four distinct pitch classes."""

    def test_root_and_third(self) -> None:
        """Only root and third sound."""
        assert classify(C, E, C, C, C).sonority == Sonority.ROOT_AND_THIRD

    def test_root_and_fifth_rejected(self) -> None:
        """An open fifth is not a legal two-class sonority."""
        with pytest.raises(IncompleteHarmonicFunction):
            classify(C, G, C, G, C)

    def test_seventh_chord(self) -> None:
        """G7 with every member present."""
        result = classify(G, F, D, B, G)
        assert result.sonority == Sonority.SEVENTH_CHORD

    def test_seventh_chord_in_third_inversion(self) -> None:
        """D minor seventh over C."""
        assert classify(D, F, D, A, C).sonority == Sonority.SEVENTH_CHORD

    def test_four_classes_without_seventh(self) -> None:
        """C E G plus D is not a seventh chord."""
        with pytest.raises(IncompleteHarmonicFunction, match="seventh"):
            classify(C, E, G, D, C)

    def test_single_pitch_class(self) -> None:
        """All four voices on the root."""
        with pytest.raises(InvalidVoiceCount):
            classify(C, C, C, C, C)


class TestNoRoot:
    """Tests for harmonies missing their root."""

    def test_no_voice_on_root(self) -> None:
        """E and G only, declared over C."""
        with pytest.raises(NoRootPresent) as exc_info:
            classify(C, E, G, E, G)
        assert exc_info.value.code == "NO_ROOT_PRESENT"
        assert exc_info.value.location is None

    def test_checked_before_count(self) -> None:
        """A unison on a non-root reports the missing root."""
        with pytest.raises(NoRootPresent):
            classify(C, E, E, E, E)


class TestIsLegal:
    """Tests for the boolean form."""

    def test_legal(self) -> None:
        """Legal chords return True."""
        assert is_legal(C, E, C, G, C)
        assert is_legal(G, F, D, B, G)

    def test_illegal(self) -> None:
        """Illegal chords return False instead of raising."""
        assert not is_legal(C, G, C, G, C)
        assert not is_legal(C, E, G, E, G)
