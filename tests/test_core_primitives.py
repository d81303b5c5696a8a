"""
Tests for core music primitives.

Tests cover:
- PitchClass and Pitch (pitch.py)
- dist, interval predicates, semitone_distance (interval.py)
- HarmonicFunction and PitchClassSet (interval.py)
"""

import pytest

from chuk_mcp_harmony.constants import (
    A440_FREQUENCY,
    A440_HALF_STEPS_FROM_ZERO,
    A440_OCTAVE,
    A440_PITCH_CLASS,
)
from chuk_mcp_harmony.core import (
    HarmonicFunction,
    Pitch,
    PitchClass,
    PitchClassSet,
    compute_frequency,
    compute_half_steps_from_zero,
    dist,
    harmonic_function,
    is_fifth,
    is_seventh,
    is_third,
    semitone_distance,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.G == 7
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_parse(self) -> None:
        """Parse pitch class from string."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("Bb") == PitchClass.As
        assert PitchClass.parse("Fs") == PitchClass.Fs

    def test_parse_unknown(self) -> None:
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown pitch class"):
            PitchClass.parse("H")

    def test_display_white_keys(self) -> None:
        """White keys have a single name."""
        assert PitchClass.C.display() == "C"
        assert PitchClass.B.display() == "B"

    def test_display_black_keys(self) -> None:
        """Black keys show both spellings."""
        assert PitchClass.Cs.display() == "C#/Db"
        assert PitchClass.Fs.display() == "F#/Gb"
        assert PitchClass.As.display() == "A#/Bb"


class TestHalfStepsAndFrequency:
    """Tests for compute_half_steps_from_zero and compute_frequency."""

    def test_middle_c_half_steps(self) -> None:
        """Middle C is 36 half steps from zero."""
        assert compute_half_steps_from_zero(0, 4) == 36

    def test_a440_half_steps(self) -> None:
        """A4 is 45 half steps from zero."""
        assert compute_half_steps_from_zero(9, 4) == 45

    def test_reference_constants_agree(self) -> None:
        """The tuning reference sits on A4."""
        half_steps = compute_half_steps_from_zero(A440_PITCH_CLASS, A440_OCTAVE)
        assert half_steps == A440_HALF_STEPS_FROM_ZERO
        assert compute_frequency(A440_PITCH_CLASS, A440_OCTAVE) == A440_FREQUENCY

    def test_octave_zero_has_no_multiplier(self) -> None:
        """Octave 0 maps pitch classes directly."""
        assert compute_half_steps_from_zero(5, 0) == 5
        assert compute_half_steps_from_zero(5, 1) == 5
        assert compute_half_steps_from_zero(5, 2) == 17

    def test_a440_frequency_exact(self) -> None:
        """A4 is exactly 440 Hz."""
        assert compute_frequency(9, 4) == 440.0

    def test_middle_c_frequency(self) -> None:
        """Middle C is about 261.6256 Hz."""
        assert abs(compute_frequency(0, 4) - 261.625580) < 0.0001

    def test_octaves_double(self) -> None:
        """One octave up doubles the frequency."""
        assert compute_frequency(9, 5) == pytest.approx(880.0, rel=1e-6)
        assert compute_frequency(9, 3) == pytest.approx(220.0, rel=1e-6)


class TestPitch:
    """Tests for the Pitch value object."""

    def test_create_pitch(self) -> None:
        """Create a pitch and cache its half steps."""
        a440 = Pitch(440.0, 9, 4)
        assert a440.frequency == 440.0
        assert a440.pitch_class == PitchClass.A
        assert a440.octave == 4
        assert a440.half_steps_from_zero == 45

    def test_value_equality(self) -> None:
        """Pitches compare by value."""
        assert Pitch(440.0, 9, 4) == Pitch(440.0, 9, 4)
        assert Pitch(440.0, 9, 4) != Pitch(440.0, 9, 5)
        assert len({Pitch(440.0, 9, 4), Pitch(440.0, 9, 4)}) == 1

    def test_frequency_not_cross_checked(self) -> None:
        """Frequency is taken as given."""
        detuned = Pitch(445.0, 9, 4)
        assert detuned.frequency == 445.0
        assert detuned.half_steps_from_zero == 45

    def test_immutable(self) -> None:
        """Pitches cannot be modified."""
        pitch = Pitch(440.0, 9, 4)
        with pytest.raises(AttributeError):
            pitch.octave = 5  # type: ignore[misc]

    def test_invalid_pitch_class(self) -> None:
        """Pitch class must be 0-11."""
        with pytest.raises(ValueError, match="Pitch class must be 0-11"):
            Pitch(440.0, 12, 4)

    def test_invalid_octave(self) -> None:
        """Octave must be non-negative."""
        with pytest.raises(ValueError, match="Octave must be >= 0"):
            Pitch(440.0, 9, -1)

    def test_invalid_frequency(self) -> None:
        """Frequency must be positive."""
        with pytest.raises(ValueError, match="Frequency must be > 0"):
            Pitch(0.0, 9, 4)

    def test_from_pitch_class(self) -> None:
        """from_pitch_class uses the equal-tempered frequency."""
        a440 = Pitch.from_pitch_class(9, 4)
        assert a440 == Pitch(440.0, 9, 4)

    def test_parse(self) -> None:
        """Parse note names with octave."""
        assert Pitch.parse("A4") == Pitch(440.0, 9, 4)
        db4 = Pitch.parse("Db4")
        assert db4.pitch_class == PitchClass.Cs
        assert db4.octave == 4
        assert Pitch.parse("F#3").pitch_class == PitchClass.Fs

    def test_parse_needs_octave(self) -> None:
        """Note names without an octave are rejected."""
        with pytest.raises(ValueError):
            Pitch.parse("C")
        with pytest.raises(ValueError):
            Pitch.parse("4")

    def test_display(self) -> None:
        """Display concatenates name and octave."""
        assert str(Pitch(261.63, 0, 4)) == "C4"
        assert Pitch(277.18, 1, 4).display() == "C#/Db4"

    def test_to_midi(self) -> None:
        """Convert to MIDI note numbers."""
        assert Pitch.parse("C4").to_midi() == 60
        assert Pitch.parse("A4").to_midi() == 69


class TestDist:
    """Tests for the directed mod-12 distance."""

    def test_unison_is_zero(self) -> None:
        """dist(x, x) is 0 for every pitch class."""
        for x in range(12):
            assert dist(x, x) == 0

    def test_range(self) -> None:
        """dist is always in [0, 12)."""
        for a in range(12):
            for b in range(12):
                assert 0 <= dist(a, b) < 12

    def test_ascending(self) -> None:
        """Counts ascending semitones."""
        assert dist(0, 4) == 4
        assert dist(0, 7) == 7

    def test_wraps(self) -> None:
        """Wraps past B back to C."""
        assert dist(11, 2) == 3
        assert dist(7, 5) == 10

    def test_asymmetric(self) -> None:
        """dist(a, b) and dist(b, a) are complements, not equal."""
        assert dist(2, 11) == 9
        assert dist(11, 2) == 3


class TestIntervalPredicates:
    """Tests for is_third, is_fifth, is_seventh."""

    def test_thirds(self) -> None:
        """Minor and major thirds above."""
        assert is_third(0, 3)
        assert is_third(0, 4)
        assert not is_third(0, 5)
        assert not is_third(4, 0)  # C is a sixth above E

    def test_fifths(self) -> None:
        """Diminished and perfect fifths above."""
        assert is_fifth(0, 6)
        assert is_fifth(0, 7)
        assert not is_fifth(0, 8)
        assert is_fifth(7, 2)

    def test_sevenths(self) -> None:
        """Diminished, minor and major sevenths above."""
        assert is_seventh(0, 9)
        assert is_seventh(0, 10)
        assert is_seventh(0, 11)
        assert not is_seventh(0, 0)

    def test_predicates_disjoint(self) -> None:
        """No pair is more than one of third, fifth, seventh."""
        for a in range(12):
            for b in range(12):
                hits = [is_third(a, b), is_fifth(a, b), is_seventh(a, b)]
                assert sum(hits) <= 1


class TestSemitoneDistance:
    """Tests for octave-aware semitone distance."""

    def test_across_octave(self) -> None:
        """E3 to G4 is 15 semitones."""
        assert semitone_distance((4, 3), (7, 4)) == 15

    def test_same_octave(self) -> None:
        """E4 to G4 is 3 semitones."""
        assert semitone_distance((4, 4), (7, 4)) == 3

    def test_over_octave_boundary(self) -> None:
        """E4 to C5 is 8 semitones."""
        assert semitone_distance((4, 4), (0, 5)) == 8

    def test_symmetric(self) -> None:
        """Order does not matter."""
        assert semitone_distance((7, 4), (4, 3)) == 15


class TestHarmonicFunction:
    """Tests for harmonic_function."""

    def test_functions_over_c(self) -> None:
        """Classify pitch classes above C."""
        assert harmonic_function(0, 0) == HarmonicFunction.ROOT
        assert harmonic_function(0, 4) == HarmonicFunction.THIRD
        assert harmonic_function(0, 3) == HarmonicFunction.THIRD
        assert harmonic_function(0, 7) == HarmonicFunction.FIFTH
        assert harmonic_function(0, 6) == HarmonicFunction.FIFTH
        assert harmonic_function(0, 10) == HarmonicFunction.SEVENTH
        assert harmonic_function(0, 2) == HarmonicFunction.NONE
        assert harmonic_function(0, 8) == HarmonicFunction.NONE

    def test_measured_from_root(self) -> None:
        """Functions are measured upward from the root."""
        assert harmonic_function(7, 5) == HarmonicFunction.SEVENTH
        assert harmonic_function(7, 11) == HarmonicFunction.THIRD


class TestPitchClassSet:
    """Tests for the 12-bit pitch-class mask."""

    def test_membership_and_size(self) -> None:
        """Duplicates collapse."""
        pcs = PitchClassSet([0, 4, 7, 0, 4])
        assert len(pcs) == 3
        assert 4 in pcs
        assert 5 not in pcs
        assert 12 not in pcs

    def test_iteration_sorted(self) -> None:
        """Iterates in ascending order."""
        assert list(PitchClassSet([11, 0, 7])) == [0, 7, 11]

    def test_mask(self) -> None:
        """Bits map to pitch classes."""
        assert PitchClassSet([0, 4, 7]).mask == 0b10010001
        assert PitchClassSet.from_mask(0b10010001) == PitchClassSet([7, 4, 0])

    def test_add_returns_new_set(self) -> None:
        """add() does not modify the original."""
        pcs = PitchClassSet([0])
        bigger = pcs.add(7)
        assert len(pcs) == 1
        assert len(bigger) == 2

    def test_immutable(self) -> None:
        """Attributes cannot be set."""
        pcs = PitchClassSet([0])
        with pytest.raises(AttributeError):
            pcs._mask = 3  # type: ignore[misc]

    def test_rejects_out_of_range(self) -> None:
        """Pitch classes must be 0-11."""
        with pytest.raises(ValueError):
            PitchClassSet([12])
