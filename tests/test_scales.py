import pytest

import fretwheel.pitch_classes
import fretwheel.scales


_pc = fretwheel.pitch_classes.normalize


def test_major_degrees () -> None:

	"""Major scale offsets follow W-W-H-W-W-W-H."""

	assert fretwheel.scales.degrees_of("major") == ((1, 0), (2, 2), (3, 4), (4, 5), (5, 7), (6, 9), (7, 11))


def test_natural_minor_degrees () -> None:

	"""Natural minor offsets follow W-H-W-W-H-W-W."""

	assert fretwheel.scales.degrees_of("minor") == ((1, 0), (2, 2), (3, 3), (4, 5), (5, 7), (6, 8), (7, 10))


def test_chromatic_degrees () -> None:

	"""Chromatic maps every offset 0-11 to degrees 1-12."""

	degrees = fretwheel.scales.degrees_of("chromatic")

	assert len(degrees) == 12
	assert all(degree == offset + 1 for degree, offset in degrees)


@pytest.mark.parametrize("scale_type", ["major", "minor", "chromatic"])
def test_registry_invariants (scale_type: str) -> None:

	"""Offsets start at 0, strictly increase and are unique modulo 12."""

	offsets = [offset for _, offset in fretwheel.scales.degrees_of(scale_type)]

	assert offsets[0] == 0
	assert all(a < b for a, b in zip(offsets, offsets[1:]))
	assert len({offset % 12 for offset in offsets}) == len(offsets)


def test_unknown_scale_type () -> None:

	"""Unknown scale types are rejected."""

	with pytest.raises(ValueError, match="Unknown scale type"):
		fretwheel.scales.degrees_of("dorian")


@pytest.mark.parametrize("name, expected", [
	("major", "major"),
	("Major", "major"),
	("ionian", "major"),
	("minor", "minor"),
	("natural minor", "minor"),
	("Natural-Minor", "minor"),
	("aeolian", "minor"),
	("chromatic", "chromatic"),
])
def test_scale_type_aliases (name: str, expected: str) -> None:

	"""Scale type names resolve case-insensitively through their aliases."""

	assert fretwheel.scales.scale_type_from_name(name) == expected


def test_scale_type_from_unknown_name () -> None:

	"""An unknown name lists what is available."""

	with pytest.raises(ValueError, match="Available"):
		fretwheel.scales.scale_type_from_name("lydian")


def test_a_minor_pitch_classes () -> None:

	"""A natural minor is the white keys starting from A."""

	names = [p.name for p in fretwheel.scales.scale_pitch_classes(_pc("A"), "minor")]

	assert names == ["A", "B", "C", "D", "E", "F", "G"]


def test_d_major_pitch_classes () -> None:

	"""D major has two sharps, spelled canonically as flats."""

	names = [p.name for p in fretwheel.scales.scale_pitch_classes(_pc("D"), "major")]

	assert names == ["D", "E", "Gb", "G", "A", "B", "Db"]


def test_degree_labels () -> None:

	"""Legend labels differ between diatonic and chromatic modes."""

	assert fretwheel.scales.degree_label(1, "major") == "Root"
	assert fretwheel.scales.degree_label(3, "minor") == "3rd"
	assert fretwheel.scales.degree_label(2, "chromatic") == "b2nd"
	assert fretwheel.scales.degree_label(12, "chromatic") == "7th"

	with pytest.raises(ValueError):
		fretwheel.scales.degree_label(8, "major")


def test_is_diatonic () -> None:

	"""Only major and minor have relative keys."""

	assert fretwheel.scales.is_diatonic("major")
	assert fretwheel.scales.is_diatonic("minor")
	assert not fretwheel.scales.is_diatonic("chromatic")
