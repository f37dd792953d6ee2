import types

import pytest

import fretwheel
import fretwheel.pitch_classes
import fretwheel.relative_keys


_pc = fretwheel.pitch_classes.normalize


def test_c_major_relative_minor () -> None:

	"""C major's relative minor is A."""

	keys = fretwheel.relative_keys.relative_keys(_pc("C"), "major")

	assert keys == fretwheel.relative_keys.RelativeKeys(major_tonic=_pc("C"), minor_tonic=_pc("A"))


def test_a_minor_relative_major () -> None:

	"""A minor's relative major is C."""

	keys = fretwheel.relative_keys.relative_keys(_pc("A"), "minor")

	assert keys.major_tonic == _pc("C")
	assert keys.minor_tonic == _pc("A")


def test_flat_keys () -> None:

	"""Eb major pairs with C minor; F# minor pairs with A major."""

	assert fretwheel.relative_keys.relative_keys(_pc("Eb"), "major").minor_tonic == _pc("C")
	assert fretwheel.relative_keys.relative_keys(_pc("F#"), "minor").major_tonic == _pc("A")


def test_round_trip_for_every_root () -> None:

	"""Going to the relative minor and back returns the starting major tonic."""

	for root in fretwheel.pitch_classes.PITCH_CLASSES:

		minor = fretwheel.relative_keys.relative_keys(root, "major").minor_tonic

		assert fretwheel.relative_keys.relative_keys(minor, "minor").major_tonic == root


def test_chromatic_is_rejected () -> None:

	"""Chromatic mode has no relative keys."""

	with pytest.raises(ValueError, match="major and minor"):
		fretwheel.relative_keys.relative_keys(_pc("C"), "chromatic")


def test_leading_tone () -> None:

	"""The leading tone is a major 7th above the major tonic."""

	assert fretwheel.relative_keys.leading_tone(_pc("G")) == _pc("F#")
	assert fretwheel.relative_keys.leading_tone(_pc("C")) == _pc("B")
	assert fretwheel.relative_keys.leading_tone(_pc("F")) == _pc("E")


def test_package_export_keeps_submodule () -> None:

	"""The package-level export does not hide the relative_keys module."""

	assert isinstance(fretwheel.relative_keys, types.ModuleType)
	assert fretwheel.resolve_relative_keys(_pc("G"), "major").minor_tonic == _pc("E")
	assert fretwheel.relative_keys.leading_tone(_pc("G")) == _pc("F#")


def test_package_wheel_pass_after_import () -> None:

	"""A diatonic wheel pass built from package exports lights the leading tone."""

	wheel = fretwheel.CircleOfFifths()
	state = fretwheel.SelectionState("G", "major")

	styles = wheel.highlight(state.snapshot)

	assert styles["diminished-1"].fill_color == "violet"
