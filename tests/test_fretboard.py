import typing

import pytest

import fretwheel.degrees
import fretwheel.fretboard
import fretwheel.highlight
import fretwheel.pitch_classes
import fretwheel.selection_state


_pc = fretwheel.pitch_classes.normalize


def _center (root: str, scale_type: str) -> fretwheel.selection_state.TonalCenter:

	return fretwheel.selection_state.TonalCenter(root=_pc(root), scale_type=scale_type)


def test_side_table_size (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""Six strings by 25 positions (open plus 24 frets)."""

	assert len(fretboard.positions) == 6 * 25
	assert len({p.element_id for p in fretboard.positions}) == 6 * 25


def test_position_pitch_classes (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""Pitch classes follow the open string plus the fret number."""

	assert fretboard.position(0, 0).pitch_class == _pc("E")
	assert fretboard.position(0, 5).pitch_class == _pc("A")
	assert fretboard.position(1, 2).pitch_class == _pc("Db")
	assert fretboard.position(5, 3).pitch_class == _pc("G")
	assert fretboard.position(2, 12).pitch_class == _pc("G")
	assert fretboard.position(3, 24).pitch_class == _pc("D")


def test_position_ids (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""Element ids are string-fret."""

	assert fretboard.position(4, 7).element_id == "4-7"


def test_position_out_of_range (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""Looking up a missing position raises KeyError."""

	with pytest.raises(KeyError):
		fretboard.position(6, 0)

	with pytest.raises(KeyError):
		fretboard.position(0, 25)


def test_bad_tuning_fails_construction () -> None:

	"""A typo in the tuning is caught when the board is built."""

	with pytest.raises(fretwheel.pitch_classes.UnknownPitchClass):
		fretwheel.fretboard.Fretboard(tuning=["E", "B", "G", "D", "A", "X"])


def test_invalid_dimensions () -> None:

	"""Empty tunings and negative fret counts are rejected."""

	with pytest.raises(ValueError):
		fretwheel.fretboard.Fretboard(tuning=[])

	with pytest.raises(ValueError):
		fretwheel.fretboard.Fretboard(frets=-1)


def test_c_major_highlight (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""In C major, E is yellow, F# is white, and dark fills get white labels."""

	styles = fretboard.highlight(_center("C", "major"))

	open_e = styles[fretboard.position(0, 0).element_id]
	f_sharp = styles[fretboard.position(0, 2).element_id]
	g = styles[fretboard.position(0, 3).element_id]

	assert open_e == fretwheel.highlight.HighlightStyle("yellow", "black", None)
	assert f_sharp == fretwheel.highlight.HighlightStyle("white", "black", None)
	assert g == fretwheel.highlight.HighlightStyle("blue", "white", None)


def test_every_position_is_styled (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""The pass covers the whole side table."""

	styles = fretboard.highlight(_center("G", "minor"))

	assert set(styles) == {p.element_id for p in fretboard.positions}


def test_a_minor_classification (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""In A minor the open A string is the root and C on it is the 3rd."""

	results = fretboard.classify(_center("A", "minor"))

	assert results["4-0"].degree == 1
	assert results["4-3"].degree == 3
	assert not results["4-1"].in_scale


def test_classification_matches_pitch_class_table (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""Every position carries the result its pitch class gets on its own."""

	table = fretwheel.degrees.classify_all(_pc("Eb"), "major")
	results = fretboard.classify(_center("Eb", "major"))

	for pos in fretboard.positions:
		assert results[pos.element_id] == table[pos.pitch_class]


def test_chromatic_b2nd_is_pink_circle (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""Db above a C root is the b2nd color with a circle glyph."""

	styles = fretboard.highlight(_center("C", "chromatic"))
	db = styles[fretboard.position(1, 2).element_id]

	assert db.fill_color == "pink"
	assert db.shape == "circle"


def test_chromatic_everything_in_scale (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""No position is neutral in chromatic mode and shapes alternate by semitone."""

	center = _center("C", "chromatic")
	styles = fretboard.highlight(center)

	for pos in fretboard.positions:

		style = styles[pos.element_id]
		semitones = fretwheel.pitch_classes.interval(pos.pitch_class, center.root)

		assert style.fill_color != fretwheel.highlight.NEUTRAL_FILL
		assert style.shape == ("rect" if semitones % 2 == 0 else "circle")


def test_legend (fretboard: fretwheel.fretboard.Fretboard) -> None:

	"""The legend lists each degree label with its color."""

	assert fretboard.legend("major") == [
		("Root", "red"),
		("2nd", "brown"),
		("3rd", "yellow"),
		("4th", "green"),
		("5th", "blue"),
		("6th", "orange"),
		("7th", "violet"),
	]

	chromatic = fretboard.legend("chromatic")

	assert len(chromatic) == 12
	assert chromatic[1] == ("b2nd", "pink")


def test_bind_follows_selection (
	fretboard: fretwheel.fretboard.Fretboard,
	selection: fretwheel.selection_state.SelectionState,
	recorder: typing.Any
) -> None:

	"""A bound board recomputes on bind and on every change."""

	fretboard.bind(selection, apply=recorder)

	assert len(recorder.passes) == 1
	assert fretboard.styles["0-0"].fill_color == "yellow"

	selection.set_root_note("E")

	assert len(recorder.passes) == 2
	assert fretboard.styles["0-0"].fill_color == "red"
	assert recorder.passes[-1] is fretboard.styles


def test_scale_toggle_in_chromatic_then_back (
	fretboard: fretwheel.fretboard.Fretboard,
	selection: fretwheel.selection_state.SelectionState
) -> None:

	"""Switching to chromatic lights Db; switching back to major clears it."""

	fretboard.bind(selection)

	selection.set_scale_type("chromatic")
	assert fretboard.styles["1-2"].fill_color == "pink"

	selection.set_scale_type("major")
	assert fretboard.styles["1-2"].fill_color == "white"
	assert fretboard.styles["1-2"].shape is None


def test_unbind (
	fretboard: fretwheel.fretboard.Fretboard,
	selection: fretwheel.selection_state.SelectionState,
	recorder: typing.Any
) -> None:

	"""After unbind the board no longer follows the selection."""

	fretboard.bind(selection, apply=recorder)
	fretboard.unbind()
	selection.set_root_note("D")

	assert len(recorder.passes) == 1

	# Unbinding twice is harmless.
	fretboard.unbind()


def test_rebind_moves_to_new_state (
	fretboard: fretwheel.fretboard.Fretboard,
	recorder: typing.Any
) -> None:

	"""Binding again detaches from the previous state."""

	first = fretwheel.selection_state.SelectionState()
	second = fretwheel.selection_state.SelectionState(root="E")

	fretboard.bind(first, apply=recorder)
	fretboard.bind(second, apply=recorder)
	first.set_root_note("D")

	assert len(recorder.passes) == 2
	assert fretboard.styles["0-0"].fill_color == "red"


def test_custom_tuning_and_encoder () -> None:

	"""Drop-D tuning and a custom dark list flow through the pass."""

	encoder = fretwheel.highlight.HighlightEncoder(dark_colors=["red"])
	board = fretwheel.fretboard.Fretboard(tuning=["E", "B", "G", "D", "A", "D"], frets=5, encoder=encoder)

	styles = board.highlight(_center("D", "major"))

	assert len(board.positions) == 36
	assert styles["5-0"] == fretwheel.highlight.HighlightStyle("red", "white", None)
