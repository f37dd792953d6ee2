import typing

import pytest

import fretwheel.circle_of_fifths
import fretwheel.fretboard
import fretwheel.selection_state


class StyleRecorder:

	"""Collects every styles dict a highlighter forwards to its apply callback."""

	def __init__ (self) -> None:

		self.passes: typing.List[typing.Dict[str, typing.Any]] = []

	def __call__ (self, styles: typing.Dict[str, typing.Any]) -> None:

		self.passes.append(styles)


@pytest.fixture
def selection () -> fretwheel.selection_state.SelectionState:

	"""A selection state at the default C major."""

	return fretwheel.selection_state.SelectionState()


@pytest.fixture
def fretboard () -> fretwheel.fretboard.Fretboard:

	"""A standard-tuned, 24-fret board."""

	return fretwheel.fretboard.Fretboard()


@pytest.fixture
def wheel () -> fretwheel.circle_of_fifths.CircleOfFifths:

	"""A circle of fifths with the default encoder."""

	return fretwheel.circle_of_fifths.CircleOfFifths()


@pytest.fixture
def recorder () -> StyleRecorder:

	"""A fresh apply-callback recorder."""

	return StyleRecorder()
