"""Print one highlight pass of the wheel and the fretboard.

```
python -m fretwheel --root A --scale minor
```

Lit wheel segments are shown as ``label[degree]=fill/label_color`` and each
fret as its degree number (``.`` when out of scale).  The legend gives the
fill and label color of every degree::

	A minor  (relative major: C, relative minor: A)
	Legend: Root=red/black  2nd=brown/white  3rd=yellow/black  4th=green/white  5th=blue/white  6th=orange/black  7th=violet/white

	major       C[1]=red/black  G[5]=blue/white  D[2]=brown/white  A[6]=orange/black  E[3]=yellow/black  B[7]=violet/white  Gb  Db  Ab  Eb  Bb  F[4]=green/white
	...
	E |5  6  .  7  .  1  .  2  3  .  4  .  5  |
"""

import argparse
import logging
import sys
import typing

import yaml

import fretwheel.circle_of_fifths
import fretwheel.config
import fretwheel.degrees
import fretwheel.fretboard
import fretwheel.highlight
import fretwheel.relative_keys
import fretwheel.scales
import fretwheel.selection_state


logger = logging.getLogger(__name__)

_CELL_WIDTH = 3


def _cell (
	label: str,
	result: fretwheel.degrees.DegreeResult,
	style: fretwheel.highlight.HighlightStyle
) -> str:

	if not result.in_scale:
		return label

	return f"{label}[{result.degree}]={style.fill_color}/{style.label_color}"


def format_header (center: fretwheel.selection_state.TonalCenter) -> str:

	"""Title line naming the selection and, for diatonic scales, its relative keys."""

	if not fretwheel.scales.is_diatonic(center.scale_type):
		return str(center)

	keys = fretwheel.relative_keys.relative_keys(center.root, center.scale_type)

	return f"{center}  (relative major: {keys.major_tonic}, relative minor: {keys.minor_tonic})"


def format_legend (fretboard: fretwheel.fretboard.Fretboard, scale_type: str) -> str:

	"""One line of ``label=fill/label_color`` pairs, using the board's encoder."""

	encoder = fretboard.encoder

	return "Legend: " + "  ".join(
		f"{label}={color}/{encoder.label_color_for(color)}" for label, color in fretboard.legend(scale_type)
	)


def format_wheel (
	wheel: fretwheel.circle_of_fifths.CircleOfFifths,
	center: fretwheel.selection_state.TonalCenter
) -> typing.List[str]:

	"""One line per ring; lit segments carry their degree and style."""

	results = wheel.classify(center)
	styles = wheel.highlight(center)
	lines: typing.List[str] = []

	for ring in fretwheel.circle_of_fifths.RINGS:

		cells = [
			_cell(segment.label, results[segment.element_id], styles[segment.element_id])
			for segment in wheel.ring(ring)
		]

		lines.append(f"{ring:<12}" + "  ".join(cells))

	return lines


def format_fretboard (
	fretboard: fretwheel.fretboard.Fretboard,
	center: fretwheel.selection_state.TonalCenter
) -> typing.List[str]:

	"""One row per string, one cell per fret, in the style of an ASCII tab."""

	results = fretboard.classify(center)
	lines: typing.List[str] = []
	header = "   " + "".join(f"{fret:<{_CELL_WIDTH}}" for fret in range(fretboard.frets + 1))
	lines.append(header.rstrip())

	for string_index, open_pc in enumerate(fretboard.open_strings):

		cells: typing.List[str] = []

		for fret in range(fretboard.frets + 1):
			result = results[fretboard.position(string_index, fret).element_id]
			cells.append(f"{result.degree if result.in_scale else '.':<{_CELL_WIDTH}}")

		lines.append(f"{open_pc.name:<2}|" + "".join(cells) + "|")

	return lines


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""Parse arguments, run one highlight pass and print it."""

	parser = argparse.ArgumentParser(description="Show scale-degree highlighting for the fretboard and the circle of fifths")
	parser.add_argument("--config", default=fretwheel.config.DEFAULT_CONFIG_PATH, help="YAML config file (default: fretwheel.yaml)")
	parser.add_argument("--root", help="Root note, e.g. C, F#, Bb (default: from config, else C)")
	parser.add_argument("--scale", help="major, minor or chromatic (default: from config, else major)")
	parser.add_argument("--frets", type=int, help="Number of frets to show (default: from config, else 24)")
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.INFO)

	try:
		settings = fretwheel.config.load_config(args.config)
		state = fretwheel.selection_state.SelectionState(
			root = args.root if args.root is not None else settings.root,
			scale_type = args.scale if args.scale is not None else settings.scale_type
		)
		encoder = fretwheel.highlight.HighlightEncoder(settings.dark_colors)
		fretboard = fretwheel.fretboard.Fretboard(
			tuning = settings.tuning,
			frets = args.frets if args.frets is not None else settings.frets,
			encoder = encoder
		)
	except (ValueError, yaml.YAMLError) as e:
		logger.error(str(e))
		return 1

	wheel = fretwheel.circle_of_fifths.CircleOfFifths(encoder=encoder)
	center = state.snapshot

	print(format_header(center))
	print(format_legend(fretboard, center.scale_type))
	print()

	for line in format_wheel(wheel, center):
		print(line)

	print()

	for line in format_fretboard(fretboard, center):
		print(line)

	return 0


if __name__ == "__main__":
	sys.exit(main())
