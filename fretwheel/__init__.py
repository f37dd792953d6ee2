"""
Fretwheel - scale-degree highlighting for a guitar fretboard and a
circle-of-fifths wheel.

Given a root note and a scale type (major, natural minor or chromatic),
Fretwheel works out which notes belong to the scale, the degree of each,
and the color (and, in chromatic mode, the glyph) a diagram should draw it
with.  Both diagrams are recomputed from scratch on every selection change,
so they can never drift apart.

- **Pitch classes.** ``fretwheel.pitch_classes.normalize()`` reads sharps,
  flats and wheel labels such as ``"F#m"``, ``"B°"`` or ``"Gø"``.
- **Relative keys.** ``resolve_relative_keys()`` resolves the relative major and
  minor tonics that every wheel ring is measured against.
- **Degrees and colors.** ``classify()`` returns a degree or
  ``OUT_OF_SCALE``; ``HighlightEncoder`` turns that into fill, label color
  and shape.
- **Selection.** ``SelectionState`` owns the current root and scale type
  and notifies the bound ``Fretboard`` and ``CircleOfFifths``.

Minimal example:

    ```python
    import fretwheel

    state = fretwheel.SelectionState()
    board = fretwheel.Fretboard()
    wheel = fretwheel.CircleOfFifths()

    board.bind(state)
    wheel.bind(state)

    state.set_root_note("A")
    state.set_scale_type("minor")

    board.styles["0-5"].fill_color   # "red" - A on the high E string
    ```

Package-level exports: ``CircleOfFifths``, ``Fretboard``, ``HighlightEncoder``,
``SelectionState``, ``classify``, ``normalize``,
``resolve_relative_keys``.
"""

import fretwheel.circle_of_fifths
import fretwheel.degrees
import fretwheel.fretboard
import fretwheel.highlight
import fretwheel.pitch_classes
import fretwheel.relative_keys
import fretwheel.selection_state


CircleOfFifths = fretwheel.circle_of_fifths.CircleOfFifths
Fretboard = fretwheel.fretboard.Fretboard
HighlightEncoder = fretwheel.highlight.HighlightEncoder
SelectionState = fretwheel.selection_state.SelectionState
classify = fretwheel.degrees.classify
normalize = fretwheel.pitch_classes.normalize
resolve_relative_keys = fretwheel.relative_keys.relative_keys
