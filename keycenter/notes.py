"""Pitch spelling and normalisation.

The Circle of Fifths is written in conventional music-theory spelling (a mix of
sharps and flats), while host applications name pitches with sharps only. This
module is the single bridge between the two vocabularies.

Module-level constants:
- `PITCH_CLASS_NAMES`: The twelve canonical sharps-only labels, indexed by pitch class.
- `NOTE_MAP`: Maps every pitch label used on the circle to its canonical label.
- `NOTE_NAME_TO_PC`: Maps sharp and flat spellings to pitch classes (0-11).

Module-level helpers:
- `normalise(label)`: Canonical sharps-only label for a circle spelling.
- `note_name_to_pc(name)`: Validate a note name and return its pitch class.
- `normalize_chord_text(text)`: Fold Unicode chord symbols to plain ASCII.
"""

import re
import types
import typing


PITCH_CLASS_NAMES: typing.Tuple[str, ...] = (
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
)

NOTE_MAP: typing.Mapping[str, str] = types.MappingProxyType({
	"C": "C",
	"G": "G",
	"D": "D",
	"A": "A",
	"E": "E",
	"B": "B",
	"F#": "F#",
	"Gb": "F#",
	"C#": "C#",
	"Db": "C#",
	"Ab": "G#",
	"Eb": "D#",
	"Bb": "A#",
	"F": "F",
})

NOTE_NAME_TO_PC: typing.Mapping[str, int] = types.MappingProxyType({
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
})


_SUPERSCRIPT_DIGITS: typing.Dict[str, str] = {
	"⁰": "0",
	"¹": "1",
	"²": "2",
	"³": "3",
	"⁴": "4",
	"⁵": "5",
	"⁶": "6",
	"⁷": "7",
	"⁸": "8",
	"⁹": "9",
}

# Accidentals, subscript/superscript minor marks and the letters of a superscript "maj".
_SYMBOL_REPLACEMENTS: typing.Dict[str, str] = {
	"♭": "b",
	"♯": "#",
	"ₘ": "m",
	"ᵐ": "m",
	"ᵃ": "a",
	"ʲ": "j",
	**_SUPERSCRIPT_DIGITS,
}

_SYMBOL_PATTERN = re.compile("|".join(re.escape(symbol) for symbol in _SYMBOL_REPLACEMENTS))


def normalise (label: str) -> str:

	"""Return the canonical sharps-only spelling of a circle pitch label.

	Flats are re-spelled as the sharp a semitone below them (``"Bb"`` becomes
	``"A#"``). Labels that are already canonical map to themselves, and labels
	outside the circle's vocabulary are returned unchanged.

	Parameters:
		label: Pitch label without any trailing minor marker.

	Returns:
		The canonical label, or ``label`` itself when it is not recognised.

	Example:
		```python
		normalise("Gb")   # → "F#"
		normalise("C")    # → "C"
		normalise("G#")   # → "G#"  (already canonical, passed through)
		normalise("H")    # → "H"   (unknown, passed through)
		```
	"""

	return NOTE_MAP.get(label, label)


def note_name_to_pc (name: str) -> int:

	"""Validate a note name and return its pitch class (0–11).

	Raises:
		ValueError: If the note name is not recognised.
	"""

	if name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown note name: {name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[name]


def normalize_chord_text (text: typing.Optional[str]) -> str:

	"""Fold a chord symbol written with Unicode music characters into ASCII.

	Chord detectors and pasted chord charts use ``♭``/``♯``, a subscript or
	superscript ``m`` for minor and superscript digits for extensions. These
	are rewritten to ``b``, ``#``, ``m`` and plain digits, and surrounding
	whitespace is removed. Empty input gives an empty string.

	Example:
		```python
		normalize_chord_text("B♭ Minor")  # → "Bb Minor"
		normalize_chord_text("Eₘ⁷")       # → "Em7"
		normalize_chord_text("Fᵐᵃʲ⁷")     # → "Fmaj7"
		```
	"""

	if not text:
		return ""

	return _SYMBOL_PATTERN.sub(lambda match: _SYMBOL_REPLACEMENTS[match.group(0)], str(text)).strip()
