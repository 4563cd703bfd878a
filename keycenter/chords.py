"""Detected chord input and parsing.

A chord detector reports chords as a name such as ``"C Major"``,
``"D# Minor"`` or ``"G Dominant 7"``: the root first, then the quality in
words. Only the root and whether the quality is minor matter for locating a
key center.
"""

import collections.abc
import dataclasses
import typing

import keycenter.notes


MINOR_QUALITY = "minor"


@dataclasses.dataclass(frozen=True)
class DetectedChord:

	"""
	A chord as reported by a chord detector.

	Only ``name`` is read when locating a key; the remaining fields are carried
	for hosts that pass the detector's result straight through.
	"""

	name: str
	root: typing.Optional[str] = None
	quality: typing.Optional[str] = None
	inversion: typing.Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ParsedChord:

	"""
	The parts of a chord name that locate a key center.

	Attributes:
		root: First token of the name, e.g. ``"F#"``.
		quality: Remaining tokens, lower-cased and space-joined (may be empty).
		is_minor: ``True`` if the quality contains ``"minor"``.
	"""

	root: str
	quality: str
	is_minor: bool


def _chord_name (chord: typing.Any) -> typing.Any:

	if isinstance(chord, collections.abc.Mapping):
		return chord.get("name")

	return getattr(chord, "name", None)


def parse_chord (chord: typing.Any) -> typing.Optional[ParsedChord]:

	"""Split a detected chord into root and quality.

	Accepts a mapping with a ``"name"`` key or any object with a ``name``
	attribute (such as :class:`DetectedChord`). The name is folded to ASCII
	with :func:`keycenter.notes.normalize_chord_text`, so ``"B♭ Minor"`` reads
	as ``"Bb Minor"``.

	Any occurrence of ``"minor"`` in the quality selects the minor side, so
	``"minor major 7"`` is minor and ``"diminished"`` is not.

	Returns:
		A :class:`ParsedChord`, or ``None`` when there is no chord, the name is
		not a string, or the name is blank.

	Example:
		```python
		parse_chord({"name": "A Minor 7"})
		# → ParsedChord(root="A", quality="minor 7", is_minor=True)

		parse_chord({})   # → None
		```
	"""

	if chord is None:
		return None

	name = _chord_name(chord)

	if not isinstance(name, str):
		return None

	tokens = keycenter.notes.normalize_chord_text(name).split()

	if not tokens:
		return None

	quality = " ".join(tokens[1:]).lower()

	return ParsedChord(root=tokens[0], quality=quality, is_minor=MINOR_QUALITY in quality)
