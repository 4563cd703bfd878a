import pytest

import keycenter.notes


def test_flats_respelled_as_sharps () -> None:

	"""Flat spellings on the circle should map to the sharp a semitone below."""

	assert keycenter.notes.normalise("Gb") == "F#"
	assert keycenter.notes.normalise("Db") == "C#"
	assert keycenter.notes.normalise("Ab") == "G#"
	assert keycenter.notes.normalise("Eb") == "D#"
	assert keycenter.notes.normalise("Bb") == "A#"


def test_naturals_and_sharps_map_to_themselves () -> None:

	"""Labels that are already canonical should be unchanged."""

	for label in ["C", "G", "D", "A", "E", "B", "F#", "C#", "F"]:
		assert keycenter.notes.normalise(label) == label


def test_unknown_labels_pass_through () -> None:

	"""Labels outside the circle vocabulary should be returned as given."""

	assert keycenter.notes.normalise("H") == "H"
	assert keycenter.notes.normalise("Cb") == "Cb"
	assert keycenter.notes.normalise("") == ""

	# Canonical sharps not spelled on the circle are outside the map but still canonical.
	assert keycenter.notes.normalise("G#") == "G#"


def test_note_map_targets_are_canonical () -> None:

	"""Every NoteMap value should be one of the twelve sharps-only labels."""

	for label, canonical in keycenter.notes.NOTE_MAP.items():
		assert canonical in keycenter.notes.PITCH_CLASS_NAMES
		assert keycenter.notes.note_name_to_pc(label) == keycenter.notes.note_name_to_pc(canonical)


def test_normalise_is_idempotent () -> None:

	"""Normalising twice should equal normalising once."""

	labels = list(keycenter.notes.NOTE_MAP) + list(keycenter.notes.PITCH_CLASS_NAMES) + ["H", "E#"]

	for label in labels:
		once = keycenter.notes.normalise(label)
		assert keycenter.notes.normalise(once) == once


def test_note_map_is_read_only () -> None:

	"""The NoteMap should reject mutation."""

	with pytest.raises(TypeError):
		keycenter.notes.NOTE_MAP["Gb"] = "G"  # type: ignore[index]


def test_note_name_to_pc () -> None:

	"""Sharp and flat spellings should resolve to the same pitch class."""

	assert keycenter.notes.note_name_to_pc("C") == 0
	assert keycenter.notes.note_name_to_pc("F#") == 6
	assert keycenter.notes.note_name_to_pc("Gb") == 6
	assert keycenter.notes.note_name_to_pc("B") == 11


def test_note_name_to_pc_unknown () -> None:

	"""An unknown note name should raise a ValueError naming it."""

	with pytest.raises(ValueError, match="'H'"):
		keycenter.notes.note_name_to_pc("H")


@pytest.mark.parametrize("text, expected", [
	("B♭ Minor", "Bb Minor"),
	("F♯ Major", "F# Major"),
	("Eₘ⁷", "Em7"),
	("Fᵐᵃʲ⁷", "Fmaj7"),
	("D/F♯", "D/F#"),
	("  C Major  ", "C Major"),
	("", ""),
	(None, ""),
])
def test_normalize_chord_text (text, expected) -> None:

	"""Unicode chord symbols should fold to plain ASCII."""

	assert keycenter.notes.normalize_chord_text(text) == expected
