"""Editor-neutral keymap format: chords, keymap files, merging, diffs and import/export services."""

__version__ = "0.1.0"