"""Tests for URL option parsing."""

from forgeurl.core.options import UrlOptions


def test_defaults():
    options = UrlOptions.from_kwargs()
    assert options == UrlOptions(only_path=False, raw=False, ref=None, size=None)


def test_known_options_are_read():
    options = UrlOptions.from_kwargs(only_path=True, raw=1, ref="main", size="small")
    assert options == UrlOptions(only_path=True, raw=True, ref="main", size="small")


def test_unknown_options_are_ignored():
    options = UrlOptions.from_kwargs(anchor="note_1", host="example.com")
    assert options == UrlOptions()


def test_empty_ref_counts_as_missing():
    assert UrlOptions.from_kwargs(ref="", size="").ref is None
