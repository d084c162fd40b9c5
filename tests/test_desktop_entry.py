#!/usr/bin/env python3
"""
Tests for desktop entry parsing.
"""

from pathlib import Path

import pytest

from conftest import app_entry, write_entry
from open_with.desktop_entry import localized_value, locales_from_environ, parse_entry_file


def test_parse_basic_entry(apps_dir: Path):
	path = write_entry(
		apps_dir,
		"editor.desktop",
		app_entry("Editor", "editor %F", "text/plain;text/x-python;", Terminal="true"),
	)
	info = parse_entry_file(path)
	assert info is not None
	assert info.name == "Editor"
	assert info.command_template == "editor %F"
	assert info.declared_mimetypes == "text/plain;text/x-python;"
	assert info.run_in_terminal is True
	assert info.source_path == str(path)


def test_comments_blank_lines_and_spacing(apps_dir: Path):
	body = (
		"# leading comment\n"
		"\n"
		"[Desktop Entry]\n"
		"  Type = Application  \n"
		"# Name=Commented\n"
		"Name = Spaced App\n"
		"Exec =  spaced --open  \n"
	)
	info = parse_entry_file(write_entry(apps_dir, "spaced.desktop", body))
	assert info is not None
	assert info.name == "Spaced App"
	assert info.command_template == "spaced --open"
	assert info.run_in_terminal is False


def test_hidden_entry_rejected(apps_dir: Path):
	path = write_entry(apps_dir, "h.desktop", app_entry("H", "h %f", "text/plain", Hidden="true"))
	assert parse_entry_file(path) is None


@pytest.mark.parametrize(
	"body",
	[
		"[Desktop Entry]\nType=Application\nName=NoExec\n",
		"[Desktop Entry]\nType=Application\nName=Blank\nExec=   \n",
		"[Desktop Entry]\nType=Link\nName=Link\nExec=x\n",
		"[Desktop Entry]\nName=NoType\nExec=x\n",
		"[Desktop Entry]\nType=Application\nName=Bad\nExec=app \"unterminated\n",
	],
)
def test_unusable_entries_rejected(apps_dir: Path, body: str):
	assert parse_entry_file(write_entry(apps_dir, "bad.desktop", body)) is None


def test_keys_outside_main_section_ignored(apps_dir: Path):
	body = (
		"[Desktop Entry]\n"
		"Type=Application\n"
		"Name=Main\n"
		"Exec=main %u\n"
		"[Desktop Action new-window]\n"
		"Name=New Window\n"
		"Exec=main --new-window\n"
		"Hidden=true\n"
	)
	info = parse_entry_file(write_entry(apps_dir, "main.desktop", body))
	assert info is not None
	assert info.name == "Main"
	assert info.command_template == "main %u"


def test_keys_before_main_section_ignored(apps_dir: Path):
	body = "Type=Application\nExec=early\n[Desktop Entry]\nName=Late\n"
	assert parse_entry_file(write_entry(apps_dir, "late.desktop", body)) is None


def test_missing_entry_rejected(apps_dir: Path):
	assert parse_entry_file(apps_dir / "missing.desktop") is None


def test_latin1_bytes_do_not_reject_entry(apps_dir: Path):
	path = apps_dir / "viewer.desktop"
	path.write_bytes(
		b"[Desktop Entry]\nType=Application\nName=Viewer\n"
		b"Comment[de]=B\xfccher\nExec=viewer %f\nMimeType=image/png;\n"
	)
	info = parse_entry_file(path)
	assert info is not None
	assert info.name == "Viewer"
	assert info.command_template == "viewer %f"
	assert info.declared_mimetypes == "image/png;"


def test_localized_name_preferred(apps_dir: Path):
	body = app_entry("Files", "files %U") + "Name[de_DE]=Dateien\nName[fr]=Fichiers\n"
	path = write_entry(apps_dir, "files.desktop", body)
	assert parse_entry_file(path, ["de_DE"]).name == "Dateien"
	assert parse_entry_file(path, ["fr_CA"]).name == "Fichiers"
	assert parse_entry_file(path, ["es_ES", "fr_FR"]).name == "Fichiers"
	assert parse_entry_file(path, ["it_IT"]).name == "Files"
	assert parse_entry_file(path).name == "Files"


def test_generic_name_and_filename_fallbacks(apps_dir: Path):
	generic = "[Desktop Entry]\nType=Application\nExec=g\nGenericName=Viewer\nGenericName[pl]=Przegladarka\n"
	path = write_entry(apps_dir, "generic.desktop", generic)
	assert parse_entry_file(path).name == "Viewer"
	assert parse_entry_file(path, ["pl_PL"]).name == "Przegladarka"
	bare = write_entry(apps_dir, "bare.desktop", "[Desktop Entry]\nType=Application\nExec=b\n")
	assert parse_entry_file(bare).name == "bare.desktop"


def test_plain_name_beats_localized_generic_name(apps_dir: Path):
	body = app_entry("Viewer", "v") + "GenericName[pl]=Przegladarka\n"
	path = write_entry(apps_dir, "v.desktop", body)
	assert parse_entry_file(path, ["pl_PL"]).name == "Viewer"


def test_locales_from_environ():
	environ = {"LC_ALL": "", "LC_MESSAGES": "pt_BR.UTF-8", "LANG": "en_US.UTF-8"}
	assert locales_from_environ(environ) == ["pt_BR", "en_US"]
	assert locales_from_environ({"LANG": "C"}) == []
	assert locales_from_environ({}) == []


def test_localized_value_lookup_order():
	values = {"Name": "Plain", "Name[sr]": "Lang", "Name[sr_RS@latin]": "Full"}
	assert localized_value(values, "Name", ["sr_RS@latin"]) == "Full"
	assert localized_value(values, "Name", ["sr_ME"]) == "Lang"
	assert localized_value(values, "Comment", ["sr_ME"]) == ""
