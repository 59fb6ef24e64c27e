"""
Tests for the steamid command-line interface.
"""

import json
import logging

import pytest
from steamidlab import __version__
from steamidlab.cli import build_parser, main


def run(capsys, *argv):
    """Run the CLI and return (exit code, stdout, stderr)."""
    with pytest.raises(SystemExit) as excinfo:
        main(list(argv))
    out, err = capsys.readouterr()
    return excinfo.value.code, out, err


class TestListCommand:
    """Test listing enumerations."""

    def test_list_universes(self, capsys):
        code, out, _ = run(capsys, "list", "universe")

        assert code == 0
        assert out.splitlines()[0] == "Universe::INVALID[id=0]"
        assert len(out.splitlines()) == 6

    def test_list_accounts_json(self, capsys):
        code, out, _ = run(capsys, "list", "account", "--json")

        data = json.loads(out)
        assert code == 0
        assert data[1] == {"name": "INDIVIDUAL", "id": 1, "index": 1, "char": "U"}
        assert data[9]["char"] is None


class TestLookupCommand:
    """Test single-member lookups."""

    def test_lookup_by_char(self, capsys):
        code, out, _ = run(capsys, "lookup", "account", "--char", "g")

        assert code == 0
        assert out.strip() == "AccountType::CLAN[id=7, ch='g']"

    def test_lookup_by_id_json(self, capsys):
        code, out, _ = run(capsys, "lookup", "universe", "--id", "4", "--json")

        assert code == 0
        assert json.loads(out) == {"name": "DEV", "id": 4, "index": 4}

    def test_lookup_by_index(self, capsys):
        code, out, _ = run(capsys, "lookup", "universe", "--index", "5")

        assert code == 0
        assert out.strip() == "Universe::RC[id=5]"

    def test_lookup_miss(self, capsys):
        code, out, err = run(capsys, "lookup", "universe", "--id", "99")

        assert code == 1
        assert out == ""
        assert "no Universe with id 99" in err

    def test_char_on_universe_is_rejected(self, capsys):
        code, _, err = run(capsys, "lookup", "universe", "--char", "U")

        assert code == 1
        assert "has no letter codes" in err

    def test_key_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["lookup", "account"])


class TestUrlsCommand:
    """Test printing URL prefixes."""

    def test_urls_json(self, capsys):
        code, out, _ = run(capsys, "urls", "--json")

        assert code == 0
        assert json.loads(out)["invite"] == "https://s.team/p/"

    def test_urls_text(self, capsys):
        code, out, _ = run(capsys, "urls")

        assert code == 0
        assert "profile: https://steamcommunity.com/profiles/" in out


class TestGlobalOptions:
    """Test options shared by every command."""

    def test_version(self, capsys):
        code, out, _ = run(capsys, "--version")

        assert code == 0
        assert out.strip() == f"steamidlab {__version__}"

    def test_verbose_flag_parses(self):
        assert build_parser().parse_args(["-v", "urls"]).verbose is True
        assert build_parser().parse_args(["urls"]).verbose is False

    def test_verbose_lookup_miss_logs_debug(self, capsys, caplog):
        caplog.set_level(logging.DEBUG, logger="steamidlab")

        code, _, _ = run(capsys, "-v", "lookup", "account", "--char", "?")

        assert code == 1
        assert "No AccountType for char '?'" in caplog.text
