"""Tests for the command-line entry point."""

from __future__ import annotations

import main


class TestCli:
    def test_single_amount(self, capsys):
        assert main.main(["1234.56"]) == 0
        out = capsys.readouterr().out
        assert out.strip() == "one thousand two hundred thirty-four dollars and fifty-six cents"

    def test_negative_amount_is_positional(self, capsys):
        assert main.main(["-5.50", "--locale", "tr-TR"]) == 0
        assert capsys.readouterr().out.strip() == "eksi beş lira elli kuruş"

    def test_no_currency(self, capsys):
        assert main.main(["42", "--no-currency"]) == 0
        assert capsys.readouterr().out.strip() == "forty-two point zero"

    def test_list(self, capsys):
        assert main.main(["--list"]) == 0
        lines = capsys.readouterr().out.split()
        assert {"en-GB", "en-US", "tr-TR"} <= set(lines)

    def test_demo_table(self, capsys):
        assert main.main([]) == 0
        out = capsys.readouterr().out
        assert "tr-TR" in out
        assert "minus five dollars and fifty cents" in out

    def test_unknown_locale_exits_1(self, capsys):
        assert main.main(["1", "--locale", "qq-QQ"]) == 1
        assert "LOCALE_NOT_FOUND" in capsys.readouterr().err

    def test_out_of_range_exits_1(self, capsys):
        assert main.main([str(10**18)]) == 1
        assert "MAGNITUDE_OUT_OF_RANGE" in capsys.readouterr().err
