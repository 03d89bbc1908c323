"""Tests for the Typer command line interface."""

import pytest
from typer.testing import CliRunner

from fintrack.presentation.cli.app import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def fast_bank(monkeypatch):
    monkeypatch.setenv("FINTRACK_BANK_AUTH_LATENCY_SECONDS", "0")
    monkeypatch.setenv("FINTRACK_BANK_FETCH_LATENCY_SECONDS", "0")
    monkeypatch.setenv("FINTRACK_BANK_FAILURE_PROBABILITY", "0")


class TestClassifyCommand:
    def test_first_rule_wins(self, runner):
        result = runner.invoke(
            app,
            ["classify", "Starbucks purchase at Amazon kiosk"],
        )

        assert result.exit_code == 0
        assert "Food & Dining (expense)" in result.output
        assert "Matched: starbucks" in result.output

    def test_merchant_only(self, runner):
        result = runner.invoke(app, ["classify", "", "--merchant", "Shell"])

        assert result.exit_code == 0
        assert "Transportation" in result.output

    def test_fallback_income(self, runner):
        result = runner.invoke(app, ["classify", "Transfer from Bob", "--amount", "50"])

        assert result.exit_code == 0
        assert "Income (income)" in result.output
        assert "fallback" in result.output

    def test_declared_type(self, runner):
        result = runner.invoke(
            app,
            ["classify", "Mystery", "--amount=-10", "--type", "income"],
        )

        assert result.exit_code == 0
        assert "Income (income)" in result.output

    def test_invalid_amount(self, runner):
        result = runner.invoke(app, ["classify", "Coffee", "--amount", "ten"])

        assert result.exit_code == 2
        assert "Invalid amount" in result.output

    @pytest.mark.parametrize("amount", ["nan", "inf"])
    def test_non_finite_amount(self, runner, amount):
        result = runner.invoke(app, ["classify", "Coffee", "--amount", amount])

        assert result.exit_code == 2
        assert "Invalid amount" in result.output
        assert "Traceback" not in result.output


class TestListingCommands:
    def test_banks(self, runner):
        result = runner.invoke(app, ["banks"])

        assert result.exit_code == 0
        assert "wellsfargo" in result.output

    def test_categories(self, runner):
        result = runner.invoke(app, ["categories"])

        assert result.exit_code == 0
        assert "Groceries" in result.output


class TestImportCommand:
    def test_import(self, runner):
        result = runner.invoke(
            app,
            ["import", "chase", "-u", "jane", "-p", "hunter2", "--fast", "--seed", "1"],
        )

        assert result.exit_code == 0
        assert "Imported 4 transaction(s)" in result.output
        assert "hunter2" not in result.output

    def test_unknown_bank(self, runner):
        result = runner.invoke(
            app,
            ["import", "monzo", "-u", "jane", "-p", "hunter2", "--fast"],
        )

        assert result.exit_code == 1
        assert "Bank source 'monzo' is not supported" in result.output

    def test_refused_login(self, runner):
        result = runner.invoke(
            app,
            [
                "import",
                "chase",
                "-u",
                "jane",
                "-p",
                "hunter2",
                "--fast",
                "--failure-probability",
                "1",
                "--seed",
                "1",
            ],
        )

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_prompts_for_credentials(self, runner):
        result = runner.invoke(
            app,
            ["import", "citi", "--fast"],
            input="jane\nhunter2\n",
        )

        assert result.exit_code == 0
        assert "Imported 4 transaction(s)" in result.output
