"""Tests for the typer CLI running without credentials."""

from typer.testing import CliRunner

from career_compass.cli import app

runner = CliRunner()


class TestCli:
    def test_pulse_json_falls_back(self, no_api_key):
        result = runner.invoke(app, ["pulse", "ChatGPT", "--range", "3M", "--json"])
        assert result.exit_code == 0
        assert '"source": "fallback"' in result.output
        assert '"name": "ChatGPT"' in result.output

    def test_pulse_table(self, no_api_key):
        result = runner.invoke(app, ["pulse", "-r", "1y"])
        assert result.exit_code == 0
        assert "offline estimate" in result.output

    def test_invalid_range(self, no_api_key):
        result = runner.invoke(app, ["pulse", "--range", "5Y"])
        assert result.exit_code == 1
        assert "Unknown range" in result.output

    def test_tools_uses_curated_catalog(self, no_api_key):
        result = runner.invoke(app, ["tools"])
        assert result.exit_code == 0
        assert "curated catalog" in result.output

    def test_jobs(self, no_api_key):
        result = runner.invoke(app, ["jobs", "--json"])
        assert result.exit_code == 0
        assert "fallback-0" in result.output

    def test_roadmap_and_skill(self, no_api_key):
        assert runner.invoke(app, ["roadmap", "Rust", "-g", "systems"]).exit_code == 0
        result = runner.invoke(app, ["skill", "SQL", "--json"])
        assert result.exit_code == 0
        assert "Learning Path for SQL" in result.output

    def test_strategy(self, no_api_key):
        result = runner.invoke(app, ["strategy", "Acme CRM", "-d", "Sales tool"])
        assert result.exit_code == 0
        assert "Acme CRM" in result.output

    def test_blank_arguments_print_error(self, no_api_key):
        for args, field in (
            (["strategy", "   "], "product_name"),
            (["roadmap", " "], "tech_name"),
            (["skill", "  "], "skill_name"),
        ):
            result = runner.invoke(app, args)
            assert result.exit_code == 1
            assert isinstance(result.exception, SystemExit)
            assert f"{field} must not be empty" in result.output
