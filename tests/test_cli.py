"""Tests for the calpager CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from calpager.cli import app
from calpager.config import get_config_path, save_config
from calpager.domain.models import CalendarDate
from calpager.store.session import load_session

runner = CliRunner()


@pytest.fixture
def state_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and session files at a temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path / "data" / "calpager" / "state.toml"


class TestInit:
    """Tests for the init command."""

    def test_creates_config_and_session(self, state_path: Path, tmp_path: Path) -> None:
        """Should create both files."""
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_path / "config" / "calpager" / "config.toml").exists()
        assert state_path.exists()

    def test_oversized_span_fails_cleanly(self, state_path: Path) -> None:
        """Should exit with a message when span_years reaches before year 1."""
        save_config({"span_years": 2100}, get_config_path())
        result = runner.invoke(app, ["prev"])

        assert result.exit_code == 1
        assert "span_years must be at most" in result.output
        assert not isinstance(result.exception, ValueError)
        assert not state_path.exists()

    def test_does_not_overwrite_without_force(self, state_path: Path) -> None:
        """Should keep an existing session."""
        runner.invoke(app, ["init"])
        runner.invoke(app, ["select", "2020-01-01"])
        result = runner.invoke(app, ["init"])
        assert "already exists" in result.output
        assert load_session(state_path)[0].selected == CalendarDate(2020, 1, 1)


class TestRangeAndSelection:
    """Tests for range and select commands."""

    def test_select_is_clamped_and_reported(self, state_path: Path) -> None:
        """Should clamp a selection outside the range and say so."""
        runner.invoke(app, ["range", "--min", "2020-03-01", "--max", "2020-04-30"])
        result = runner.invoke(app, ["select", "2020-09-09"])

        assert result.exit_code == 0
        assert "clamped to 2020-04-30" in result.output
        assert "April 2020" in result.output
        assert load_session(state_path)[0].selected == CalendarDate(2020, 4, 30)

    def test_shrinking_range_rehomes_selection(self, state_path: Path) -> None:
        """Should report a selection changed by a range change."""
        runner.invoke(app, ["range", "--min", "2020-01-01", "--max", "2020-12-31"])
        runner.invoke(app, ["select", "2020-06-15"])
        result = runner.invoke(app, ["range", "--max", "2020-04-30"])

        assert result.exit_code == 0
        assert "Selection is now 2020-04-30" in result.output
        state, current = load_session(state_path)
        assert state.minimum == CalendarDate(2020, 1, 1)
        assert current == CalendarDate(2020, 4, 1)

    def test_inverted_range_fails(self, state_path: Path) -> None:
        """Should exit with an error and keep the saved range."""
        runner.invoke(app, ["range", "--min", "2020-01-01", "--max", "2020-12-31"])
        result = runner.invoke(app, ["range", "--min", "2021-01-01"])

        assert result.exit_code == 1
        assert "Invalid range" in result.output
        assert load_session(state_path)[0].minimum == CalendarDate(2020, 1, 1)

    def test_clear_bound(self, state_path: Path) -> None:
        """Should remove a bound on request."""
        runner.invoke(app, ["range", "--min", "2020-01-01", "--max", "2020-12-31"])
        runner.invoke(app, ["range", "--clear-max"])
        state, _ = load_session(state_path)
        assert state.minimum == CalendarDate(2020, 1, 1)
        assert state.maximum is None

    def test_bad_date_fails(self, state_path: Path) -> None:
        """Should reject unparseable dates."""
        result = runner.invoke(app, ["select", "2020-02-30"])
        assert result.exit_code == 1
        assert "Could not parse date" in result.output

    def test_select_requires_date_or_clear(self, state_path: Path) -> None:
        """Should exit with an error when given nothing to do."""
        result = runner.invoke(app, ["select"])
        assert result.exit_code == 1

    def test_clear_selection(self, state_path: Path) -> None:
        """Should clear the selection."""
        runner.invoke(app, ["select", "2020-01-01"])
        result = runner.invoke(app, ["select", "--clear"])
        assert "Selection cleared" in result.output
        assert load_session(state_path)[0].selected is None


class TestNavigation:
    """Tests for page navigation commands."""

    @pytest.fixture(autouse=True)
    def two_month_range(self, state_path: Path) -> None:
        runner.invoke(app, ["range", "--min", "2020-03-01", "--max", "2020-04-30"])
        runner.invoke(app, ["goto", "2020-04"])

    def test_prev_stops_at_first_month(self, state_path: Path) -> None:
        """Should page back then refuse to go further."""
        result = runner.invoke(app, ["prev"])
        assert "March 2020" in result.output

        result = runner.invoke(app, ["prev"])
        assert "Already at the first month" in result.output
        assert load_session(state_path)[1] == CalendarDate(2020, 3, 1)

    def test_next_stops_at_last_month(self, state_path: Path) -> None:
        """Should refuse to page past the last month."""
        result = runner.invoke(app, ["next"])
        assert "Already at the last month" in result.output
        assert load_session(state_path)[1] == CalendarDate(2020, 4, 1)

    def test_goto_outside_range(self, state_path: Path) -> None:
        """Should land on the nearest page and say so."""
        result = runner.invoke(app, ["goto", "2019-01"])
        assert "outside the range" in result.output
        assert load_session(state_path)[1] == CalendarDate(2020, 3, 1)

    def test_months_lists_pages(self, state_path: Path) -> None:
        """Should list every page in a short range."""
        result = runner.invoke(app, ["months"])
        assert result.exit_code == 0
        assert "2 pages" in result.output
        assert "March 2020" in result.output
        assert "April 2020" in result.output

    def test_show(self, state_path: Path) -> None:
        """Should print the bounds."""
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 0
        assert "2020-03-01" in result.output
        assert "2020-04-30" in result.output
