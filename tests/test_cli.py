"""End-to-end tests for the deptree command line."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from deptree import CYCLE_LEGEND
from deptree._cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from an empty directory without a pyproject.toml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_relations(directory: Path, *lines: str, name: str = "graph.txt") -> Path:
    path = directory / name
    path.write_text("".join(f"{line}\n" for line in lines))
    return path


class TestRender:
    def test_renders_chain(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B", "B->C", name="chain.txt")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["A", "\\_B", "  \\_C", CYCLE_LEGEND]
        assert "Using" in result.stderr

    def test_default_input_file(self, tmp_path: Path) -> None:
        write_relations(tmp_path, "A->B", "A->C", "B->C")

        result = runner.invoke(app, ["render"])

        assert result.exit_code == 0, result.output
        assert "No file provided, using default graph.txt as input" in result.stderr
        assert result.stdout.splitlines() == ["A", "|_B", "| \\_C", "\\_C", CYCLE_LEGEND]

    def test_too_many_arguments_is_usage_error(self, tmp_path: Path) -> None:
        first = write_relations(tmp_path, "A->B", name="one.txt")
        second = write_relations(tmp_path, "A->B", name="two.txt")

        result = runner.invoke(app, ["render", str(first), str(second)])

        assert result.exit_code == 2
        assert result.stdout == ""

    def test_rootless_cycle_prints_only_legend(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B", "B->A")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [CYCLE_LEGEND]

    def test_cycle_mode_abort(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "R->A", "A->A", "A->B")

        skip = runner.invoke(app, ["render", str(path)])
        abort = runner.invoke(app, ["render", str(path), "--cycle-mode", "abort"])

        assert skip.stdout.splitlines() == ["R", "\\_A", "  |_A*", "  \\_B", CYCLE_LEGEND]
        assert abort.stdout.splitlines() == ["R", "\\_A", "  |_A*", CYCLE_LEGEND]

    def test_sort_roots(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "X->Y", "A->B")

        result = runner.invoke(app, ["render", str(path), "--sort-roots"])

        assert result.stdout.splitlines() == ["A", "\\_B", "X", "\\_Y", CYCLE_LEGEND]

    def test_explicit_roots(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B", "B->A")

        result = runner.invoke(app, ["render", str(path), "--root", "A"])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["A", "\\_B", "  \\_A*", CYCLE_LEGEND]

    def test_unknown_root(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B")

        result = runner.invoke(app, ["render", str(path), "--root", "Q"])

        assert result.exit_code == 1
        assert "Entity not found" in result.stderr
        assert result.stdout == ""

    def test_json_format(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B", "B->A", "R->A")

        result = runner.invoke(app, ["render", str(path), "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["legend"] == CYCLE_LEGEND
        [tree] = data["trees"]
        assert tree["name"] == "R"
        cyclic = tree["children"][0]["children"][0]["children"][0]
        assert cyclic == {"name": "A", "circular": True, "children": []}

    def test_rich_format(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "R->A", "A->R2", "R2->A")

        result = runner.invoke(app, ["render", str(path), "--format", "rich"])

        assert result.exit_code == 0, result.output
        assert "R2" in result.stdout
        assert "A*" in result.stdout
        assert CYCLE_LEGEND in result.stdout


class TestRenderErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Cannot read file" in result.stderr
        assert result.stdout == ""

    def test_missing_default_file(self) -> None:
        result = runner.invoke(app, ["render"])

        assert result.exit_code == 1
        assert "Cannot read file graph.txt" in result.stderr

    def test_empty_file(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path)

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "contains no relations" in result.stderr
        assert result.stdout == ""

    def test_malformed_line(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B", "A-B")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "Line 2 is not formatted correctly" in result.stderr
        assert result.stdout == ""

    def test_strict_rejects_long_names(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "AB->C")

        lenient = runner.invoke(app, ["render", str(path)])
        strict = runner.invoke(app, ["render", str(path), "--strict"])

        assert lenient.exit_code == 0
        assert lenient.stdout.splitlines() == ["AB", "\\_C", CYCLE_LEGEND]
        assert strict.exit_code == 1
        assert "not formatted correctly" in strict.stderr
        assert strict.stdout == ""

    def test_interior_blank_line(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B", "", "B->C")

        result = runner.invoke(app, ["render", str(path)])

        assert result.exit_code == 1
        assert "Line 2 is not formatted correctly" in result.stderr
        assert result.stdout == ""

    def test_no_traceback_on_error(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A-B")

        result = runner.invoke(app, ["render", str(path)])

        assert "Traceback" not in result.output


class TestRenderConfig:
    def test_uses_configured_input_and_options(self, tmp_path: Path) -> None:
        (tmp_path / "deps").mkdir()
        write_relations(tmp_path / "deps", "R->A", "A->A", "A->B", "Q->R")
        (tmp_path / "pyproject.toml").write_text(
            '[tool.deptree]\ninput = "deps/graph.txt"\ncycle_mode = "abort"\n',
        )

        result = runner.invoke(app, ["render"])

        assert result.exit_code == 0, result.output
        assert "from pyproject.toml" in result.stderr
        assert result.stdout.splitlines() == ["Q", "\\_R", "  \\_A", "    |_A*", CYCLE_LEGEND]

    def test_command_line_overrides_config(self, tmp_path: Path) -> None:
        write_relations(tmp_path, "R->A", "A->A", "A->B")
        (tmp_path / "pyproject.toml").write_text('[tool.deptree]\ncycle_mode = "abort"\n')

        result = runner.invoke(app, ["render", "--cycle-mode", "skip"])

        assert result.stdout.splitlines() == ["R", "\\_A", "  |_A*", "  \\_B", CYCLE_LEGEND]

    def test_strict_from_config(self, tmp_path: Path) -> None:
        write_relations(tmp_path, "AB->C")
        (tmp_path / "pyproject.toml").write_text("[tool.deptree]\nstrict = true\n")

        result = runner.invoke(app, ["render"])

        assert result.exit_code == 1

    def test_no_strict_overrides_config(self, tmp_path: Path) -> None:
        write_relations(tmp_path, "AB->C")
        (tmp_path / "pyproject.toml").write_text("[tool.deptree]\nstrict = true\n")

        result = runner.invoke(app, ["render", "--no-strict"])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == ["AB", "\\_C", CYCLE_LEGEND]

    def test_no_sort_roots_overrides_config(self, tmp_path: Path) -> None:
        write_relations(tmp_path, "X->Y", "A->B")
        (tmp_path / "pyproject.toml").write_text("[tool.deptree]\nsort_roots = true\n")

        configured = runner.invoke(app, ["render"])
        overridden = runner.invoke(app, ["render", "--no-sort-roots"])

        assert configured.stdout.splitlines() == ["A", "\\_B", "X", "\\_Y", CYCLE_LEGEND]
        assert overridden.stdout.splitlines() == ["X", "\\_Y", "A", "\\_B", CYCLE_LEGEND]

    def test_invalid_config(self, tmp_path: Path) -> None:
        write_relations(tmp_path, "A->B")
        (tmp_path / "pyproject.toml").write_text('[tool.deptree]\ncycle_mode = "resolve"\n')

        result = runner.invoke(app, ["render"])

        assert result.exit_code == 1
        assert "cycle_mode" in result.stderr


class TestCheck:
    def test_valid_graph(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "A->B", "B->C")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 0, result.output
        assert "Relations are valid" in result.stderr
        assert "Entities" in result.stderr
        assert result.stdout == ""

    def test_reports_rootless_cycles(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "R->X", "A->B", "B->A")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 0, result.output
        assert "cycles without a root" in result.stderr

    def test_malformed_input(self, tmp_path: Path) -> None:
        path = write_relations(tmp_path, "nope")

        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "not formatted correctly" in result.stderr
