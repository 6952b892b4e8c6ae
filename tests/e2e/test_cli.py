# ABOUTME: End-to-end tests for the leafery CLI.
# ABOUTME: Tests CLI commands via Click's CliRunner against a real config file.

from pathlib import Path

from click.testing import CliRunner

from leafery.cli import cli


def _run(config_file: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(cli, ["--config", str(config_file), *args])


class TestCliSeries:
    """E2e tests for `leafery series`."""

    def test_lists_configured_series(self, config_file: Path) -> None:
        result = _run(config_file, "series")
        assert result.exit_code == 0
        assert "journal" in result.output
        assert "comic" in result.output
        assert "2 series" in result.output

    def test_no_series(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("timezone: UTC\n", encoding="utf-8")
        result = _run(config_file, "series")
        assert result.exit_code == 0
        assert "No series configured" in result.output

    def test_missing_config_fails(self, tmp_path: Path) -> None:
        """A missing config file is reported, not raised."""
        result = _run(tmp_path / "nope.yaml", "series")
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_config_fails(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("colour: blue\n", encoding="utf-8")
        result = _run(config_file, "series")
        assert result.exit_code == 1
        assert "Invalid" in result.output


class TestCliName:
    """E2e tests for `leafery name`."""

    def test_journal_name(self, config_file: Path) -> None:
        """Page 7 titled draft resolves to J007.draft."""
        result = _run(config_file, "name", "journal", "7", "-p", "title=draft")
        assert result.exit_code == 0
        assert result.output == "J007.draft\n"

    def test_comic_name_with_tag(self, config_file: Path) -> None:
        result = _run(config_file, "name", "comic", "5", "12", "28", "-t", "fox")
        assert result.exit_code == 0
        assert result.output.strip() == "C005-12AB_fox"

    def test_glob_policy_is_default(self, config_file: Path) -> None:
        result = _run(config_file, "name", "journal", "7")
        assert result.exit_code == 0
        assert result.output.strip() == "J007.*"

    def test_unbound_axis(self, config_file: Path) -> None:
        """With no tags the comic name falls back to the mixed fragment."""
        result = _run(config_file, "name", "comic", "5", "_", "_")
        assert result.exit_code == 0
        assert result.output.strip() == "C005-**_misc"

    def test_limit(self, config_file: Path) -> None:
        result = _run(
            config_file, "name", "comic", "5", "12", "3", "-t", "fox", "--limit", "issue"
        )
        assert result.exit_code == 0
        assert result.output.strip() == "C005-**_fox"

    def test_full_path_with_extension(self, config_file: Path, tmp_path: Path) -> None:
        result = _run(config_file, "name", "journal", "7", "-p", "title=draft", "--ext", "jpg")
        assert result.exit_code == 0
        assert result.output.strip() == str(tmp_path / "archive" / "Journal" / "J007.draft.jpg")

    def test_glob_pattern(self, config_file: Path, tmp_path: Path) -> None:
        result = _run(config_file, "name", "comic", "5", "_", "_", "--glob")
        assert result.exit_code == 0
        expected = f"{(tmp_path / 'archive' / 'Comics').as_posix()}/C005-**_*.*"
        assert result.output.strip() == expected

    def test_glob_rejects_other_policy(self, config_file: Path) -> None:
        result = _run(config_file, "name", "comic", "5", "_", "_", "--glob", "--policy", "fail")
        assert result.exit_code == 2
        assert "--glob cannot be combined with --policy fail" in result.output

    def test_fail_policy_reports_missing_fragment(self, config_file: Path) -> None:
        result = _run(config_file, "name", "journal", "7", "--policy", "fail")
        assert result.exit_code == 1
        assert "Cannot resolve property 'title'" in result.output

    def test_absent_policy_has_no_name(self, config_file: Path) -> None:
        result = _run(config_file, "name", "journal", "7", "--policy", "absent")
        assert result.exit_code == 1
        assert "no complete name" in result.output

    def test_unknown_series(self, config_file: Path) -> None:
        result = _run(config_file, "name", "almanac", "1")
        assert result.exit_code == 1
        assert "Series 'almanac' not found" in result.output

    def test_out_of_range_number(self, config_file: Path) -> None:
        result = _run(config_file, "name", "journal", "1000", "-p", "title=x")
        assert result.exit_code == 1
        assert "outside 1..999" in result.output

    def test_wrong_number_count(self, config_file: Path) -> None:
        result = _run(config_file, "name", "comic", "5")
        assert result.exit_code == 1
        assert "expects 3 number(s), got 1" in result.output

    def test_unknown_limit_axis(self, config_file: Path) -> None:
        result = _run(config_file, "name", "journal", "7", "--limit", "volume")
        assert result.exit_code == 1
        assert "no axis 'volume'" in result.output

    def test_non_numeric_number_is_usage_error(self, config_file: Path) -> None:
        result = _run(config_file, "name", "journal", "seven")
        assert result.exit_code == 2
        assert "not a page number" in result.output

    def test_malformed_property_is_usage_error(self, config_file: Path) -> None:
        result = _run(config_file, "name", "journal", "7", "-p", "title")
        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output


class TestCliTags:
    """E2e tests for `leafery tags`."""

    def test_shows_manifestation(self, config_file: Path) -> None:
        result = _run(config_file, "tags", "oak", "ash")
        assert result.exit_code == 0
        assert "tree" in result.output
        assert "Flora, Oak, Ash" in result.output
        assert "flora oaktree Ash" in result.output
        assert "mixed-flora" in result.output

    def test_mixed_tags(self, config_file: Path) -> None:
        result = _run(config_file, "tags", "oak", "fox")
        assert result.exit_code == 0
        assert "mixed" in result.output
        assert "misc" in result.output

    def test_unknown_tag_warned(self, config_file: Path) -> None:
        result = _run(config_file, "tags", "oak", "mystery")
        assert result.exit_code == 0
        assert "Unknown tag: mystery" in result.output

    def test_only_unknown_tags_fail(self, config_file: Path) -> None:
        result = _run(config_file, "tags", "mystery")
        assert result.exit_code == 1
        assert "No manifestation configuration" in result.output


class TestCliArgfile:
    """E2e tests for `leafery argfile`."""

    def test_queues_record(self, config_file: Path, scan: Path, tmp_path: Path) -> None:
        """Queue a journal page and check the argfile written to disk."""
        output = tmp_path / "queue.args"
        result = _run(
            config_file,
            "argfile",
            "journal",
            "7",
            "-s",
            str(scan),
            "-o",
            str(output),
            "-p",
            "title=draft",
            "-t",
            "oak",
            "-t",
            "ash",
            "--comment",
            "first pass",
            "--overwrite",
            "original",
        )
        assert result.exit_code == 0
        assert "Queued:" in result.output
        assert "J007.draft.jpg" in result.output
        assert "flora oaktree Ash" in result.output

        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "-XMP-dc:Title=draft"
        assert "-XMP-dc:Description=first pass" in lines
        assert "-XMP-dc:Subject+=Flora" in lines
        assert lines[-3:] == [
            "-overwrite_original",
            str(tmp_path / "archive" / "Journal" / "J007.draft.jpg"),
            "-execute",
        ]

    def test_repeated_runs_append(self, config_file: Path, scan: Path, tmp_path: Path) -> None:
        output = tmp_path / "queue.args"
        for number in ("1", "2"):
            result = _run(
                config_file,
                "argfile",
                "comic",
                "1",
                "1",
                number,
                "-s",
                str(scan),
                "-o",
                str(output),
                "-t",
                "fox",
            )
            assert result.exit_code == 0

        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines.count("-execute") == 2
        assert str(tmp_path / "archive" / "Comics" / "C001-01B_fox.jpg") in lines

    def test_incomplete_name_fails_by_default(
        self, config_file: Path, scan: Path, tmp_path: Path
    ) -> None:
        """Without a title the journal page cannot be filed."""
        output = tmp_path / "queue.args"
        result = _run(
            config_file, "argfile", "journal", "7", "-s", str(scan), "-o", str(output)
        )
        assert result.exit_code == 1
        assert "Cannot resolve property 'title'" in result.output
        assert not output.exists()

    def test_absent_policy_skips(self, config_file: Path, scan: Path, tmp_path: Path) -> None:
        output = tmp_path / "queue.args"
        result = _run(
            config_file,
            "argfile",
            "journal",
            "7",
            "-s",
            str(scan),
            "-o",
            str(output),
            "--policy",
            "absent",
        )
        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert not output.exists()

    def test_line_break_in_comment_fails(
        self, config_file: Path, scan: Path, tmp_path: Path
    ) -> None:
        output = tmp_path / "queue.args"
        result = _run(
            config_file,
            "argfile",
            "journal",
            "7",
            "-s",
            str(scan),
            "-o",
            str(output),
            "-p",
            "title=draft",
            "--comment",
            "two\nlines",
        )
        assert result.exit_code == 1
        assert "line break" in result.output
        assert not output.exists()

    def test_missing_source_is_usage_error(self, config_file: Path, tmp_path: Path) -> None:
        result = _run(
            config_file, "argfile", "journal", "7", "-s", str(tmp_path / "missing.jpg")
        )
        assert result.exit_code == 2
