"""End-to-end builds of small sites on disk."""
from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

import pytest

from pagesmith.core.build import SiteBuilder
from pagesmith.core.config import BuildConfig
from pagesmith.core.exceptions import BuildError

from helpers.site import write_site

EXPECTED_INDEX = (
    "<html>"
    "<header><h1>Home</h1><nav>nav</nav></header>"
    "<main>Welcome</main>"
    "<footer></footer>"
    "</html>"
)


def _build(root: Path):
    return SiteBuilder(BuildConfig.load(root)).build()


class TestSiteBuild:
    def test_renders_pages_and_copies_files(self, site_project: Path) -> None:
        report = _build(site_project)
        dist = site_project / "dist"

        assert (dist / "index.html").read_text(encoding="utf-8") == EXPECTED_INDEX
        assert (dist / "about.html").read_text(encoding="utf-8") == (
            "<html><header><h1>About</h1><nav>nav</nav></header><p>About us</p></html>"
        )
        assert (dist / "robots.txt").read_text(encoding="utf-8") == "User-agent: *\n"
        assert report.page_count == 2
        assert report.copied_files == [dist.resolve() / "robots.txt"]
        assert not report.has_errors

    def test_page_reports_carry_output_paths(self, site_project: Path) -> None:
        report = _build(site_project)

        by_name = {r.page_name: r for r in report.pages}
        assert set(by_name) == {"about.html", "index.html"}
        index = by_name["index.html"]
        assert index.output_path == site_project.resolve() / "dist" / "index.html"
        assert index.includes_resolved == {"header.html", "nav.html", "footer.html"}
        assert index.passes == 3

    def test_subdirectories_of_pages_are_skipped(self, site_project: Path) -> None:
        report = _build(site_project)

        assert "drafts" in report.skipped
        assert not (site_project / "dist" / "drafts").exists()

    def test_assets_are_copied_and_missing_folders_skipped(self, site_project: Path, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            report = _build(site_project)
        dist = site_project / "dist"

        assert (dist / "css" / "style.css").read_text(encoding="utf-8") == "body { margin: 0; }\n"
        assert (dist / "images" / "logo.png").is_file()
        assert report.copied_assets == ["css", "images"]
        assert "asset:js" in report.skipped
        assert "does not exist. Skipping." in caplog.text

    def test_output_directory_is_cleaned_first(self, site_project: Path) -> None:
        stale = site_project / "dist" / "old" / "stale.html"
        stale.parent.mkdir(parents=True)
        stale.write_text("stale", encoding="utf-8")

        _build(site_project)

        assert not stale.exists()
        assert (site_project / "dist" / "index.html").exists()

    def test_rebuild_is_repeatable(self, site_project: Path) -> None:
        _build(site_project)
        _build(site_project)

        assert (site_project / "dist" / "index.html").read_text(encoding="utf-8") == EXPECTED_INDEX

    def test_missing_include_is_a_page_warning(self, tmp_path: Path) -> None:
        root = write_site(tmp_path / "site", pages={"index.html": '<include src="gone.html"/>'})

        report = _build(root)

        assert (root / "dist" / "index.html").read_text(encoding="utf-8") == (
            "<!-- Include Error: gone.html not found or processed -->"
        )
        assert report.warning_count == 1
        assert not report.has_errors

    def test_strip_policy_from_config(self, tmp_path: Path) -> None:
        root = write_site(
            tmp_path / "site",
            pages={"index.html": "<title>{{ site_name }}</title>"},
            config={"placeholders": {"policy": "strip"}},
        )

        report = _build(root)

        assert (root / "dist" / "index.html").read_text(encoding="utf-8") == "<title></title>"
        assert report.pages[0].placeholders_stripped == {"site_name"}
        assert report.warning_count == 1

    def test_custom_paths_from_config(self, tmp_path: Path) -> None:
        root = write_site(
            tmp_path / "site",
            config={"paths": {"output_dir": "public"}, "assets": {"folders": ["css"]}},
        )

        report = _build(root)

        assert (root / "public" / "index.html").read_text(encoding="utf-8") == EXPECTED_INDEX
        assert not (root / "public" / "images").exists()
        assert report.copied_assets == ["css"]

    def test_unreadable_page_is_recorded_and_build_continues(self, tmp_path: Path) -> None:
        root = write_site(tmp_path / "site")
        (root / "src" / "pages" / "broken.html").write_bytes(b"\xff\xfe\xfa")

        report = _build(root)

        assert report.has_errors
        assert report.errors[0].startswith("broken.html: ")
        assert (root / "dist" / "index.html").exists()
        assert not (root / "dist" / "broken.html").exists()

    def test_report_serializes(self, site_project: Path) -> None:
        report = _build(site_project)

        data = report.to_dict()
        assert data["output_dir"] == str(site_project.resolve() / "dist")
        assert [p["page_name"] for p in data["pages"]] == ["about.html", "index.html"]
        assert data["css_compiled"] is False
        assert report.summary().splitlines()[-1].startswith("Build completed in ")


class TestSiteBuildFailures:
    def test_missing_pages_directory_is_fatal(self, site_project: Path) -> None:
        shutil.rmtree(site_project / "src" / "pages")

        with pytest.raises(BuildError, match="Error reading pages directory"):
            _build(site_project)

    @pytest.mark.parametrize("output_dir", [".", "src", ".."])
    def test_refuses_to_clean_directories_holding_sources(self, tmp_path: Path, output_dir: str) -> None:
        root = write_site(tmp_path / "site", config={"paths": {"output_dir": output_dir}})

        with pytest.raises(BuildError, match="Refusing to clean output directory"):
            _build(root)

        assert (root / "src" / "pages" / "index.html").is_file()

    def test_output_inside_src_is_allowed(self, tmp_path: Path) -> None:
        root = write_site(tmp_path / "site", config={"paths": {"output_dir": "src/out"}})

        _build(root)

        assert (root / "src" / "out" / "index.html").is_file()


class TestCssStep:
    def test_css_command_runs_in_project_root(self, tmp_path: Path) -> None:
        script = (
            "import pathlib; "
            "p = pathlib.Path('dist/css/compiled.css'); "
            "p.parent.mkdir(parents=True, exist_ok=True); "
            "p.write_text('.x{}')"
        )
        root = write_site(tmp_path / "site", config={"css": {"command": [sys.executable, "-c", script]}})

        report = _build(root)

        assert report.css_compiled is True
        assert (root / "dist" / "css" / "compiled.css").read_text() == ".x{}"
        assert (root / "dist" / "css" / "style.css").is_file()

    def test_failing_css_command_aborts_build(self, tmp_path: Path) -> None:
        script = "import sys; sys.stderr.write('tailwind exploded'); sys.exit(3)"
        root = write_site(tmp_path / "site", config={"css": {"command": [sys.executable, "-c", script]}})

        with pytest.raises(BuildError, match="exit code 3: tailwind exploded") as exc_info:
            _build(root)

        assert exc_info.value.context["returncode"] == 3
        assert not (root / "dist" / "index.html").exists()

    def test_css_command_that_cannot_start_aborts_build(self, tmp_path: Path) -> None:
        blocker = tmp_path / "tool-dir"
        blocker.mkdir()
        root = write_site(tmp_path / "site", config={"css": {"command": [str(blocker)]}})

        with pytest.raises(BuildError, match="Cannot run CSS command"):
            _build(root)


class TestFilesystemFailures:
    def test_uncreatable_output_directory(self, tmp_path: Path) -> None:
        root = write_site(tmp_path / "site", config={"paths": {"output_dir": "blocker/dist"}})
        (root / "blocker").write_text("a file, not a directory", encoding="utf-8")

        with pytest.raises(BuildError, match="Cannot prepare output directory") as exc_info:
            _build(root)

        assert exc_info.value.context == {"output_dir": str(root.resolve() / "blocker" / "dist")}

    def test_asset_copy_failure(self, tmp_path: Path) -> None:
        root = write_site(tmp_path / "site")
        os.symlink(root / "src" / "css" / "gone.css", root / "src" / "css" / "dangling.css")

        with pytest.raises(BuildError, match="Error copying assets from") as exc_info:
            _build(root)

        assert exc_info.value.context["asset_folder"] == "css"
        assert not (root / "dist" / "index.html").exists()
