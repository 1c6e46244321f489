"""Site builder: the driver around the composition engine.

Steps:
1. Clean the output directory
2. Recreate it
3. Copy static asset folders
4. Compile CSS (when a command is configured)
5. Render pages: expand .html files, copy everything else
"""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from time import perf_counter

from pagesmith.core.composition.engine import TemplateEngine
from pagesmith.core.composition.report import BuildReport
from pagesmith.core.config.build_config import BuildConfig
from pagesmith.core.exceptions import BuildError
from pagesmith.core.utils.io import ensure_directory

from .assets import clean_directory, copy_directory
from .css import compile_css

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".html"


def _is_within(child: Path, parent: Path) -> bool:
    c = child.resolve()
    p = parent.resolve()
    return c == p or c.is_relative_to(p)


class SiteBuilder:
    """Build a static site from a BuildConfig.

    Usage:
        report = SiteBuilder(BuildConfig.load(project_root)).build()
    """

    def __init__(self, config: BuildConfig) -> None:
        self.config = config
        self.engine = TemplateEngine(
            component_root=config.components_dir,
            max_depth=config.max_depth,
            placeholder_policy=config.placeholder_policy,
        )

    def build(self) -> BuildReport:
        """Run every build step and return the report.

        Raises:
            BuildError: Unsafe or unwritable output directory, asset copy failure,
                missing pages directory, or CSS failure
        """
        start = perf_counter()
        cfg = self.config
        report = BuildReport(output_dir=cfg.output_dir)
        logger.info("Starting build process...")

        self._check_output_dir()
        try:
            self.clean_output()
            ensure_directory(cfg.output_dir)
            logger.info("Created output directory: %s", cfg.output_dir)
        except OSError as exc:
            raise BuildError(
                f"Cannot prepare output directory {cfg.output_dir}: {exc}",
                context={"output_dir": str(cfg.output_dir)},
            ) from exc

        self.copy_assets(report)

        if cfg.css_command:
            compile_css(cfg.css_command, cwd=cfg.project_root, timeout=cfg.css_timeout)
            report.css_compiled = True

        self.render_pages(report)

        report.duration_seconds = perf_counter() - start
        logger.info("Build completed in %.2f seconds", report.duration_seconds)
        return report

    def _check_output_dir(self) -> None:
        cfg = self.config
        for protected in (cfg.project_root, cfg.src_dir, cfg.pages_dir, cfg.components_dir):
            if _is_within(protected, cfg.output_dir):
                raise BuildError(
                    f"Refusing to clean output directory {cfg.output_dir}: it contains {protected}",
                    context={"output_dir": str(cfg.output_dir), "protected": str(protected)},
                )

    def clean_output(self) -> None:
        logger.info("Cleaning output directory: %s", self.config.output_dir)
        if clean_directory(self.config.output_dir):
            logger.info("Output directory cleaned.")
        else:
            logger.info("Output directory does not exist, no cleaning needed.")

    def copy_assets(self, report: BuildReport) -> None:
        cfg = self.config
        logger.info("Copying static assets...")
        for folder in cfg.asset_folders:
            logger.info("Copying %s...", folder)
            source = cfg.assets_dir / folder
            try:
                copied = copy_directory(source, cfg.output_dir / folder)
            except OSError as exc:
                raise BuildError(
                    f"Error copying assets from {source}: {exc}",
                    context={"asset_folder": folder, "source": str(source)},
                ) from exc
            if copied:
                report.copied_assets.append(folder)
            else:
                report.skipped.append(f"asset:{folder}")

    def render_pages(self, report: BuildReport) -> None:
        """Process top-level entries of the pages directory.

        Raises:
            BuildError: When the pages directory can't be listed
        """
        cfg = self.config
        logger.info("Processing pages from %s...", cfg.pages_dir)
        try:
            entries = sorted(cfg.pages_dir.iterdir())
        except OSError as exc:
            raise BuildError(
                f"Error reading pages directory {cfg.pages_dir}: {exc}",
                context={"pages_dir": str(cfg.pages_dir)},
            ) from exc

        for entry in entries:
            if not entry.is_file():
                logger.info("Skipping directory: %s", entry.name)
                report.skipped.append(entry.name)
                continue

            destination = cfg.output_dir / entry.name
            if entry.suffix == PAGE_SUFFIX:
                self.render_page(entry, destination, report)
            else:
                self._copy_file(entry, destination, report)

    def render_page(self, source: Path, destination: Path, report: BuildReport) -> None:
        logger.info("Processing %s...", source)
        try:
            content = source.read_text(encoding="utf-8")
            html, page_report = self.engine.process(content, page_name=source.name, source_path=source)
            destination.write_text(html, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error processing %s: %s", source, exc)
            report.errors.append(f"{source.name}: {exc}")
            return

        page_report.output_path = destination
        report.add_page(page_report)
        logger.info("Output written to %s", destination)

    def _copy_file(self, source: Path, destination: Path, report: BuildReport) -> None:
        logger.info("Copying non-HTML file: %s...", source.name)
        try:
            shutil.copy2(source, destination)
        except OSError as exc:
            logger.error("Error copying file %s to %s: %s", source, destination, exc)
            report.errors.append(f"{source.name}: {exc}")
            return
        report.copied_files.append(destination)


__all__ = ["SiteBuilder", "PAGE_SUFFIX"]
