"""
font2css CLI
============

Generates `@font-face` stylesheets from font files.
"""

import logging
import sys
from pathlib import Path

import click

from font2css.batch.processor import (
    ConsoleProgressCallback,
    FontBatchProcessor,
    collect_font_files,
)
from font2css.core.config import Font2CSSConfig
from font2css.core.exceptions import Font2CSSError
from font2css.fonts.deriver import FONT_URL_PREFIX, derive_font_face

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose):
    """Generate CSS @font-face rules from font file names."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command(name="derive")
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--url-prefix",
    type=str,
    help=f"Prefix of the font URL in the src property (default: {FONT_URL_PREFIX})",
)
def derive(names, url_prefix):
    """Print the @font-face rule guessed for each font file NAME."""
    if url_prefix is None:
        url_prefix = Font2CSSConfig.from_env_and_yaml().url_prefix

    for name in names:
        filename = Path(name).name
        descriptor = derive_font_face(
            basename=Path(filename).stem,
            extension=Path(filename).suffix,
            original_name=filename,
            url_prefix=url_prefix,
        )
        click.echo(descriptor.declaration)


@cli.command(name="convert")
@click.argument("inputs", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Output directory for generated stylesheets",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration YAML file (optional)",
)
@click.option("--url-prefix", type=str, help="Prefix of the font URL in the src property")
@click.option(
    "--preserve-structure",
    is_flag=True,
    help="Mirror input sub-directories in the output directory",
)
@click.option("--fail-fast", is_flag=True, help="Stop at the first file that fails")
@click.option("--quiet", "-q", is_flag=True, help="Only print the summary")
def convert(inputs, output_dir, config, url_prefix, preserve_structure, fail_fast, quiet):
    """Convert font files and directories in INPUTS to stylesheets."""
    try:
        app_config = Font2CSSConfig.from_env_and_yaml(yaml_path=config)

        overrides = {}
        if url_prefix is not None:
            overrides["url_prefix"] = url_prefix
        if preserve_structure:
            overrides["preserve_structure"] = True
        if fail_fast:
            overrides["continue_on_error"] = False
        if overrides:
            app_config = app_config.model_copy(update=overrides)

        font_paths = collect_font_files(inputs, app_config.font_extensions)
        logger.info(f"Found {len(font_paths)} font files to convert")

        base_dir = inputs[0] if len(inputs) == 1 and inputs[0].is_dir() else None

        processor = FontBatchProcessor(app_config)
        result = processor.process(
            font_paths,
            output_dir,
            progress_callback=ConsoleProgressCallback(quiet=quiet),
            base_dir=base_dir,
        )

        if result.failed_items > 0:
            logger.warning(f"Failed items: {result.failed_items}")
            for failed_result in result.get_failed_items():
                errors = ", ".join(failed_result.errors)
                logger.warning(f"  - {failed_result.source_path}: {errors}")
            sys.exit(1)

    except Font2CSSError as e:
        logger.exception(f"Conversion failed: {e}")
        sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
