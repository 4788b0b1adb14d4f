import json
from pathlib import Path

import click

from .cli_utils import configure_logging
from .pipeline import CodeGeneratorConfig, generate_models


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--models-dir",
    "-m",
    default="models",
    show_default=True,
    help="Sub-folder of OUTPUT receiving the models (empty string for OUTPUT itself)",
)
@click.option(
    "--no-generation-comment",
    is_flag=True,
    default=False,
    help="Do not add the 'Generated by' comment at the top of generated files",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every written file")
@click.argument("schema", type=click.File("rb"))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def json_schema_to_dart(config, models_dir, no_generation_comment, verbose, schema, output):
    """Generate Dart models from the JSON Schema SCHEMA ('-' for stdin) into OUTPUT."""
    configure_logging(verbose)

    if config is not None:
        with open(config, encoding="utf-8") as f:
            try:
                config = CodeGeneratorConfig.from_dict(json.load(f))
            except json.JSONDecodeError as e:
                raise click.ClickException(f"Invalid config file: {e}") from e
    else:
        config = CodeGeneratorConfig()

    # CLI flag overrides config file if set
    if no_generation_comment:
        config.add_generation_comment = False

    output_root = Path(output) / models_dir if models_dir else Path(output)
    result = generate_models(schema.read(), output_root, config)

    for warning in result.warnings:
        click.echo(f"Warning: {warning}", err=True)

    if not result.success:
        raise click.ClickException(result.error)

    click.echo(f"Dart models generated successfully! ({len(result.written_files)} files in {output_root})")
