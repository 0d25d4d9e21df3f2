import json
import logging
from pathlib import Path

import click

from .pipeline import CodeGeneratorConfig, StructGenerator
from .pipeline.errors import ConfigError, DocumentLoadError, StructInferenceError

logger = logging.getLogger(__name__)


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Emit a named type declaration instead of a bare type expression")
@click.option("--package", "-p", "package_name", default=None, type=str, help="Emit a Go package clause")
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False, resolve_path=True), help="Write to a file instead of stdout")
@click.option("--dump-ir", is_flag=True, default=False, help="Print the inferred IR as JSON instead of Go code")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every loaded document")
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def json_to_struct(name, package_name, output, dump_ir, verbose, config_path):
    """Infer a Go struct from the JSON documents selected by CONFIG_PATH."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with open(config_path, encoding="utf-8") as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid configuration file {config_path}: {e}") from e
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    # CLI flags override the config file
    if name is not None:
        config.type_name = name
    if package_name is not None:
        config.package_name = package_name

    generator = StructGenerator(config)
    try:
        if dump_ir:
            out = json.dumps(generator.dump_ir(), indent=2) + "\n"
        else:
            out = generator.generate()
    except (StructInferenceError, ConfigError, DocumentLoadError) as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(out, nl=False)
        return

    with open(output, "w", encoding="utf-8") as f:
        f.write(out)
    logger.info(f"Wrote {Path(output).name}")
