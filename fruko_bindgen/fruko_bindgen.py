import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import AtomicWriter, FrukoBindgenError, GeneratorConfig, OutputMode, PipelineGenerator, available_targets

logger = logging.getLogger(__name__)


def load_config(config_path: str | None) -> GeneratorConfig:
    """Load the JSON configuration file, or the defaults when there is none."""
    if config_path is None:
        return GeneratorConfig()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {Path(config_path).name} must contain a JSON object")
    return GeneratorConfig.from_dict(data)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--comment", "-m", "comments", multiple=True, help="Extra comment line for the generated file preamble (repeatable)")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it already exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("target", type=str, metavar=f"TARGET [{'|'.join(available_targets())}]")
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def fruko_bindgen(config, comments, force, verbose, path, target, output):
    """Generate TARGET code from the data definition at PATH into OUTPUT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    output_path = Path(output)

    try:
        config = load_config(config)

        # CLI comments are appended after the ones from the config file
        config.preamble_comments = list(config.preamble_comments) + list(comments)

        # Apply CLI flag for output mode (overrides config file if set)
        if force:
            config.output.mode = OutputMode.FORCE

        source = Path(path).read_text(encoding="utf-8")

        codegen = PipelineGenerator(
            Path(path).name,
            source,
            config,
            command_line=reconstruct_command_line(fruko_bindgen),
        )
        out = codegen.generate(target)

        writer = AtomicWriter(atomic=config.output.atomic_write)
        if config.output.mode == OutputMode.FORCE:
            writer.write(output_path, out, validate=config.output.validate_before_write)
        else:
            writer.write_if_not_exists(output_path, out, validate=config.output.validate_before_write)
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Input file is not valid UTF-8: {e}") from e
    except (FrukoBindgenError, FileExistsError, ValueError) as e:
        # ValueError covers malformed JSON and invalid option values in the config file
        raise click.ClickException(str(e)) from e

    logger.info("Generated %s code from %s into %s", target, Path(path).name, output_path)
