import click
from token_estimator.estimation import EstimatorConfig, estimate_tokens_per_string
from token_estimator.commands.base_command import BaseCommand


def _read_inputs(files, json_list: bool):
    """Return (label, text) pairs for every text found in the inputs."""
    if not files:
        files = [click.get_text_stream('stdin', encoding='utf-8')]

    items = []
    for f in files:
        source = getattr(f, 'name', '<stdin>')
        try:
            content = f.read()
        except (UnicodeDecodeError, OSError) as e:
            click.echo(click.style(f'Error reading {source}: {e}', fg='red'), err=True)
            raise click.Abort()
        if json_list:
            for i, text in enumerate(BaseCommand.load_string_list(content, source)):
                items.append((f'{source}[{i}]', text))
        else:
            items.append((source, content))
    return items


@click.command()
@click.argument('files', type=click.File("r", encoding="utf-8"), nargs=-1)
@click.option('--model', default=None, help='Model or encoding name')
@click.option('--json-list', is_flag=True, help='Each input is a JSON array of strings')
@click.option('--per-item', is_flag=True, help='Report each text separately')
@click.option('--repeat-threshold', type=click.IntRange(min=1), default=None,
              help='Run of identical characters that forces the character-count estimate')
@click.option('--output-file', type=click.Path(exists=False))
def count(files, model: str, json_list: bool, per_item: bool, repeat_threshold: int, output_file: str):
    """
    Estimate token count of FILES (stdin when none are given).

    Texts are encoded with the model's tokenizer. Texts with long runs of a
    repeated character, or that the tokenizer rejects, are estimated from
    their length.
    """
    try:
        EstimatorConfig.validate()
        model = model or EstimatorConfig.get_model()
    except ValueError as e:
        BaseCommand.handle_error(e, "configuration")

    items = _read_inputs(files, json_list)
    estimates = estimate_tokens_per_string([text for _, text in items], model, repeat_threshold)
    total = sum(estimate.tokens for estimate in estimates)

    if per_item:
        lines = [
            f"{label}\t{estimate.tokens}\t{estimate.method}"
            for (label, _), estimate in zip(items, estimates)
        ]
        lines.append(f"total\t{total}")
        content = "\n".join(lines)
    else:
        content = str(total)

    BaseCommand.write_output(content, output_file)
