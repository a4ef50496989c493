import click
from token_estimator.estimation import encoding_name_for_model, MODEL_CHAR_PER_TOKEN_RATIOS
from token_estimator.estimation.heuristics import get_chars_per_token


@click.command()
@click.argument('models', nargs=-1)
def encodings(models):
    """Show the encoding and fallback chars-per-token ratio for MODELS."""
    models = models or tuple(MODEL_CHAR_PER_TOKEN_RATIOS)
    for model in models:
        click.echo(f"{model}\t{encoding_name_for_model(model)}\t{get_chars_per_token(model)}")
