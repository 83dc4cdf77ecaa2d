#!/usr/bin/env python3
"""Compute WordNet similarity between two words.

Words may be plain (``dog``), POS-qualified (``dog#n``) or sense-qualified
(``dog#n#1``). The measure is configured from a ``key:value`` config file
and/or command-line options (options win).

Usage:
    uv run python scripts/compute_similarity.py --help
    uv run python scripts/compute_similarity.py words dog#n cat#n --config data/jcn.conf
    uv run python scripts/compute_similarity.py words dog cat --sim-type lin \\
        --infocontent data/ic-bnc-resnik-add1.dat
    uv run python scripts/compute_similarity.py measures
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from wn_similarity.config import load_params
from wn_similarity.constants import (
    ENV_CONFIG,
    ENV_LOG_LEVEL,
    PARAM_CACHE,
    PARAM_INFOCONTENT,
    PARAM_MAPPING,
    PARAM_ROOT,
    PARAM_SIM_TYPE,
)
from wn_similarity.errors import SimilarityError
from wn_similarity.factory import build_measure
from wn_similarity.measures.registry import available_measures

# Load environment variables from .env
load_dotenv()

logging.basicConfig(
    level=os.getenv(ENV_LOG_LEVEL, "WARNING").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="WordNet similarity between words")


def collect_params(
    config: Path | None,
    sim_type: str | None = None,
    infocontent: str | None = None,
    mapping: str | None = None,
    cache: int | None = None,
    root: bool | None = None,
) -> dict[str, str]:
    """Merge config-file parameters with command-line overrides.

    The config file defaults to $WN_SIMILARITY_CONFIG when not given.
    """
    params: dict[str, str] = {}
    config_location = config or os.getenv(ENV_CONFIG)
    if config_location:
        params.update(load_params(config_location))

    overrides = {
        PARAM_SIM_TYPE: sim_type,
        PARAM_INFOCONTENT: infocontent,
        PARAM_MAPPING: mapping,
        PARAM_CACHE: None if cache is None else str(cache),
        PARAM_ROOT: None if root is None else str(root).lower(),
    }
    params.update({key: value for key, value in overrides.items() if value is not None})
    return params


@app.command()
def words(
    word1: str = typer.Argument(..., help="First word, e.g. dog#n#1"),
    word2: str = typer.Argument(..., help="Second word, e.g. cat#n"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="key:value config file"),
    sim_type: Optional[str] = typer.Option(None, "--sim-type", "-m", help="Measure name (jcn, lin, res)"),
    infocontent: Optional[str] = typer.Option(None, "--infocontent", help="Frequency table path or URI"),
    mapping: Optional[str] = typer.Option(None, "--mapping", help="Domain mapping file path or URI"),
    cache: Optional[int] = typer.Option(None, "--cache", help="Cache capacity (negative = unbounded)"),
    root: Optional[bool] = typer.Option(None, "--root/--no-root", help="Use a virtual root per POS"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Print the most similar sense pair of two words."""
    try:
        params = collect_params(config, sim_type, infocontent, mapping, cache, root)
        measure = build_measure(params)
        info = measure.word_similarity(word1, word2)
    except SimilarityError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if info is None:
        typer.echo(f"No synsets found for {word1!r} and/or {word2!r}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(info.to_dict(), ensure_ascii=False))
    else:
        typer.echo(str(info))
    logger.info(f"Cache: {measure.cache_stats()}")


@app.command()
def measures() -> None:
    """List registered measure names."""
    for name in available_measures():
        typer.echo(name)


if __name__ == "__main__":
    app()
