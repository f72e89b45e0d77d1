"""Command-line interface using Click."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .core.aligner import Aligner
from .core.playback import find_word_at_position
from .core.report import build_alignment_report
from .core.serialization import (
    aligned_words_to_json,
    load_alignment_from_json,
    load_transcript,
    save_alignment_to_json,
)
from .exceptions import ScriptSyncError
from .utils.logging import setup_logging
from .utils.validation import (
    validate_lookahead,
    validate_output_path,
    validate_position,
    validate_script_text,
)


def _read_script(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ScriptSyncError(f"Cannot read script {path}: {e}")


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """scriptsync - Word timing for a reference script from speech recognition."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger
    ctx.obj['verbose'] = verbose


@cli.command()
@click.argument('transcript', type=click.Path(exists=True, dir_okay=False))
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.option('-o', '--output', help='Output alignment JSON path (default: stdout)')
@click.option('--lookahead', type=int, default=None,
              help='Recognized tokens considered per script word (default: 5)')
@click.option('--lenient', is_flag=True,
              help='Skip transcript tokens with impossible timing instead of failing')
@click.option('--report', is_flag=True,
              help='Log a match-quality summary after aligning')
@click.pass_context
def align(ctx, transcript, script, output, lookahead, lenient, report):
    """Align a recognizer TRANSCRIPT (JSON) to a reference SCRIPT (text)."""
    logger = ctx.obj['logger']

    try:
        if lookahead is not None:
            validate_lookahead(lookahead)
        output_path: Optional[Path] = validate_output_path(output) if output else None

        tokens = load_transcript(transcript, strict=not lenient)
        script_text = validate_script_text(_read_script(script))
        logger.info(f"Loaded {len(tokens)} recognized tokens")

        words = Aligner(lookahead=lookahead).align(tokens, script_text)

        if output_path:
            save_alignment_to_json(str(output_path), words)
            logger.info(f"Alignment written: {output_path} ({len(words)} words)")
        else:
            click.echo(json.dumps({"words": aligned_words_to_json(words)},
                                  ensure_ascii=False, indent=2))

        if report:
            logger.info(build_alignment_report(words).summary())

    except ScriptSyncError as e:
        logger.error(f"{e}")
        sys.exit(1)


@cli.command()
@click.argument('alignment', type=click.Path(exists=True, dir_okay=False))
@click.argument('position_ms', type=int)
@click.pass_context
def locate(ctx, alignment, position_ms):
    """Show which word of an ALIGNMENT is spoken at POSITION_MS."""
    logger = ctx.obj['logger']

    try:
        validate_position(position_ms)
        words = load_alignment_from_json(alignment)
    except ScriptSyncError as e:
        logger.error(f"{e}")
        sys.exit(1)
    except (ValueError, KeyError) as e:
        logger.error(f"Invalid alignment file {alignment}: {e}")
        sys.exit(1)

    index = find_word_at_position(words, position_ms)
    if index < 0:
        click.echo("-1")
    else:
        click.echo(f"{index}\t{words[index].word}")


if __name__ == '__main__':
    cli()
