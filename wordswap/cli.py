"""Command-line interface for wordswap.

Responsibilities:
- Expose `replace` and `count` commands over a directory tree.
- Convert CLI arguments and optional YAML defaults into `WordswapConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_file_summary,
    echo_occurrence_counts,
    echo_previews,
    echo_replacement_counts,
    exit_with_command_error,
)
from .config import (
    BINARY_POLICIES,
    OUTPUT_COUNT,
    OUTPUT_PREVIEW,
    OUTPUT_WRITE,
    ConfigLoader,
    WordswapConfig,
)
from .errors import WordswapError
from .mapping import parse_inline_pairs
from .parsing import parse_choice
from .runner import DirectorySubstitution
from .telemetry.logger import RunLogger
from .text.substitution import MATCH_MODES

app = typer.Typer(
    name="wordswap",
    no_args_is_help=True,
    help="Replace tokens across every text file in a directory tree.",
)

RootArgument = Annotated[
    Path | None,
    typer.Argument(help="Directory to scan recursively. Required unless provided by `--config`."),
]
MappingOption = Annotated[
    Path | None,
    typer.Option("--mapping", "-m", help="File of `old: new` lines (one pair per line)."),
]
PairOption = Annotated[
    list[str] | None,
    typer.Option("--pair", "-p", help="Inline `old:new` pair; repeat for more pairs."),
]
ReverseOption = Annotated[
    bool | None,
    typer.Option("--reverse/--no-reverse", help="Swap every pair before substituting."),
]
MatchOption = Annotated[
    str | None,
    typer.Option("--match", help="Token matching: `word` (whole words) or `substring`."),
]
IgnoreCaseOption = Annotated[
    bool | None,
    typer.Option("--ignore-case/--case-sensitive", help="Case-insensitive token matching."),
]
BinaryOption = Annotated[
    str | None,
    typer.Option("--binary", help="Binary file policy: `skip` or `error`."),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option("--exclude", "-x", help="Glob of paths to ignore, e.g. `.git`; repeatable."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log one line per processed file."),
]


def _load_yaml_config(config_path: Path | None) -> WordswapConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise WordswapError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise WordswapError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise WordswapError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _parse_cli_choice(value: str, field_name: str, choices: frozenset[str]) -> str:
    try:
        return parse_choice(value, field_name, choices)
    except ValueError as exc:
        raise WordswapError(stage="config", detail=str(exc)) from exc


def _resolve_command_config(
    *,
    output_mode: str,
    config_file: Path | None,
    root: Path | None,
    mapping_file: Path | None,
    pairs: list[str] | None,
    reverse: bool | None,
    match_mode: str | None,
    ignore_case: bool | None,
    binary_policy: str | None,
    exclude: list[str] | None,
    out: Path | None = None,
) -> WordswapConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded_config = _load_yaml_config(config_file)
    if loaded_config is None:
        if root is None:
            raise WordswapError(
                stage="config",
                detail="Root directory is required when `--config` is not provided.",
                hint="Pass `<root>` or use `--config <path.yaml>` with `root`.",
            )
        loaded_config = WordswapConfig(root=root)

    overrides: dict[str, object] = {"output_mode": output_mode}
    if root is not None:
        overrides["root"] = root
    if mapping_file is not None:
        overrides["mapping_file"] = mapping_file
    if pairs:
        overrides["pairs"] = parse_inline_pairs(pairs).pairs
    if reverse is not None:
        overrides["reverse"] = reverse
    if match_mode is not None:
        overrides["match_mode"] = _parse_cli_choice(match_mode, "--match", MATCH_MODES)
    if ignore_case is not None:
        overrides["case_sensitive"] = not ignore_case
    if binary_policy is not None:
        overrides["binary_policy"] = _parse_cli_choice(
            binary_policy, "--binary", BINARY_POLICIES
        )
    if exclude:
        overrides["exclude"] = tuple(exclude)
    if out is not None:
        overrides["output_dir"] = out

    return replace(loaded_config, **overrides)


@app.command("replace")
def replace_command(
    root: RootArgument = None,
    mapping_file: MappingOption = None,
    pairs: PairOption = None,
    reverse: ReverseOption = None,
    match_mode: MatchOption = None,
    ignore_case: IgnoreCaseOption = None,
    binary_policy: BinaryOption = None,
    exclude: ExcludeOption = None,
    out: Annotated[
        Path | None,
        typer.Option(
            "--out",
            help="Write a transformed mirror of the tree here instead of editing in place.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print transformed content without writing files."),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Replace mapped tokens in every file under ROOT."""

    try:
        config = _resolve_command_config(
            output_mode=OUTPUT_PREVIEW if dry_run else OUTPUT_WRITE,
            config_file=config_file,
            root=root,
            mapping_file=mapping_file,
            pairs=pairs,
            reverse=reverse,
            match_mode=match_mode,
            ignore_case=ignore_case,
            binary_policy=binary_policy,
            exclude=exclude,
            out=out,
        )
        if dry_run:
            config = replace(config, output_dir=None)
        report = DirectorySubstitution(config, run_logger=RunLogger(verbose=verbose)).run()
    except Exception as exc:
        exit_with_command_error("replace", exc)

    if dry_run:
        echo_previews(report)
    echo_replacement_counts(report)
    echo_file_summary(report)


@app.command("count")
def count_command(
    root: RootArgument = None,
    mapping_file: MappingOption = None,
    pairs: PairOption = None,
    reverse: ReverseOption = None,
    match_mode: MatchOption = None,
    ignore_case: IgnoreCaseOption = None,
    binary_policy: BinaryOption = None,
    exclude: ExcludeOption = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Count mapped tokens under ROOT without modifying any file."""

    try:
        config = _resolve_command_config(
            output_mode=OUTPUT_COUNT,
            config_file=config_file,
            root=root,
            mapping_file=mapping_file,
            pairs=pairs,
            reverse=reverse,
            match_mode=match_mode,
            ignore_case=ignore_case,
            binary_policy=binary_policy,
            exclude=exclude,
        )
        config = replace(config, output_dir=None)
        report = DirectorySubstitution(config, run_logger=RunLogger(verbose=verbose)).run()
    except Exception as exc:
        exit_with_command_error("count", exc)

    echo_occurrence_counts(report)
    echo_file_summary(report)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
