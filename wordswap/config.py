"""Configuration model and loaders for wordswap.

Responsibilities:
- Define run configuration as a typed dataclass.
- Validate option combinations before any file is touched.
- Load command defaults from YAML files.

Key types:
- `WordswapConfig`: normalized settings for one substitution run.
- `ConfigLoader`: static construction helpers for `WordswapConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_choice,
    parse_permissive_boolean,
)
from .text.substitution import MATCH_MODES, MATCH_WORD


OUTPUT_WRITE = "write"
OUTPUT_PREVIEW = "preview"
OUTPUT_COUNT = "count"
OUTPUT_MODES = frozenset({OUTPUT_WRITE, OUTPUT_PREVIEW, OUTPUT_COUNT})

BINARY_SKIP = "skip"
BINARY_ERROR = "error"
BINARY_POLICIES = frozenset({BINARY_SKIP, BINARY_ERROR})


@dataclass(slots=True)
class WordswapConfig:
    """Runtime configuration for one substitution run.

    Attributes:
        root: Directory scanned recursively.
        mapping_file: Optional file of `old: new` lines.
        pairs: Inline replacement pairs, appended after mapping file pairs.
        reverse: Whether the combined mapping is inverted before use.
        match_mode: `word` for whole-word matching or `substring`.
        case_sensitive: Whether token matching is case-sensitive.
        binary_policy: `skip` leaves binary files untouched, `error` fails the run.
        exclude: Glob patterns for relative paths or path parts to ignore.
        output_dir: Optional directory that receives a transformed mirror of `root`.
        output_mode: `write`, `preview`, or `count`.
    """

    root: Path
    mapping_file: Path | None = None
    pairs: tuple[tuple[str, str], ...] = ()
    reverse: bool = False
    match_mode: str = MATCH_WORD
    case_sensitive: bool = True
    binary_policy: str = BINARY_SKIP
    exclude: tuple[str, ...] = ()
    output_dir: Path | None = None
    output_mode: str = OUTPUT_WRITE

    def validate(self) -> None:
        """Validate configuration values before a run."""

        if self.match_mode not in MATCH_MODES:
            raise ValueError(f"Unsupported `match_mode`: `{self.match_mode}`.")
        if self.binary_policy not in BINARY_POLICIES:
            raise ValueError(f"Unsupported `binary_policy`: `{self.binary_policy}`.")
        if self.output_mode not in OUTPUT_MODES:
            raise ValueError(f"Unsupported `output_mode`: `{self.output_mode}`.")
        if self.mapping_file is None and not self.pairs:
            raise ValueError("A mapping file or at least one inline pair is required.")
        if self.output_dir is not None:
            if self.output_mode != OUTPUT_WRITE:
                raise ValueError("`output_dir` only applies to write mode.")
            self._reject_nested_output_dir(self.output_dir)

    def _reject_nested_output_dir(self, output_dir: Path) -> None:
        """Fail when the output mirror would be created inside the scanned tree."""

        resolved_root = self.root.resolve()
        resolved_output = output_dir.resolve()
        if resolved_output == resolved_root or resolved_root in resolved_output.parents:
            raise ValueError(
                f"`output_dir` `{output_dir}` must not be inside root `{self.root}`."
            )


class ConfigLoader:
    """Factory methods for loading `WordswapConfig` from YAML files."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "root",
            "mapping_file",
            "pairs",
            "reverse",
            "match_mode",
            "case_sensitive",
            "binary_policy",
            "exclude",
            "output_dir",
        }
    )
    _REQUIRED_YAML_KEYS = frozenset({"root"})

    @staticmethod
    def from_yaml(path: Path) -> WordswapConfig:
        """Load config from a YAML file.

        Relative `root`, `mapping_file`, and `output_dir` values are kept as
        written, so they resolve against the working directory like CLI paths.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the payload has unknown, missing, or invalid keys.
        """

        raw_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(raw_text, path)
        return ConfigLoader._build_config_from_mapping(payload, f"YAML config `{path}`")

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> WordswapConfig:
        """Build a config from a mapping payload without cross-field validation."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        root = ConfigLoader._required_path(payload, "root", source_label)
        mapping_file = ConfigLoader._optional_path(payload, "mapping_file")
        output_dir = ConfigLoader._optional_path(payload, "output_dir")
        pairs = ConfigLoader._optional_pairs(payload, "pairs", source_label)
        reverse = ConfigLoader._optional_boolean(payload, "reverse", source_label, default=False)
        case_sensitive = ConfigLoader._optional_boolean(
            payload, "case_sensitive", source_label, default=True
        )
        match_mode = ConfigLoader._optional_choice(
            payload, "match_mode", source_label, MATCH_MODES, default=MATCH_WORD
        )
        binary_policy = ConfigLoader._optional_choice(
            payload, "binary_policy", source_label, BINARY_POLICIES, default=BINARY_SKIP
        )
        exclude = ConfigLoader._optional_string_list(payload, "exclude", source_label)

        return WordswapConfig(
            root=root,
            mapping_file=mapping_file,
            pairs=pairs,
            reverse=reverse,
            match_mode=match_mode,
            case_sensitive=case_sensitive,
            binary_policy=binary_policy,
            exclude=exclude,
            output_dir=output_dir,
        )

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")

    @staticmethod
    def _required_path(payload: Mapping[str, Any], key: str, source_label: str) -> Path:
        """Read a required non-empty path-like field from a payload."""

        value = ConfigLoader._optional_path(payload, key)
        if value is None:
            raise ValueError(f"{source_label} requires non-empty `{key}`.")
        return value

    @staticmethod
    def _optional_path(payload: Mapping[str, Any], key: str) -> Path | None:
        """Read an optional path field and normalize blank values to `None`."""

        value = normalize_optional_string(payload.get(key))
        if value is None:
            return None
        return Path(value)

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_choice(
        payload: Mapping[str, Any],
        key: str,
        source_label: str,
        choices: frozenset[str],
        default: str,
    ) -> str:
        """Read an optional choice field and validate it against `choices`."""

        if normalize_optional_string(payload.get(key)) is None:
            return default
        try:
            return parse_choice(payload[key], key, choices)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_pairs(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[tuple[str, str], ...]:
        """Read an optional `old: new` mapping with non-empty keys and values."""

        raw = payload.get(key)
        if raw is None:
            return ()
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        pairs: list[tuple[str, str]] = []
        for raw_key, raw_value in raw.items():
            old_word = normalize_optional_string(raw_key)
            new_word = normalize_optional_string(raw_value)
            if old_word is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            if new_word is None:
                raise ValueError(
                    f"{source_label} field `{key}` contains blank value for `{old_word}`."
                )
            pairs.append((old_word, new_word))
        return tuple(pairs)

    @staticmethod
    def _optional_string_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...]:
        """Read an optional list of non-empty strings; a single string is one item."""

        raw = payload.get(key)
        if raw is None:
            return ()
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list):
            raise ValueError(f"{source_label} field `{key}` must be a list of strings.")

        values: list[str] = []
        for item in raw:
            normalized = normalize_optional_string(item)
            if normalized is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank entry.")
            values.append(normalized)
        return tuple(values)
