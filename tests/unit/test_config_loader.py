"""Unit tests for YAML configuration loading and config validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordswap.config import ConfigLoader, WordswapConfig


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize typed/blank values."""

    config_path = tmp_path / "wordswap.yml"
    config_path.write_text(
        """
root: " docs "
mapping_file: replacements.txt
pairs:
  utilize: " use "
  foo: bar
reverse: "yes"
match_mode: " Substring "
case_sensitive: false
binary_policy: error
exclude:
  - .git
  - "*.bak"
output_dir: ""
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.root == Path("docs")
    assert config.mapping_file == Path("replacements.txt")
    assert config.pairs == (("utilize", "use"), ("foo", "bar"))
    assert config.reverse is True
    assert config.match_mode == "substring"
    assert config.case_sensitive is False
    assert config.binary_policy == "error"
    assert config.exclude == (".git", "*.bak")
    assert config.output_dir is None
    assert config.output_mode == "write"


def test_config_loader_applies_defaults_for_minimal_payload(tmp_path: Path) -> None:
    config_path = tmp_path / "minimal.yml"
    config_path.write_text("root: docs\nexclude: .git\n", encoding="utf-8")

    config = ConfigLoader.from_yaml(config_path)

    assert config.match_mode == "word"
    assert config.binary_policy == "skip"
    assert config.case_sensitive is True
    assert config.exclude == (".git",)
    assert config.pairs == ()


def test_config_loader_from_yaml_rejects_missing_and_unknown_keys(tmp_path: Path) -> None:
    missing_path = tmp_path / "missing.yml"
    missing_path.write_text("match_mode: word\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"missing required key\(s\): root"):
        ConfigLoader.from_yaml(missing_path)

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("root: docs\nverbosity: 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): verbosity"):
        ConfigLoader.from_yaml(unknown_path)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("root: docs\nreverse: maybe\n", "field `reverse` must be a boolean value"),
        ("root: docs\nmatch_mode: regex\n", "`match_mode` must be one of"),
        ("root: docs\npairs: [a, b]\n", "field `pairs` must be a mapping"),
        ("root: docs\npairs:\n  foo: ''\n", "blank value for `foo`"),
        ("root: docs\nexclude: {a: b}\n", "field `exclude` must be a list"),
        ("- just\n- a list\n", "must contain a top-level mapping"),
        ("root: [unclosed\n", "is not valid YAML"),
    ],
)
def test_config_loader_rejects_invalid_values(
    tmp_path: Path, body: str, message: str
) -> None:
    config_path = tmp_path / "invalid.yml"
    config_path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ConfigLoader.from_yaml(tmp_path / "absent.yml")


def test_validate_requires_some_mapping_source(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="mapping file or at least one inline pair"):
        WordswapConfig(root=tmp_path).validate()


def test_validate_rejects_output_dir_inside_root(tmp_path: Path) -> None:
    config = WordswapConfig(
        root=tmp_path,
        pairs=(("a", "b"),),
        output_dir=tmp_path / "out",
    )

    with pytest.raises(ValueError, match="must not be inside root"):
        config.validate()


def test_validate_rejects_output_dir_outside_write_mode(tmp_path: Path) -> None:
    config = WordswapConfig(
        root=tmp_path / "tree",
        pairs=(("a", "b"),),
        output_dir=tmp_path / "out",
        output_mode="count",
    )

    with pytest.raises(ValueError, match="only applies to write mode"):
        config.validate()
