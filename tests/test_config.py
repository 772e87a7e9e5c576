# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from member_scout.config import ScraperConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: http://example.com/socios\nmax_records: 5", ".yaml", None),
        (json.dumps({"seed_url": "http://example.com/socios", "max_records": 5}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("::invalid yaml", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("seed_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ScraperConfig)
        assert cfg.seed_url == "http://example.com/socios"
        assert cfg.max_records == 5


def test_defaults():
    cfg = ScraperConfig(seed_url="https://example.com")
    assert cfg.seed_url == "https://example.com"
    assert cfg.csv == "stdout"
    assert cfg.max_records == 0
    assert cfg.timeout == 30.0
    assert cfg.retries_on_timeout == 3
    assert cfg.user_agent == "Mozilla 5.0"
    assert cfg.selectors.card_class == "socios-panel-lat"
    assert cfg.labels.csv_header() == [
        "Nombre", "Domicilio", "Teléfono", "Correo electrónico", "Persona de contacto",
    ]


def test_seed_url_is_not_normalised():
    assert ScraperConfig(seed_url="http://x/a/").seed_url == "http://x/a/"
    assert ScraperConfig(seed_url="http://x").seed_url == "http://x"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"seed_url": "ftp://example.com"},
        {"seed_url": "/relative"},
        {"seed_url": "http://e.com", "timeout": 0},
        {"seed_url": "http://e.com", "retries_on_timeout": 0},
        {"seed_url": "http://e.com", "max_records": -1},
        {"seed_url": "http://e.com", "unknown": 1},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        ScraperConfig(**kwargs)


def test_overrides_win_and_none_is_ignored(tmp_path):
    cfg_path = write_file(
        tmp_path,
        "seed_url: http://example.com\ntimeout: 5\nselectors:\n  detail_link_class: member\n",
        ".yml",
    )
    cfg = load_config(cfg_path, {"timeout": 12.5, "max_records": None})
    assert cfg.timeout == 12.5
    assert cfg.max_records == 0
    assert cfg.selectors.detail_link_class == "member"


def test_overrides_without_file():
    cfg = load_config(None, {"seed_url": "https://example.com", "csv": "out.csv"})
    assert cfg.csv == "out.csv"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_example_config_is_valid():
    example = Path(__file__).resolve().parents[1] / "configs" / "example.yaml"
    cfg = load_config(example)
    assert cfg.labels.phone == "Teléfono"
