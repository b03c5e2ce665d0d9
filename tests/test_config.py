# 📦 /tests/test_config.py

import pytest

from engine.config import CONCERN_KEYWORDS, DEFAULT_WEIGHTS, load_concern_keywords, load_weights, keywords_for
from schemas.schemas import Concern

def test_shipped_table_covers_every_concern_but_none_of_the_above():
    expected = {c.value for c in Concern} - {"None of the above"}
    assert set(CONCERN_KEYWORDS) == expected

def test_keyword_table_is_read_only():
    with pytest.raises(TypeError):
        CONCERN_KEYWORDS["Anxiety"] = frozenset()

def test_keywords_for_accepts_enum_and_unknown():
    assert "cbt" in keywords_for(Concern.ANXIETY, CONCERN_KEYWORDS)
    assert keywords_for("Loneliness", CONCERN_KEYWORDS) == frozenset()

def test_load_concern_keywords_lowercases(tmp_path):
    path = tmp_path / "keywords.yml"
    path.write_text("Anxiety:\n  - Panic\n  - ' Worry '\n  - ''\n")
    table = load_concern_keywords(path)
    assert table["Anxiety"] == frozenset({"panic", "worry"})

def test_load_concern_keywords_from_env(tmp_path, monkeypatch):
    path = tmp_path / "keywords.yml"
    path.write_text("Stress:\n  - burnout\n")
    monkeypatch.setenv("THERAMATCH_KEYWORDS_PATH", str(path))
    assert dict(load_concern_keywords()) == {"Stress": frozenset({"burnout"})}

def test_default_weights_budget():
    budget = sum(DEFAULT_WEIGHTS[k] for k in ("specialization", "experience", "rating", "verification", "availability"))
    assert budget == 100
    assert DEFAULT_WEIGHTS["bonuses"]["chronic"] == 5

def test_unknown_weights_profile():
    with pytest.raises(KeyError):
        load_weights("profile_does_not_exist")
