import pytest
from unittest.mock import patch
from pydantic import ValidationError

from goap_planner.config import PlannerConfig


def test_defaults():
    assert PlannerConfig().recency_penalty == 0.01


@patch("goap_planner.config.load_dotenv")
def test_from_env_reads_penalty(mock_load, monkeypatch):
    monkeypatch.setenv("GOAP_RECENCY_PENALTY", "0.5")
    config = PlannerConfig.from_env()
    assert config.recency_penalty == 0.5
    mock_load.assert_called_once()


@patch("goap_planner.config.load_dotenv")
def test_from_env_without_variable(mock_load, monkeypatch):
    monkeypatch.delenv("GOAP_RECENCY_PENALTY", raising=False)
    assert PlannerConfig.from_env().recency_penalty == 0.01


@patch("goap_planner.config.load_dotenv")
def test_from_env_rejects_negative(mock_load, monkeypatch):
    monkeypatch.setenv("GOAP_RECENCY_PENALTY", "-1")
    with pytest.raises(ValidationError):
        PlannerConfig.from_env()
