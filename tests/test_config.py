import pytest
from pydantic import ValidationError

from modprime.config import ModPrimeSettings


def test_defaults(monkeypatch):
    for var in ("MODPRIME_IS_PRIME_TRIALS", "MODPRIME_GENERATION_TRIALS", "MODPRIME_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    cfg = ModPrimeSettings(_env_file=None)

    assert cfg.is_prime_trials == 4
    assert cfg.generation_trials == 5
    assert cfg.default_bits == 2048
    assert cfg.log_level == "INFO"
    assert cfg.enable_metrics is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MODPRIME_IS_PRIME_TRIALS", "6")
    monkeypatch.setenv("MODPRIME_GENERATION_TRIALS", "12")
    monkeypatch.setenv("MODPRIME_LOG_LEVEL", " debug ")
    monkeypatch.setenv("MODPRIME_LOG_JSON", "false")

    cfg = ModPrimeSettings(_env_file=None)

    assert cfg.is_prime_trials == 6
    assert cfg.generation_trials == 12
    assert cfg.log_level == "DEBUG"
    assert cfg.log_json is False


@pytest.mark.parametrize(
    "var,value",
    [
        ("MODPRIME_IS_PRIME_TRIALS", "0"),
        ("MODPRIME_GENERATION_TRIALS", "-1"),
        ("MODPRIME_DEFAULT_BITS", "8"),
        ("MODPRIME_LOG_LEVEL", "chatty"),
        ("MODPRIME_ENV", "staging"),
    ],
)
def test_invalid_values_rejected(monkeypatch, var, value):
    monkeypatch.setenv(var, value)

    with pytest.raises(ValidationError):
        ModPrimeSettings(_env_file=None)
