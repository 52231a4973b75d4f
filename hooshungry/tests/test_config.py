from hooshungry.api.config import (
    DEFAULT_CLIENT_CONFIG,
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    ClientConfig,
    load_config,
)


def test_defaults_when_environment_empty():
    cfg = load_config({})

    assert cfg.endpoint == "http://localhost:8080/graphql"
    assert cfg.timeout == DEFAULT_TIMEOUT
    assert cfg == DEFAULT_CLIENT_CONFIG


def test_blank_endpoint_falls_back_to_default():
    assert load_config({"HOOSHUNGRY_GQL": ""}).endpoint == DEFAULT_ENDPOINT
    assert load_config({"HOOSHUNGRY_GQL": "   "}).endpoint == DEFAULT_ENDPOINT


def test_endpoint_from_environment():
    cfg = load_config({"HOOSHUNGRY_GQL": "https://api.example.edu/graphql"})

    assert cfg.endpoint == "https://api.example.edu/graphql"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("HOOSHUNGRY_GQL", "http://10.0.0.5:9000/graphql")
    monkeypatch.setenv("HOOSHUNGRY_TIMEOUT", "2.5")

    assert load_config() == ClientConfig(endpoint="http://10.0.0.5:9000/graphql", timeout=2.5)


def test_invalid_timeout_uses_default():
    assert load_config({"HOOSHUNGRY_TIMEOUT": "soon"}).timeout == DEFAULT_TIMEOUT
    assert load_config({"HOOSHUNGRY_TIMEOUT": "0"}).timeout == DEFAULT_TIMEOUT
    assert load_config({"HOOSHUNGRY_TIMEOUT": "-3"}).timeout == DEFAULT_TIMEOUT
