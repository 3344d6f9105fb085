from clientaddress.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.api.address_path == "clients/{client_id}/addresses"
    assert cfg.api.timeout_seconds == 30
    assert cfg.credentials.user_env == "CLIENTADDRESS_USER"
    assert cfg.credentials.user is None
    assert cfg.credentials.password is None
    assert cfg.logging.level == "WARNING"


def test_address_url_joins_base_and_path() -> None:
    cfg = load_config(env={})
    cfg.api.base_url = "https://api.test/v1/"
    assert cfg.api.address_url(42) == "https://api.test/v1/clients/42/addresses"


def test_address_url_custom_path() -> None:
    cfg = load_config(env={})
    cfg.api.base_url = "https://api.test"
    cfg.api.address_path = "/customers/{client_id}/address-list"
    assert cfg.api.address_url("7") == "https://api.test/customers/7/address-list"


def test_address_url_quotes_client_id() -> None:
    cfg = load_config(env={})
    cfg.api.base_url = "https://api.test"
    assert cfg.api.address_url("7/../admin") == "https://api.test/clients/7%2F..%2Fadmin/addresses"
    assert cfg.api.address_url("a b?c") == "https://api.test/clients/a%20b%3Fc/addresses"
