from spinapp.keys import Key
from spinapp.providers import EnvProvider, Provider


def test_provider_get(monkeypatch):
    monkeypatch.setenv("TESTING_SPIN_ENV_KEY1", "val")
    assert EnvProvider("TESTING_SPIN").get(Key("env_key1")) == "val"


def test_provider_get_missing():
    key = Key("please_do_not_ever_set_this_during_tests")
    assert EnvProvider().get(key) is None


def test_provider_default_prefix_with_mapping():
    provider = EnvProvider(environ={"SPIN_APP_DB_HOST": "localhost"})
    assert provider.get(Key("db_host")) == "localhost"
    assert provider.get(Key("db_port")) is None


def test_custom_provider_subclass():
    class Fixed(Provider):
        def get(self, key):
            return f"value-{key}"

    assert Fixed().get(Key("abc")) == "value-abc"