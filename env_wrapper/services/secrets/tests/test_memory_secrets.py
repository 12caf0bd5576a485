from env_wrapper.services.secrets.memory_secrets import MemorySecrets


def test_get_and_keys():
    secrets = MemorySecrets({"B": "2", "A": "1"})
    assert secrets.get("A") == "1"
    assert secrets.get("C") is None
    assert secrets.keys() == ["A", "B"]


def test_empty_by_default():
    assert MemorySecrets().keys() == []
