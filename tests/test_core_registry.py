from wirebox.core.registry import SharedRegistry
from wirebox.core.singletons import Singleton, SingletonCache, is_singleton


class Service:
    pass


class Config(Singleton):
    def __init__(self, name: str = "default"):
        self.name = name


def test_share_under_own_class():
    registry = SharedRegistry()
    service = Service()
    key = registry.share(service)
    assert key is Service
    assert registry.get(Service) is service
    assert registry.is_shared(Service)


def test_share_under_explicit_key_and_overwrite():
    registry = SharedRegistry()
    first, second = Service(), Service()
    registry.share(first, object)
    registry.share(second, object)
    assert registry.get(object) is second
    assert registry.get(Service) is None


def test_remove():
    registry = SharedRegistry()
    registry.share(Service())
    registry.remove(Service)
    registry.remove(Service)
    assert Service not in registry
    assert len(registry) == 0


def test_singleton_marker():
    assert is_singleton(Config)
    assert not is_singleton(Service)
    assert not is_singleton(Config())


def test_singleton_cache_save_overwrites():
    cache = SingletonCache()
    first, second = Config("a"), Config("b")
    cache.save(first)
    cache.save(second)
    assert cache.get(Config) is second
    assert cache.get(Service) is None
    cache.clear()
    assert Config not in cache
