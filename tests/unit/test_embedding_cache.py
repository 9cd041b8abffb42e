import json

from skillgate.modules.embeddings import EmbeddingCache
from skillgate.modules.embeddings.internal.cache import CACHE_VERSION, content_hash


def test_hit_returns_stored_vector():
    cache = EmbeddingCache()
    cache.store("k", "some text", [0.1, 0.2])

    assert cache.lookup("k", "some text") == [0.1, 0.2]
    assert cache.hits == 1


def test_changed_text_misses_and_evicts():
    cache = EmbeddingCache()
    cache.store("k", "old text", [1.0])

    assert cache.lookup("k", "new text") is None
    assert "k" not in cache
    assert cache.misses == 1


def test_lru_eviction_keeps_recently_used():
    cache = EmbeddingCache(max_entries=2)
    cache.store("a", "a", [1.0])
    cache.store("b", "b", [2.0])
    cache.lookup("a", "a")
    cache.store("c", "c", [3.0])

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache
    assert len(cache) == 2


def test_invalidate_and_clear():
    cache = EmbeddingCache()
    cache.store("a", "a", [1.0])
    cache.store("b", "b", [2.0])

    assert cache.invalidate("a") is True
    assert cache.invalidate("a") is False
    cache.clear()
    assert len(cache) == 0


def test_persisted_cache_survives_reload(tmp_path):
    path = tmp_path / "cache" / "embeddings.json"
    cache = EmbeddingCache(path=path)
    cache.store("heuristic-tf-8:skill:demo", "demo text", [0.5, 0.5])
    assert cache.save() is True

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["version"] == CACHE_VERSION
    entry = raw["entries"]["heuristic-tf-8:skill:demo"]
    assert entry["content_hash"] == content_hash("demo text")

    reloaded = EmbeddingCache(path=path)
    reloaded.load()
    assert reloaded.lookup("heuristic-tf-8:skill:demo", "demo text") == [0.5, 0.5]


def test_in_memory_cache_does_not_save():
    assert EmbeddingCache().save() is False


def test_corrupt_file_starts_empty(tmp_path, capsys):
    path = tmp_path / "embeddings.json"
    path.write_text("[1, 2", encoding="utf-8")
    cache = EmbeddingCache(path=path)
    cache.load()

    assert len(cache) == 0
    assert "Embedding cache unreadable" in capsys.readouterr().err


def test_wrong_version_starts_empty(tmp_path):
    path = tmp_path / "embeddings.json"
    path.write_text(json.dumps({"version": 2, "entries": {}}), encoding="utf-8")
    cache = EmbeddingCache(path=path)
    cache.load()

    assert len(cache) == 0


def test_content_hash_is_prefixed_sha256():
    digest = content_hash("abc")
    assert digest.startswith("sha256:")
    assert len(digest) == len("sha256:") + 64


def test_dirty_tracks_unsaved_changes(tmp_path):
    cache = EmbeddingCache(path=tmp_path / "embeddings.json")
    assert not cache.dirty

    cache.store("k", "text", [1.0])
    assert cache.dirty
    cache.save()
    assert not cache.dirty

    cache.lookup("k", "text")
    assert not cache.dirty
    cache.lookup("k", "changed")
    assert cache.dirty
