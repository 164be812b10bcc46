import pytest

from mcasset.models import AssetIndex, AssetObject, VersionInfo, VersionManifest


def test_manifest_parses_latest_and_versions(manifest_json):
    manifest = VersionManifest.from_json(manifest_json)
    assert manifest.latest_release == "1.20.4"
    assert manifest.latest_snapshot == "24w03a"
    assert [v.id for v in manifest.versions] == ["24w03a", "1.20.4", "1.20.3"]
    assert manifest.versions[1].type == "release"


def test_resolve_label_sentinels(manifest_json):
    manifest = VersionManifest.from_json(manifest_json)
    assert manifest.resolve_label("latest") == "1.20.4"
    assert manifest.resolve_label("latest-snapshot") == "24w03a"
    assert manifest.resolve_label("1.20.3") == "1.20.3"


def test_find_returns_none_for_unknown(manifest_json):
    manifest = VersionManifest.from_json(manifest_json)
    assert manifest.find("1.20.3").url == "https://meta.test/v/1.20.3.json"
    assert manifest.find("b1.7.3") is None


def test_manifest_missing_latest_raises():
    with pytest.raises(KeyError):
        VersionManifest.from_json({"versions": []})


def test_version_info_fields(make_version_info):
    info = VersionInfo.from_json(make_version_info("1.20.4"))
    assert info.id == "1.20.4"
    assert info.client_url == "https://meta.test/client/1.20.4.jar"
    assert info.asset_index_url == "https://meta.test/index/1.20.4.json"
    assert info.asset_index_id == "12"
    assert info.client_size == 100


def test_version_info_without_client_raises():
    with pytest.raises(KeyError):
        VersionInfo.from_json({"downloads": {}, "assetIndex": {"url": "x"}})


def test_asset_index_keeps_document_order():
    index = AssetIndex.from_json({"objects": {
        "z/last.ogg": {"hash": "aa" * 20, "size": 3},
        "a/first.ogg": {"hash": "bb" * 20, "size": 4},
    }})
    assert [path for path, _ in index.items()] == ["z/last.ogg", "a/first.ogg"]
    assert len(index) == 2
    assert index.total_size == 7


def test_asset_object_shard():
    assert AssetObject(hash="abcdef0123").shard == "ab"
