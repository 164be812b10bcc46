"""
Data models for the version manifest, version info and asset index documents
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from mcasset import constants


@dataclass
class VersionSummary:
    """
    One entry of the version manifest's version list.

    Attributes:
        id: Version id (e.g. "1.20.4" or "24w03a")
        url: URL of the version info document
        type: Release type ("release", "snapshot", "old_beta", ...)
        release_time: Release timestamp as given by the manifest
    """
    id: str
    url: str
    type: str = ""
    release_time: str = ""

    @classmethod
    def from_json(cls, version_json: Dict[str, Any]) -> "VersionSummary":
        """Create a VersionSummary from JSON data."""
        return cls(
            id=version_json["id"],
            url=version_json["url"],
            type=version_json.get("type", ""),
            release_time=version_json.get("releaseTime", "")
        )


@dataclass
class VersionManifest:
    """
    The global version manifest.

    Attributes:
        latest_release: Id of the newest stable release
        latest_snapshot: Id of the newest snapshot
        versions: Version summaries in document order
    """
    latest_release: str
    latest_snapshot: str
    versions: List[VersionSummary] = field(default_factory=list)

    @classmethod
    def from_json(cls, manifest_json: Dict[str, Any]) -> "VersionManifest":
        """Create a VersionManifest from JSON data."""
        latest = manifest_json["latest"]
        return cls(
            latest_release=latest["release"],
            latest_snapshot=latest["snapshot"],
            versions=[VersionSummary.from_json(v) for v in manifest_json["versions"]]
        )

    def resolve_label(self, label: str) -> str:
        """Map the "latest" sentinels to concrete ids; other labels pass through."""
        if label == constants.LATEST_RELEASE:
            return self.latest_release
        if label == constants.LATEST_SNAPSHOT:
            return self.latest_snapshot
        return label

    def find(self, version_id: str) -> Optional[VersionSummary]:
        for version in self.versions:
            if version.id == version_id:
                return version
        return None


@dataclass
class VersionInfo:
    """
    Detail document for a single version.

    Attributes:
        id: Version id
        client_url: Download URL of the client archive
        asset_index_url: URL of the asset index document
        asset_index_id: Asset index id (e.g. "12")
        client_sha1: Declared SHA-1 of the client archive
        client_size: Declared size of the client archive
    """
    id: str
    client_url: str
    asset_index_url: str
    asset_index_id: str = ""
    client_sha1: str = ""
    client_size: int = 0

    @classmethod
    def from_json(cls, info_json: Dict[str, Any]) -> "VersionInfo":
        """Create a VersionInfo from JSON data."""
        client = info_json["downloads"]["client"]
        asset_index = info_json["assetIndex"]
        return cls(
            id=info_json.get("id", ""),
            client_url=client["url"],
            asset_index_url=asset_index["url"],
            asset_index_id=asset_index.get("id", ""),
            client_sha1=client.get("sha1", ""),
            client_size=int(client.get("size", 0))
        )


@dataclass
class AssetObject:
    """
    A content-addressed object listed in the asset index.

    Attributes:
        hash: Hex digest of the object contents
        size: Declared size in bytes
    """
    hash: str
    size: int = 0

    @property
    def shard(self) -> str:
        """Bucket directory in the object store."""
        return self.hash[:2]

    @classmethod
    def from_json(cls, object_json: Dict[str, Any]) -> "AssetObject":
        """Create an AssetObject from JSON data."""
        return cls(
            hash=object_json["hash"],
            size=int(object_json.get("size", 0))
        )


@dataclass
class AssetIndex:
    """
    Mapping of logical asset path to object descriptor.

    Attributes:
        objects: Descriptors keyed by logical path, in document order
    """
    objects: Dict[str, AssetObject] = field(default_factory=dict)

    @classmethod
    def from_json(cls, index_json: Dict[str, Any]) -> "AssetIndex":
        """Create an AssetIndex from JSON data."""
        return cls(objects={
            path: AssetObject.from_json(obj)
            for path, obj in index_json["objects"].items()
        })

    def __len__(self) -> int:
        return len(self.objects)

    def items(self) -> Iterator[Tuple[str, AssetObject]]:
        return iter(self.objects.items())

    @property
    def total_size(self) -> int:
        return sum(obj.size for obj in self.objects.values())
