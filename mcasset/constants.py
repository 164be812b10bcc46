"""
Constants for launcher meta endpoints and extraction settings
"""

# Launcher meta endpoints
LAUNCHER_META = "https://launchermeta.mojang.com"
VERSION_MANIFEST_URL = f"{LAUNCHER_META}/mc/game/version_manifest.json"

# Content-addressed object store: {RESOURCES_URL}/{hash[:2]}/{hash}
RESOURCES_URL = "https://resources.download.minecraft.net"

# Version label sentinels
LATEST_RELEASE = "latest"
LATEST_SNAPSHOT = "latest-snapshot"

# Only archive entries under this prefix are extracted
ASSET_PREFIX = "assets"
ASSETS_DIR = "assets"

# No timeout: a stalled server blocks the run
DEFAULT_TIMEOUT = None

# Stream read size (16KB)
CHUNK_READ_SIZE = 16 * 1024

# Hash algorithm used by the asset index
ASSET_HASH_ALGORITHM = "sha1"

# User agent
USER_AGENT = "mcasset/{version} (Python)"
