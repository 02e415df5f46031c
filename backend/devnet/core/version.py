"""
Version management for the API
"""
from devnet.__version__ import __version__

# API Version
API_VERSION = __version__

# Feature flags
FEATURES = {
    "legacy_token_header": True,
    "github_repos": True,
    "optimistic_concurrency": True,
}

def get_version_info():
    """Get version and feature information"""
    return {
        "version": API_VERSION,
        "features": FEATURES,
    }
