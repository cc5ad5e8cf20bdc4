"""pkgmanifest — load, validate, and resolve package.toml manifests."""

__version__ = "0.1.0"
